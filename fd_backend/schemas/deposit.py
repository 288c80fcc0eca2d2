"""Data contracts for fixed deposit calculations."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Dict, List

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_serializer
from pydantic_core import PydanticCustomError


class CompoundingFrequency(Enum):
    """Supported compounding frequencies; the value is periods per year."""

    ANNUAL = 1
    HALF_YEARLY = 2
    QUARTERLY = 4
    MONTHLY = 12

    @property
    def periods_per_year(self) -> int:
        return self.value

    @property
    def token(self) -> str:
        return _TOKENS_BY_MEMBER[self]

    @property
    def label(self) -> str:
        return _LABELS[self]


# Order matters: this is also the display order of the form options.
FREQUENCY_TOKENS: Dict[str, CompoundingFrequency] = {
    "annually": CompoundingFrequency.ANNUAL,
    "half-yearly": CompoundingFrequency.HALF_YEARLY,
    "quarterly": CompoundingFrequency.QUARTERLY,
    "monthly": CompoundingFrequency.MONTHLY,
}

_TOKENS_BY_MEMBER = {member: token for token, member in FREQUENCY_TOKENS.items()}

_LABELS = {
    CompoundingFrequency.ANNUAL: "Annually",
    CompoundingFrequency.HALF_YEARLY: "Half-Yearly",
    CompoundingFrequency.QUARTERLY: "Quarterly",
    CompoundingFrequency.MONTHLY: "Monthly",
}


class ErrorCode(str, Enum):
    NOT_A_NUMBER = "NOT_A_NUMBER"
    NOT_POSITIVE = "NOT_POSITIVE"
    OUT_OF_RANGE = "OUT_OF_RANGE"
    INVALID_FREQUENCY_TOKEN = "INVALID_FREQUENCY_TOKEN"


class FieldError(BaseModel):
    """A single rejected input field."""

    model_config = ConfigDict(frozen=True)

    field: str
    code: ErrorCode
    message: str


def _prepare_number(raw: Any) -> Any:
    """Reject inputs that lax float parsing would accept or crash on."""
    if isinstance(raw, bool):
        raise PydanticCustomError("float_type", "Input should be a valid number")
    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            raise PydanticCustomError("float_parsing", "Input should be a valid number")
    elif isinstance(raw, int):
        try:
            float(raw)
        except OverflowError:
            raise PydanticCustomError("finite_number", "Input should be a finite number")
    return raw


def _prepare_frequency(raw: Any) -> Any:
    """Map an exact token to its member; anything else is rejected."""
    if isinstance(raw, CompoundingFrequency):
        return raw
    if isinstance(raw, str) and raw in FREQUENCY_TOKENS:
        return FREQUENCY_TOKENS[raw]
    raise PydanticCustomError(
        "enum",
        "Input should be {expected}",
        {"expected": ", ".join(FREQUENCY_TOKENS)},
    )


FormNumber = Annotated[float, BeforeValidator(_prepare_number), Field(allow_inf_nan=False)]
FrequencyToken = Annotated[CompoundingFrequency, BeforeValidator(_prepare_frequency)]


class DepositRequest(BaseModel):
    """Validated inputs for a single deposit calculation.

    Accepts raw form values: numeric strings are parsed, frequency tokens
    are looked up in ``FREQUENCY_TOKENS``.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    principal: FormNumber = Field(..., gt=0, description="Amount deposited.")
    annual_rate_percent: FormNumber = Field(
        ...,
        gt=0,
        le=100,
        description="Annual nominal rate expressed as a percentage (e.g. 6.5 for 6.5%).",
    )
    tenure_years: FormNumber = Field(
        ...,
        gt=0,
        description="Deposit tenure in years; fractional years are allowed.",
    )
    compounding_frequency: FrequencyToken

    @field_serializer("compounding_frequency")
    def _dump_frequency(self, frequency: CompoundingFrequency) -> str:
        return frequency.token


class DepositResult(BaseModel):
    """Principal, interest and maturity value of a deposit."""

    model_config = ConfigDict(frozen=True, ser_json_inf_nan="strings")

    principal: float
    maturity_value: float
    total_interest: float


class ChartSlice(BaseModel):
    model_config = ConfigDict(ser_json_inf_nan="strings")

    name: str
    label: str
    value: float
    share: float = Field(..., ge=0, le=1)


class FormattedFigure(BaseModel):
    model_config = ConfigDict(ser_json_inf_nan="strings")

    label: str
    value: float
    display: str


class DepositSummary(BaseModel):
    """Payload returned to the calculator UI after a successful calculation."""

    # an overflowing maturity value is emitted as "Infinity" so the body stays valid JSON
    model_config = ConfigDict(ser_json_inf_nan="strings")

    request: DepositRequest
    result: DepositResult
    figures: List[FormattedFigure]
    breakdown: List[ChartSlice]


class FrequencyOption(BaseModel):
    value: str
    label: str
    periods_per_year: int


class FormDefaults(BaseModel):
    principal: float
    annual_rate_percent: float
    tenure_years: float
    compounding_frequency: str


class FormOptions(BaseModel):
    defaults: FormDefaults
    frequencies: List[FrequencyOption]
