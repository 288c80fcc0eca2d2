"""Validation of raw calculator inputs into a DepositRequest."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from pydantic import ValidationError

from fd_backend.schemas.deposit import DepositRequest, ErrorCode, FieldError

logger = logging.getLogger(__name__)

PRINCIPAL = "principal"
ANNUAL_RATE_PERCENT = "annual_rate_percent"
TENURE_YEARS = "tenure_years"
COMPOUNDING_FREQUENCY = "compounding_frequency"

# pydantic error type -> field-scoped code; unlisted types on a numeric field are NOT_A_NUMBER
_CODES_BY_TYPE: Dict[str, ErrorCode] = {
    "missing": ErrorCode.NOT_A_NUMBER,
    "float_type": ErrorCode.NOT_A_NUMBER,
    "float_parsing": ErrorCode.NOT_A_NUMBER,
    "finite_number": ErrorCode.NOT_A_NUMBER,
    "greater_than": ErrorCode.NOT_POSITIVE,
    "less_than_equal": ErrorCode.OUT_OF_RANGE,
    "enum": ErrorCode.INVALID_FREQUENCY_TOKEN,
    "literal_error": ErrorCode.INVALID_FREQUENCY_TOKEN,
}

_LABELS = {
    PRINCIPAL: "Principal amount",
    ANNUAL_RATE_PERCENT: "Interest rate",
    TENURE_YEARS: "Tenure",
}

_FREQUENCY_MESSAGE = "Compounding frequency must be one of: annually, half-yearly, quarterly, monthly."


@dataclass(frozen=True)
class ValidationResult:
    value: Optional[DepositRequest] = None
    errors: List[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def _message(name: str, code: ErrorCode) -> str:
    if code is ErrorCode.INVALID_FREQUENCY_TOKEN:
        return _FREQUENCY_MESSAGE
    if code is ErrorCode.OUT_OF_RANGE:
        return "Interest rate cannot be more than 100%."
    if code is ErrorCode.NOT_POSITIVE:
        return f"{_LABELS[name]} must be greater than 0."
    return f"{_LABELS[name]} must be a number."


def _to_field_error(error: Dict[str, Any]) -> FieldError:
    name = str(error["loc"][0])
    if name == COMPOUNDING_FREQUENCY:
        code = ErrorCode.INVALID_FREQUENCY_TOKEN
    else:
        code = _CODES_BY_TYPE.get(error["type"], ErrorCode.NOT_A_NUMBER)
        if code is ErrorCode.INVALID_FREQUENCY_TOKEN:
            code = ErrorCode.NOT_A_NUMBER
    return FieldError(field=name, code=code, message=_message(name, code))


def validate(raw: Mapping[str, Any]) -> ValidationResult:
    """Check every field of ``raw`` and collect all problems in one pass."""
    try:
        request = DepositRequest.model_validate(dict(raw))
    except ValidationError as exc:
        errors = [_to_field_error(error) for error in exc.errors()]
        logger.debug("Rejected deposit input: %s", [(e.field, e.code.value) for e in errors])
        return ValidationResult(errors=errors)
    return ValidationResult(value=request)
