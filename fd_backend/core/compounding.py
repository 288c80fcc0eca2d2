"""Compound interest engine for fixed deposits."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional

from fd_backend.core.validation import validate
from fd_backend.schemas.deposit import DepositRequest, DepositResult, FieldError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalculationResult:
    value: Optional[DepositResult] = None
    request: Optional[DepositRequest] = None
    errors: List[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def compute(request: DepositRequest) -> DepositResult:
    """Apply periodic compounding: P * (1 + r/n) ** (n * t).

    The exponent is a real number, so fractional tenures compound over a
    fractional number of periods. No rounding happens here.
    """
    n = request.compounding_frequency.periods_per_year
    r = request.annual_rate_percent / 100
    t = request.tenure_years

    periodic_rate = r / n
    number_of_periods = n * t
    try:
        grown = request.principal * (1 + periodic_rate) ** number_of_periods
    except OverflowError:
        grown = math.inf

    # maturity is rebuilt from the interest so principal + interest == maturity exactly
    total_interest = grown - request.principal
    maturity_value = request.principal + total_interest

    return DepositResult(
        principal=request.principal,
        maturity_value=maturity_value,
        total_interest=total_interest,
    )


def calculate(raw: Mapping[str, Any]) -> CalculationResult:
    """Validate raw inputs and compute the deposit only when they are valid."""
    validation = validate(raw)
    if not validation.ok:
        return CalculationResult(errors=validation.errors)

    result = compute(validation.value)
    logger.info(
        "Deposit calculated: principal=%s rate=%s tenure=%s frequency=%s maturity=%s",
        result.principal,
        validation.value.annual_rate_percent,
        validation.value.tenure_years,
        validation.value.compounding_frequency.token,
        result.maturity_value,
    )
    return CalculationResult(value=result, request=validation.value)
