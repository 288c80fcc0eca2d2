"""Display helpers for the calculator UI.

Everything here works on copies of engine output; rounded values never go
back into a calculation.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import List

from fd_backend.schemas.deposit import (
    FREQUENCY_TOKENS,
    ChartSlice,
    CompoundingFrequency,
    DepositRequest,
    DepositResult,
    DepositSummary,
    FormDefaults,
    FormattedFigure,
    FormOptions,
    FrequencyOption,
)

CURRENCY_SYMBOL = "₹"

DEFAULT_PRINCIPAL = 100000.0
DEFAULT_RATE_PERCENT = 6.5
DEFAULT_TENURE_YEARS = 5.0
DEFAULT_FREQUENCY = CompoundingFrequency.ANNUAL


def _group_indian(digits: str) -> str:
    """Group an integer string as 12,34,56,789."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


def format_inr(value: float) -> str:
    """Format ``value`` as rupees with two decimals, e.g. ``₹1,37,008.67``."""
    if not math.isfinite(value):
        return f"{CURRENCY_SYMBOL}∞" if value > 0 else f"-{CURRENCY_SYMBOL}∞"

    with localcontext() as ctx:
        # wide enough for the integer part of any finite float
        ctx.prec = 400
        amount = Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
        sign = "-" if amount < 0 else ""
        whole, fraction = f"{abs(amount):.2f}".split(".")
    return f"{sign}{CURRENCY_SYMBOL}{_group_indian(whole)}.{fraction}"


def breakdown(result: DepositResult) -> List[ChartSlice]:
    """Principal and interest slices for the proportion chart."""
    total = result.maturity_value
    if math.isfinite(total) and total > 0:
        principal_share = result.principal / total
    else:
        principal_share = 0.0
    return [
        ChartSlice(
            name="principal",
            label="Principal",
            value=result.principal,
            share=principal_share,
        ),
        ChartSlice(
            name="interest",
            label="Interest",
            value=result.total_interest,
            share=1 - principal_share,
        ),
    ]


def summarize(request: DepositRequest, result: DepositResult) -> DepositSummary:
    figures = [
        FormattedFigure(label="Invested Amount", value=result.principal, display=format_inr(result.principal)),
        FormattedFigure(
            label="Total Interest",
            value=result.total_interest,
            display=format_inr(result.total_interest),
        ),
        FormattedFigure(
            label="Maturity Value",
            value=result.maturity_value,
            display=format_inr(result.maturity_value),
        ),
    ]
    return DepositSummary(request=request, result=result, figures=figures, breakdown=breakdown(result))


def form_options() -> FormOptions:
    return FormOptions(
        defaults=FormDefaults(
            principal=DEFAULT_PRINCIPAL,
            annual_rate_percent=DEFAULT_RATE_PERCENT,
            tenure_years=DEFAULT_TENURE_YEARS,
            compounding_frequency=DEFAULT_FREQUENCY.token,
        ),
        frequencies=[
            FrequencyOption(value=token, label=member.label, periods_per_year=member.periods_per_year)
            for token, member in FREQUENCY_TOKENS.items()
        ],
    )
