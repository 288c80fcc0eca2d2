from __future__ import annotations

import pytest

from fd_backend.core.validation import validate
from fd_backend.schemas.deposit import CompoundingFrequency, ErrorCode


def valid_form() -> dict:
    return {
        "principal": 100000,
        "annual_rate_percent": 6.5,
        "tenure_years": 5,
        "compounding_frequency": "annually",
    }


def codes(result) -> list:
    return [(error.field, error.code) for error in result.errors]


def test_valid_form_produces_request():
    result = validate(valid_form())

    assert result.ok
    assert result.errors == []
    request = result.value
    assert request.principal == 100000.0
    assert request.annual_rate_percent == 6.5
    assert request.tenure_years == 5.0
    assert request.compounding_frequency is CompoundingFrequency.ANNUAL


def test_numeric_strings_are_coerced():
    form = valid_form()
    form.update(principal=" 2500.50 ", annual_rate_percent="7", tenure_years="2.5")

    result = validate(form)

    assert result.ok
    assert result.value.principal == 2500.5
    assert result.value.tenure_years == 2.5


def test_rate_of_exactly_100_is_allowed():
    form = valid_form()
    form["annual_rate_percent"] = 100

    assert validate(form).ok


@pytest.mark.parametrize(
    "field, raw, code",
    [
        ("principal", 0, ErrorCode.NOT_POSITIVE),
        ("principal", -5, ErrorCode.NOT_POSITIVE),
        ("principal", "abc", ErrorCode.NOT_A_NUMBER),
        ("principal", "", ErrorCode.NOT_A_NUMBER),
        ("principal", None, ErrorCode.NOT_A_NUMBER),
        ("principal", "inf", ErrorCode.NOT_A_NUMBER),
        ("principal", 10**400, ErrorCode.NOT_A_NUMBER),
        ("principal", "1e400", ErrorCode.NOT_A_NUMBER),
        ("principal", [1], ErrorCode.NOT_A_NUMBER),
        ("principal", "  ", ErrorCode.NOT_A_NUMBER),
        ("annual_rate_percent", 0, ErrorCode.NOT_POSITIVE),
        ("annual_rate_percent", 150, ErrorCode.OUT_OF_RANGE),
        ("annual_rate_percent", 100.01, ErrorCode.OUT_OF_RANGE),
        ("annual_rate_percent", "100.01", ErrorCode.OUT_OF_RANGE),
        ("annual_rate_percent", "nan", ErrorCode.NOT_A_NUMBER),
        ("tenure_years", 0, ErrorCode.NOT_POSITIVE),
        ("tenure_years", True, ErrorCode.NOT_A_NUMBER),
        ("compounding_frequency", "weekly", ErrorCode.INVALID_FREQUENCY_TOKEN),
        ("compounding_frequency", "Monthly", ErrorCode.INVALID_FREQUENCY_TOKEN),
        ("compounding_frequency", 12, ErrorCode.INVALID_FREQUENCY_TOKEN),
        ("compounding_frequency", None, ErrorCode.INVALID_FREQUENCY_TOKEN),
    ],
)
def test_single_bad_field_is_reported(field, raw, code):
    form = valid_form()
    form[field] = raw

    result = validate(form)

    assert not result.ok
    assert result.value is None
    assert codes(result) == [(field, code)]


def test_missing_fields_are_all_reported():
    result = validate({})

    assert codes(result) == [
        ("principal", ErrorCode.NOT_A_NUMBER),
        ("annual_rate_percent", ErrorCode.NOT_A_NUMBER),
        ("tenure_years", ErrorCode.NOT_A_NUMBER),
        ("compounding_frequency", ErrorCode.INVALID_FREQUENCY_TOKEN),
    ]


def test_every_violation_is_collected():
    result = validate(
        {
            "principal": -5,
            "annual_rate_percent": 150,
            "tenure_years": 0,
            "compounding_frequency": "weekly",
        }
    )

    assert result.value is None
    assert codes(result) == [
        ("principal", ErrorCode.NOT_POSITIVE),
        ("annual_rate_percent", ErrorCode.OUT_OF_RANGE),
        ("tenure_years", ErrorCode.NOT_POSITIVE),
        ("compounding_frequency", ErrorCode.INVALID_FREQUENCY_TOKEN),
    ]


def test_error_messages_match_form_wording():
    result = validate({"principal": 0, "annual_rate_percent": 101, "tenure_years": -1, "compounding_frequency": "monthly"})

    messages = [error.message for error in result.errors]
    assert messages == [
        "Principal amount must be greater than 0.",
        "Interest rate cannot be more than 100%.",
        "Tenure must be greater than 0.",
    ]


def test_enum_member_is_accepted_as_frequency():
    form = valid_form()
    form["compounding_frequency"] = CompoundingFrequency.QUARTERLY

    assert validate(form).value.compounding_frequency is CompoundingFrequency.QUARTERLY


def test_validate_does_not_touch_input():
    form = valid_form()
    snapshot = dict(form)

    validate(form)

    assert form == snapshot


@pytest.mark.parametrize(
    "token, frequency",
    [
        ("annually", CompoundingFrequency.ANNUAL),
        ("half-yearly", CompoundingFrequency.HALF_YEARLY),
        ("quarterly", CompoundingFrequency.QUARTERLY),
        ("monthly", CompoundingFrequency.MONTHLY),
    ],
)
def test_every_frequency_token_is_accepted(token, frequency):
    form = valid_form()
    form["compounding_frequency"] = token

    result = validate(form)

    assert result.ok
    assert result.value.compounding_frequency is frequency
    assert result.value.compounding_frequency.periods_per_year == frequency.value


def test_huge_integer_principal_is_reported_not_raised():
    form = valid_form()
    form["principal"] = 10**400

    result = validate(form)

    assert result.value is None
    assert codes(result) == [("principal", ErrorCode.NOT_A_NUMBER)]
    assert result.errors[0].message == "Principal amount must be a number."


def test_unknown_keys_are_ignored():
    form = valid_form()
    form["currency"] = "INR"

    assert validate(form).ok
