"""Unit tests for simulation input validation"""

import math
import pytest
from loan_simulator.domain.exceptions import InvalidLoanInputError
from loan_simulator.domain.models import LoanInput, ValidationErrors
from loan_simulator.domain.validation import (
    MONTHS_INVALID,
    MONTHS_TOO_HIGH,
    PRINCIPAL_INVALID,
    PRINCIPAL_TOO_HIGH,
    RATE_INVALID,
    RATE_TOO_HIGH,
    coerce_months,
    coerce_number,
    validate_loan_inputs,
)


def test_validate_accepts_pt_br_text():
    result = validate_loan_inputs("10.000,00", "2,5", "12")

    assert result == LoanInput(principal=10000.0, rate_percent=2.5, months=12)
    assert isinstance(result.months, int)


def test_validate_accepts_numbers():
    result = validate_loan_inputs(10000, 2.5, 12)
    assert result == LoanInput(principal=10000.0, rate_percent=2.5, months=12)


def test_validate_zero_rate_allowed():
    result = validate_loan_inputs("1000", "0", "10")
    assert isinstance(result, LoanInput)
    assert result.monthly_rate == 0


def test_validate_negative_principal():
    result = validate_loan_inputs("-5", "1", "10")

    assert isinstance(result, ValidationErrors)
    assert result.fields == ("principal",)
    assert result.messages == (PRINCIPAL_INVALID,)


def test_validate_reports_every_field_in_order():
    """All violations come back together, principal then rate then months"""
    result = validate_loan_inputs("", "abc", "0")

    assert isinstance(result, ValidationErrors)
    assert result.fields == ("principal", "rate", "months")
    assert result.messages == (PRINCIPAL_INVALID, RATE_INVALID, MONTHS_INVALID)


def test_validate_magnitude_errors_block():
    result = validate_loan_inputs("2.000.000.000,00", "250", "600")

    assert isinstance(result, ValidationErrors)
    assert result.messages == (PRINCIPAL_TOO_HIGH, RATE_TOO_HIGH, MONTHS_TOO_HIGH)


def test_validate_one_message_per_field():
    """A field that fails the basic rule is not also checked for magnitude"""
    result = validate_loan_inputs("0", "-300", "-481")
    assert result.messages == (PRINCIPAL_INVALID, RATE_INVALID, MONTHS_INVALID)


@pytest.mark.parametrize(
    "principal, rate, months",
    [
        ("1.000.000.000,00", "1", "12"),
        (1e9, 1, 12),
        ("1000", "200", "12"),
        ("1000", "1", "480"),
    ],
)
def test_validate_limits_are_inclusive(principal, rate, months):
    assert isinstance(validate_loan_inputs(principal, rate, months), LoanInput)


@pytest.mark.parametrize(
    "principal, rate, months, field, message",
    [
        ("1.000.000.000,01", "1", "12", "principal", PRINCIPAL_TOO_HIGH),
        (1e9 + 1, 1, 12, "principal", PRINCIPAL_TOO_HIGH),
        ("1000", "200,01", "12", "rate", RATE_TOO_HIGH),
        ("1000", "1", "481", "months", MONTHS_TOO_HIGH),
    ],
)
def test_validate_just_above_limits(principal, rate, months, field, message):
    result = validate_loan_inputs(principal, rate, months)

    assert isinstance(result, ValidationErrors)
    assert result.fields == (field,)
    assert result.messages == (message,)


@pytest.mark.parametrize(
    "months", ["12,5", "0", "-3", "", "doze", "12 meses", "1e3", "1,2,3", "inf", 12.5, float("inf")]
)
def test_validate_months_must_be_positive_integer(months):
    result = validate_loan_inputs("1000", "1", months)

    assert isinstance(result, ValidationErrors)
    assert result.fields == ("months",)


def test_validate_months_integral_float_accepted():
    result = validate_loan_inputs("1000", "1", "12,0")
    assert result.months == 12


def test_validate_months_reads_exponent_literal():
    """An exponent literal like "1e2" means 100 installments, not 12"""
    assert validate_loan_inputs("1000", "1", "1e2").months == 100
    assert validate_loan_inputs("1000", "1", " 24 ").months == 24


def test_coerce_months_is_strict():
    assert math.isnan(coerce_months("12 meses"))
    assert math.isnan(coerce_months("R$ 12"))
    assert math.isnan(coerce_months(True))
    assert coerce_months("12,0") == 12.0
    assert coerce_months(36) == 36.0


def test_validate_uses_custom_limits(tight_limits):
    result = validate_loan_inputs("6.000,00", "12", "36", tight_limits)
    assert result.messages == (PRINCIPAL_TOO_HIGH, RATE_TOO_HIGH, MONTHS_TOO_HIGH)

    assert isinstance(validate_loan_inputs("5.000,00", "10", "24", tight_limits), LoanInput)


def test_coerce_number():
    assert coerce_number("1.234,5") == 1234.5
    assert coerce_number(7) == 7.0
    assert math.isnan(coerce_number(True))
    assert math.isnan(coerce_number([1]))
    assert math.isnan(coerce_number(None))
    assert coerce_number(10**400) == math.inf


def test_loan_input_rejects_invalid_values():
    """LoanInput guards its own invariants"""
    with pytest.raises(InvalidLoanInputError):
        LoanInput(principal=math.nan, rate_percent=1.0, months=12)
    with pytest.raises(InvalidLoanInputError):
        LoanInput(principal=1000.0, rate_percent=-1.0, months=12)
    with pytest.raises(InvalidLoanInputError):
        LoanInput(principal=1000.0, rate_percent=1.0, months=0)
    with pytest.raises(InvalidLoanInputError):
        LoanInput(principal=1000.0, rate_percent=1.0, months=12.0)
