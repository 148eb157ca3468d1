"""Fixed-installment (PMT) loan calculation"""

import math
from typing import Any

from loan_simulator.domain.models import (
    ComputationError,
    LoanInput,
    LoanLimits,
    LoanResult,
    ValidationErrors,
)
from loan_simulator.domain.validation import DEFAULT_LIMITS, validate_loan_inputs

COMPUTATION_FAILED = "Não foi possível calcular com os valores informados. Revise taxa e parcelas."


def calculate_installment(principal: float, monthly_rate: float, months: int) -> float:
    """
    Fixed payment of a fully amortizing loan: PMT = P * i / (1 - (1 + i)^-n)

    Args:
        principal: Amount borrowed
        monthly_rate: Periodic rate as a fraction (0.02 for 2% a.m.)
        months: Number of installments

    Returns:
        The installment, or NaN when months <= 0 or the denominator
        collapses to zero (rate too small to move 1 + i off 1.0)

    Example:
        10000 at 0.02 over 12 months -> 945.596...
    """
    if months <= 0:
        return math.nan

    # Zero rate is the 0/0 limit of the general formula
    if monthly_rate == 0:
        return principal / months

    denominator = 1 - (1 + monthly_rate) ** -months
    if denominator == 0:
        return math.nan
    return principal * (monthly_rate / denominator)


def calculate_loan(loan_input: LoanInput) -> LoanResult | ComputationError:
    """Apply the PMT formula to validated input and derive the totals"""
    installment = calculate_installment(
        loan_input.principal, loan_input.monthly_rate, loan_input.months
    )

    if not math.isfinite(installment) or installment <= 0:
        return ComputationError(message=COMPUTATION_FAILED)

    total_paid = installment * loan_input.months
    return LoanResult(
        installment=installment,
        total_paid=total_paid,
        total_interest=total_paid - loan_input.principal,
    )


def compute_loan(
    raw_principal: Any,
    raw_rate_percent: Any,
    raw_months: Any,
    limits: LoanLimits = DEFAULT_LIMITS,
) -> LoanResult | ValidationErrors | ComputationError:
    """
    Validate raw simulation fields and compute the installment.

    Both failure kinds are returned, not raised. ValidationErrors means the
    input was rejected before any arithmetic; ComputationError means valid
    input still produced a non-finite or non-positive installment.
    """
    validated = validate_loan_inputs(raw_principal, raw_rate_percent, raw_months, limits)
    if isinstance(validated, ValidationErrors):
        return validated
    return calculate_loan(validated)
