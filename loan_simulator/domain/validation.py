"""Input validation for loan simulations"""

import math
import re
from typing import Any, List

from loan_simulator.domain.models import FieldError, LoanInput, LoanLimits, ValidationErrors
from loan_simulator.utils.locale_decimal import parse_locale_decimal

DEFAULT_LIMITS = LoanLimits()

PRINCIPAL_INVALID = "Informe um valor de empréstimo válido (maior que zero)."
PRINCIPAL_TOO_HIGH = "O valor do empréstimo está muito alto. Revise o número informado."
RATE_INVALID = "Informe uma taxa de juros mensal válida (0 ou maior)."
RATE_TOO_HIGH = "A taxa ao mês parece muito alta. Confirme se você informou a taxa mensal (a.m.)."
MONTHS_INVALID = "Informe um número de parcelas válido (inteiro, maior que zero)."
MONTHS_TOO_HIGH = "O número de parcelas está muito alto. Confirme o prazo do contrato."

_NUMERIC_LITERAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def coerce_number(raw: Any) -> float:
    """Turn a raw field (pt-BR text or a number) into a float, NaN if impossible"""
    if isinstance(raw, bool):
        return math.nan
    if isinstance(raw, (int, float)):
        try:
            return float(raw)
        except OverflowError:
            return math.inf if raw > 0 else -math.inf
    if raw is None or isinstance(raw, str):
        return parse_locale_decimal(raw)
    return math.nan


def coerce_months(raw: Any) -> float:
    """
    Read the installment count as a plain numeric literal.

    Unlike money fields nothing is stripped: "12 meses" is NaN and "1e2" is
    100. A single comma is accepted as the decimal point ("12,0").
    """
    if not isinstance(raw, str):
        return coerce_number(raw)
    text = raw.strip()
    if "," in text and "." not in text:
        text = text.replace(",", ".", 1)
    if not _NUMERIC_LITERAL.fullmatch(text):
        return math.nan
    return float(text)


def validate_loan_inputs(
    raw_principal: Any,
    raw_rate_percent: Any,
    raw_months: Any,
    limits: LoanLimits = DEFAULT_LIMITS,
) -> LoanInput | ValidationErrors:
    """
    Parse and check the three simulation fields.

    Every field is checked, so the caller gets all problems at once. Each
    field reports at most one message: either the basic rule (finite,
    positive, integer) or, once that passes, the magnitude rule. Magnitude
    violations block the simulation just like the basic ones.

    Returns:
        LoanInput when every rule passes, otherwise ValidationErrors with
        the messages ordered principal, rate, months.
    """
    principal = coerce_number(raw_principal)
    rate_percent = coerce_number(raw_rate_percent)
    months = coerce_months(raw_months)

    errors: List[FieldError] = []

    if not math.isfinite(principal) or principal <= 0:
        errors.append(FieldError("principal", PRINCIPAL_INVALID))
    elif principal > limits.max_principal:
        errors.append(FieldError("principal", PRINCIPAL_TOO_HIGH))

    if not math.isfinite(rate_percent) or rate_percent < 0:
        errors.append(FieldError("rate", RATE_INVALID))
    elif rate_percent > limits.max_rate_percent:
        errors.append(FieldError("rate", RATE_TOO_HIGH))

    if not math.isfinite(months) or months <= 0 or not months.is_integer():
        errors.append(FieldError("months", MONTHS_INVALID))
    elif months > limits.max_months:
        errors.append(FieldError("months", MONTHS_TOO_HIGH))

    if errors:
        return ValidationErrors(errors=tuple(errors))

    return LoanInput(principal=principal, rate_percent=rate_percent, months=int(months))
