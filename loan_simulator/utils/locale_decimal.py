"""pt-BR number parsing and formatting (10.000,50 <-> 10000.5)"""

import math
import re
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Tuple

from loan_simulator.config import settings

_NOT_NUMERIC = re.compile(r"[^0-9.,-]")

NBSP = "\u00a0"


def parse_locale_decimal(text: str | None) -> float:
    """
    Convert pt-BR formatted text into a float.

    Anything other than digits, ",", "." and "-" is dropped first, so
    "R$ 10.000,50" parses the same as "10.000,50". When a comma is present
    periods are thousands separators and the comma is the decimal point;
    otherwise the text is read as a plain decimal literal ("1.5" -> 1.5).

    Returns:
        The parsed value, or NaN for blank or unparseable text. Never raises.
    """
    raw = "" if text is None else str(text).strip()
    if not raw:
        return math.nan

    cleaned = _NOT_NUMERIC.sub("", raw)
    if "," in cleaned:
        cleaned = cleaned.replace(".", "").replace(",", ".", 1)

    if not cleaned:
        return math.nan
    try:
        return float(cleaned)
    except ValueError:
        return math.nan


def _split_rounded(value: float, fraction_digits: int) -> Tuple[str, str, str]:
    """Round half away from zero and return (sign, grouped integer, fraction)"""
    exact = Decimal(repr(value))
    with localcontext() as ctx:
        ctx.prec = max(28, exact.adjusted() + fraction_digits + 2)
        rounded = exact.quantize(Decimal(1).scaleb(-fraction_digits), rounding=ROUND_HALF_UP)
        sign = "-" if rounded < 0 else ""
        integer, _, fraction = f"{abs(rounded):,f}".partition(".")
    return sign, integer.replace(",", "."), fraction


def format_locale_decimal(value: float, max_fraction_digits: int = 2, min_fraction_digits: int = 0) -> str:
    """Render value as pt-BR text with at most max_fraction_digits decimals.

    Trailing fractional zeros beyond min_fraction_digits are dropped:
    1500.5 -> "1.500,5", or "1.500,50" with min_fraction_digits=2.
    Non-finite values are the caller's problem.
    """
    max_fraction_digits = max(0, max_fraction_digits)
    sign, integer, fraction = _split_rounded(value, max_fraction_digits)
    fraction = fraction.rstrip("0").ljust(min(min_fraction_digits, max_fraction_digits), "0")
    return f"{sign}{integer},{fraction}" if fraction else f"{sign}{integer}"


def format_brl(value: float) -> str:
    """Render value as Brazilian Real currency text, e.g. "R$ 1.347,15"."""
    sign, integer, fraction = _split_rounded(value, 2)
    return f"{sign}R${NBSP}{integer},{fraction}"


def clamp_magnitude(value: float, minimum: float, maximum: float) -> float:
    return min(maximum, max(minimum, value))


def _normalize(text: str, maximum: float) -> str:
    value = parse_locale_decimal(text)
    if not math.isfinite(value):
        return text
    # Output must parse back to the value it displays
    return format_locale_decimal(clamp_magnitude(value, 0, maximum), 2, min_fraction_digits=2)


def normalize_currency_input(text: str) -> str:
    """Reformat a typed money amount for display; unparseable text is kept as is"""
    return _normalize(text, settings.currency_display_max)


def normalize_percent_input(text: str) -> str:
    """Reformat a typed percentage for display; unparseable text is kept as is"""
    return _normalize(text, settings.percent_display_max)
