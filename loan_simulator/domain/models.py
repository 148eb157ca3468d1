"""Domain models - immutable value types for a loan simulation"""

import math
from dataclasses import dataclass
from typing import Tuple

from loan_simulator.domain.exceptions import InvalidLoanInputError


@dataclass(frozen=True)
class LoanLimits:
    """Magnitude bounds above which an otherwise valid input is rejected"""

    max_principal: float = 1e9
    max_rate_percent: float = 200.0
    max_months: int = 480


@dataclass(frozen=True)
class LoanInput:
    """Validated simulation input. Only the validator should build one."""

    principal: float
    rate_percent: float  # monthly, as percent (2 means 2% a.m.)
    months: int

    def __post_init__(self) -> None:
        if not all(math.isfinite(v) for v in (self.principal, self.rate_percent, self.months)):
            raise InvalidLoanInputError(f"Non-finite loan input: {self}")
        if self.principal < 0 or self.rate_percent < 0:
            raise InvalidLoanInputError(f"Negative loan input: {self}")
        if not isinstance(self.months, int) or self.months <= 0:
            raise InvalidLoanInputError(f"Months must be a positive integer, got {self.months!r}")

    @property
    def monthly_rate(self) -> float:
        return self.rate_percent / 100


@dataclass(frozen=True)
class LoanResult:
    """Output of a successful simulation"""

    installment: float
    total_paid: float
    total_interest: float


@dataclass(frozen=True)
class FieldError:
    """Single violated rule and the field that triggered it"""

    field: str  # "principal" | "rate" | "months"
    message: str


@dataclass(frozen=True)
class ValidationErrors:
    """Every rule violated by the raw input, ordered principal, rate, months"""

    errors: Tuple[FieldError, ...]

    @property
    def fields(self) -> Tuple[str, ...]:
        return tuple(error.field for error in self.errors)

    @property
    def messages(self) -> Tuple[str, ...]:
        return tuple(error.message for error in self.errors)


@dataclass(frozen=True)
class ComputationError:
    """Validated input produced a degenerate installment"""

    message: str
