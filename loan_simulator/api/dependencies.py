"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from loan_simulator.config import settings
from loan_simulator.domain.models import LoanLimits


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_loan_limits() -> LoanLimits:
    """Provide validation limits from configuration"""
    return LoanLimits(
        max_principal=settings.max_principal,
        max_rate_percent=settings.max_rate_percent,
        max_months=settings.max_months,
    )
