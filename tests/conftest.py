"""Pytest fixtures for testing"""

import pytest
from fastapi.testclient import TestClient
from loan_simulator.api.main import create_app
from loan_simulator.domain.models import LoanLimits


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    return TestClient(create_app())


@pytest.fixture
def tight_limits() -> LoanLimits:
    """Limits small enough to trip the magnitude rules with everyday values"""
    return LoanLimits(max_principal=5_000, max_rate_percent=10, max_months=24)


@pytest.fixture
def standard_loan() -> dict:
    """R$ 10.000,00 at 2% a.m. over 12 installments"""
    return {"principal": "10.000,00", "rate_percent": "2", "months": "12"}
