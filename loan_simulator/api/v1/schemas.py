"""Pydantic schemas for API request/response validation"""

from typing import List, Literal

from pydantic import BaseModel, Field, StrictFloat, StrictInt, StrictStr


class SimulationRequest(BaseModel):
    """Request body for POST /v1/simulation. Fields accept pt-BR text or numbers, never booleans."""

    principal: StrictStr | StrictFloat | StrictInt | None = Field(None, description="Loan amount, e.g. \"10.000,50\"")
    rate_percent: StrictStr | StrictFloat | StrictInt | None = Field(None, description="Monthly interest rate in percent")
    months: StrictStr | StrictFloat | StrictInt | None = Field(None, description="Number of monthly installments")


class DisplayAmounts(BaseModel):
    """Currency text for each simulated amount"""

    installment: str
    total_paid: str
    total_interest: str


class SimulationResponse(BaseModel):
    """Response for POST /v1/simulation"""

    installment: float
    total_paid: float
    total_interest: float
    display: DisplayAmounts


class FieldErrorSchema(BaseModel):
    """Single rejected field"""

    field: str
    message: str


class ValidationErrorResponse(BaseModel):
    """422 body when the raw input is rejected"""

    kind: Literal["validation"] = "validation"
    errors: List[FieldErrorSchema]


class ComputationErrorResponse(BaseModel):
    """422 body when valid input yields a degenerate installment"""

    kind: Literal["computation"] = "computation"
    message: str


class NormalizeRequest(BaseModel):
    """Request body for POST /v1/normalize"""

    value: str = Field(..., description="Text as typed by the user")
    kind: Literal["currency", "percent"]


class NormalizeResponse(BaseModel):
    """Response for POST /v1/normalize"""

    display: str
