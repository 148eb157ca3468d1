"""POST /v1/simulation - fixed-installment loan simulation endpoint"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException, Request

from loan_simulator.api.v1.schemas import (
    ComputationErrorResponse,
    DisplayAmounts,
    FieldErrorSchema,
    SimulationRequest,
    SimulationResponse,
    ValidationErrorResponse,
)
from loan_simulator.api.dependencies import get_loan_limits, get_request_id
from loan_simulator.domain.calculator import calculate_loan
from loan_simulator.domain.models import ComputationError, LoanInput, LoanLimits, ValidationErrors
from loan_simulator.domain.validation import validate_loan_inputs
from loan_simulator.infrastructure.observability.logging import log_simulation
from loan_simulator.infrastructure.observability.metrics import record_simulation
from loan_simulator.utils.locale_decimal import format_brl

router = APIRouter()


@router.post(
    "/simulation",
    response_model=SimulationResponse,
    responses={422: {"description": "Rejected input (kind=validation) or degenerate result (kind=computation)"}},
)
def create_simulation(
    request_body: SimulationRequest,
    request: Request,
    limits: LoanLimits = Depends(get_loan_limits),
):
    """
    Compute the fixed monthly installment for a loan.

    Flow:
    1. Parse and validate principal, monthly rate and months
    2. Apply the PMT formula
    3. Record metrics and logs
    4. Return numeric amounts plus BRL display text
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        validated = validate_loan_inputs(
            request_body.principal,
            request_body.rate_percent,
            request_body.months,
            limits,
        )
        result = calculate_loan(validated) if isinstance(validated, LoanInput) else validated
    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    outcome = record_simulation(result)
    duration_ms = (time.time() - start_time) * 1000
    months = validated.months if isinstance(validated, LoanInput) else None
    log_simulation(request_id, outcome, months, duration_ms)

    if isinstance(result, ValidationErrors):
        logging.warning(
            f"Simulation rejected: {', '.join(result.fields)}",
            extra={"request_id": request_id},
        )
        body = ValidationErrorResponse(
            errors=[FieldErrorSchema(field=e.field, message=e.message) for e in result.errors]
        )
        raise HTTPException(status_code=422, detail=body.model_dump())

    if isinstance(result, ComputationError):
        logging.warning(f"Simulation not computable: {result.message}", extra={"request_id": request_id})
        body = ComputationErrorResponse(message=result.message)
        raise HTTPException(status_code=422, detail=body.model_dump())

    return SimulationResponse(
        installment=result.installment,
        total_paid=result.total_paid,
        total_interest=result.total_interest,
        display=DisplayAmounts(
            installment=format_brl(result.installment),
            total_paid=format_brl(result.total_paid),
            total_interest=format_brl(result.total_interest),
        ),
    )
