"""POST /v1/normalize - reformat a typed field for display"""

from fastapi import APIRouter

from loan_simulator.api.v1.schemas import NormalizeRequest, NormalizeResponse
from loan_simulator.utils.locale_decimal import normalize_currency_input, normalize_percent_input

router = APIRouter()


@router.post("/normalize", response_model=NormalizeResponse)
def normalize_field(request_body: NormalizeRequest):
    """
    Rewrite typed text in pt-BR display form, e.g. "10000,5" -> "10.000,5".

    Values are clamped to the display range; text that does not parse comes
    back unchanged so the user can fix it.
    """
    if request_body.kind == "currency":
        display = normalize_currency_input(request_body.value)
    else:
        display = normalize_percent_input(request_body.value)
    return NormalizeResponse(display=display)
