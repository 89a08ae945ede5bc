from fastapi import APIRouter, Depends
from controller.quote import QuoteOp
from config.setting import Settings
from core.setup import get_settings
from schema.common import ErrorsOut
from schema.quote import QuoteIn, QuoteOut

router = APIRouter(tags=["quote"])


@router.post(
    "/quote",
    response_model=QuoteOut,
    responses={422: {"model": ErrorsOut}},
)
def get_quote(quote_data: QuoteIn, settings: Settings = Depends(get_settings)):
    """Estimate the shipping price for a sea or air shipment"""
    return QuoteOp.quote(quote_data, settings.CURRENCY)
