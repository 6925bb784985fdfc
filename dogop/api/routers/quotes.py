from fastapi import APIRouter

from dogop.schemas.quote import Quote, QuoteRequest
from dogop.services.quote import create_quote

router = APIRouter(prefix="/api/quote", tags=["quotes"])


@router.post("", response_model=Quote)
def quote(quote_request: QuoteRequest):
    """
    Price a dog profile. Nothing is persisted.
    """
    return create_quote(quote_request)
