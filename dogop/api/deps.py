import uuid

from fastapi import Request

from dogop.errors import DomainValidationError
from dogop.repositories.offer import OfferStore


def get_offer_store(request: Request) -> OfferStore:
    """Return the store built at startup (see the application lifespan)."""
    return request.app.state.offer_store


def valid_offer_id(offer_id: str) -> str:
    """
    Validate the offer identifier taken from the request path.

    Returns the identifier in canonical (lowercase, hyphenated) UUID form.

    Raises:
        DomainValidationError: If the value is not a well-formed UUID
    """
    try:
        return str(uuid.UUID(offer_id))
    except ValueError:
        raise DomainValidationError(f"'{offer_id}' is not a valid offer id") from None
