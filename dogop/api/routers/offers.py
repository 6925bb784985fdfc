from fastapi import APIRouter, Depends, status

from dogop.api.deps import get_offer_store, valid_offer_id
from dogop.domain.offer_lookup import Found, NotFound, StorageFailure
from dogop.errors import OFFER_NOT_FOUND, NotFoundError, StorageError
from dogop.repositories.offer import OfferStore
from dogop.schemas.offer import Offer, OfferCreate

router = APIRouter(prefix="/api/offer", tags=["offers"])


@router.post("", response_model=Offer, status_code=status.HTTP_201_CREATED)
def create_offer(
    offer_data: OfferCreate,
    store: OfferStore = Depends(get_offer_store),
):
    """
    Create a new offer. The identifier is always generated by the server.
    """
    return store.insert(offer_data)


@router.get("/{offer_id}", response_model=Offer)
def read_offer(
    offer_id: str = Depends(valid_offer_id),
    store: OfferStore = Depends(get_offer_store),
):
    """
    Get an offer by ID.
    - Malformed ID: 400, the store is not queried
    - Unknown ID: 404
    """
    match store.find_by_id(offer_id):
        case Found(offer=offer):
            return offer
        case NotFound():
            raise NotFoundError(OFFER_NOT_FOUND)
        case StorageFailure(detail=detail):
            raise StorageError(detail)
