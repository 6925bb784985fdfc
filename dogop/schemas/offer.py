from pydantic import BaseModel, ConfigDict, Field

# Largest value the INTEGER `age` column can hold
MAX_AGE = 2**31 - 1


class Offer(BaseModel):
    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: str
    customer: str
    age: int = Field(..., ge=0, le=MAX_AGE)
    breed: str
    name: str


class OfferCreate(BaseModel):
    """Offer proposal submitted by a client. Any `id` in the payload is ignored."""

    customer: str
    age: int = Field(..., ge=0, le=MAX_AGE, strict=True)
    breed: str
    name: str
