from pydantic import BaseModel, Field

from dogop.schemas.offer import MAX_AGE


class Tariff(BaseModel):
    name: str
    rate: float


class QuoteRequest(BaseModel):
    age: int = Field(..., ge=0, le=MAX_AGE, strict=True)
    breed: str


class Quote(BaseModel):
    age: int
    breed: str
    tariffs: list[Tariff]
