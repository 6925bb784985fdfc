from dogop.schemas.quote import Quote, QuoteRequest, Tariff

BASIC_TARIFF_NAME = "Dog OP _ Basic"
BASIC_TARIFF_RATE = 12.4


def compute_tariffs(age: int, breed: str) -> list[Tariff]:
    """
    Price the tariffs offered for a dog.

    Placeholder rule: every dog is offered the basic tariff at a constant rate,
    regardless of age and breed.
    """
    return [Tariff(name=BASIC_TARIFF_NAME, rate=BASIC_TARIFF_RATE)]


def create_quote(request: QuoteRequest) -> Quote:
    """Echo the submitted profile with the tariffs priced for it."""
    return Quote(
        age=request.age,
        breed=request.breed,
        tariffs=compute_tariffs(request.age, request.breed),
    )
