from sqlalchemy.orm import Session

from dogop.db.models.offer import Offer as OfferModel
from dogop.schemas.quote import QuoteRequest
from dogop.services.quote import compute_tariffs, create_quote


# ============================================================================
# SERVICE TESTS
# ============================================================================


def test_compute_tariffs_basic():
    tariffs = compute_tariffs(3, "Labrador")

    assert len(tariffs) == 1
    assert tariffs[0].name == "Dog OP _ Basic"
    assert tariffs[0].rate == 12.4


def test_create_quote_echoes_profile():
    quote = create_quote(QuoteRequest(age=7, breed="Dachshund"))

    assert quote.age == 7
    assert quote.breed == "Dachshund"
    assert [t.name for t in quote.tariffs] == ["Dog OP _ Basic"]


# ============================================================================
# ENDPOINT TESTS
# ============================================================================


def test_quote_labrador(client):
    """Test the quote for a 3 year old Labrador."""
    response = client.post("/api/quote", json={"age": 3, "breed": "Labrador"})

    assert response.status_code == 200
    assert response.json() == {
        "age": 3,
        "breed": "Labrador",
        "tariffs": [{"name": "Dog OP _ Basic", "rate": 12.4}],
    }


def test_quote_ignores_submitted_tariffs(client):
    """Test tariffs sent by the client are replaced by the computed ones."""
    response = client.post(
        "/api/quote",
        json={"age": 1, "breed": "Pug", "tariffs": [{"name": "Free", "rate": 0}]},
    )

    assert response.status_code == 200
    assert response.json()["tariffs"] == [{"name": "Dog OP _ Basic", "rate": 12.4}]


def test_quote_malformed_json(client, engine):
    """Test a non-JSON body yields a 400 problem body and no write."""
    response = client.post(
        "/api/quote",
        content="age=3&breed=Labrador",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    data = response.json()
    assert data["title"] == "invalid request body"
    assert data["status"] == 400
    with Session(engine) as db:
        assert db.query(OfferModel).count() == 0


def test_quote_wrong_types(client):
    """Test an age that is not an integer is rejected."""
    response = client.post("/api/quote", json={"age": "old", "breed": "Labrador"})

    assert response.status_code == 400
    assert "age" in response.json()["detail"]


def test_quote_age_as_string(client):
    """Test a quoted age is rejected rather than coerced."""
    response = client.post("/api/quote", json={"age": "3", "breed": "Labrador"})

    assert response.status_code == 400
    assert "age" in response.json()["detail"]


def test_quote_age_out_of_range(client):
    response = client.post("/api/quote", json={"age": 10**30, "breed": "Labrador"})

    assert response.status_code == 400
    assert response.json()["title"] == "invalid request body"
