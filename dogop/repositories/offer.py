import logging
import uuid
from collections.abc import Callable

from pydantic import ValidationError
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from dogop.db.models.offer import Offer as OfferModel
from dogop.domain.offer_lookup import Found, NotFound, OfferLookup, StorageFailure
from dogop.errors import StorageError
from dogop.schemas.offer import Offer, OfferCreate

logger = logging.getLogger(__name__)


def new_offer_id() -> str:
    """Random 128-bit identifier in canonical UUID text form."""
    return str(uuid.uuid4())


def describe_db_error(exc: SQLAlchemyError) -> str:
    """Short, human-readable description of a database error.

    Only the error class and the first line of the driver message are kept,
    so statements and bound parameters never reach API consumers.
    """
    orig = getattr(exc, "orig", None)
    message = str(orig) if orig is not None else str(exc)
    first_line = message.strip().splitlines()[0] if message.strip() else ""
    name = type(orig).__name__ if orig is not None else type(exc).__name__
    return f"{name}: {first_line}" if first_line else name


class OfferStore:
    """Transactional persistence and point lookup for offers.

    Owns the session factory bound to the shared, pooled engine. Every call
    checks a connection out of the pool and returns it before returning.
    `ping` uses `health_engine` when given, so health checks run under their
    own timeouts outside the request pool.
    """

    def __init__(
        self,
        engine: Engine,
        id_factory: Callable[[], str] = new_offer_id,
        health_engine: Engine | None = None,
    ):
        self._engine = engine
        self._health_engine = health_engine if health_engine is not None else engine
        self._session_factory = sessionmaker(
            bind=engine, autoflush=False, expire_on_commit=False
        )
        self._id_factory = id_factory

    def insert(self, offer: OfferCreate) -> Offer:
        """Store a new offer under a freshly generated identifier.

        Raises:
            StorageError: If the write or the commit fails. The transaction
                is rolled back first, so no partial row remains.
        """
        db_offer = OfferModel(
            id=self._id_factory(),
            customer=offer.customer,
            age=offer.age,
            breed=offer.breed,
            name=offer.name,
        )
        with self._session_factory() as db:
            try:
                db.add(db_offer)
                db.flush()
                db.commit()
            except SQLAlchemyError as exc:
                db.rollback()
                logger.exception("Failed to insert offer %s", db_offer.id)
                raise StorageError(f"could not store offer ({describe_db_error(exc)})") from exc
            created = Offer.model_validate(db_offer)

        logger.info("Created offer %s", created.id)
        return created

    def find_by_id(self, offer_id: str) -> OfferLookup:
        """Look up one offer. The identifier must already be well-formed."""
        with self._session_factory() as db:
            try:
                db_offer = db.query(OfferModel).filter(OfferModel.id == offer_id).first()
            except SQLAlchemyError as exc:
                logger.exception("Failed to read offer %s", offer_id)
                return StorageFailure(f"could not read offer ({describe_db_error(exc)})")

            if db_offer is None:
                return NotFound()

            try:
                return Found(Offer.model_validate(db_offer))
            except ValidationError as exc:
                logger.error("Stored offer %s is malformed: %s", offer_id, exc)
                return StorageFailure("stored offer is malformed")

    def ping(self) -> None:
        """Check that the database answers a trivial query.

        Raises:
            StorageError: If no connection can be made or the query fails.
        """
        try:
            with self._health_engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except SQLAlchemyError as exc:
            raise StorageError(describe_db_error(exc)) from exc
