import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from urllib.parse import urlparse

import uvicorn
from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from dogop.api.exception_handlers import register_exception_handlers
from dogop.api.router import api_router
from dogop.core.config import settings
from dogop.db.base import create_db_engine, create_health_engine
from dogop.db.migrate import run_migrations
from dogop.repositories.offer import OfferStore

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Migrate the schema, then open the connection pool shared by all requests."""
    configure_logging()
    if settings.run_migrations:
        run_migrations(settings.database_url, settings.alembic_config)

    engine = create_db_engine(settings)
    health_engine = create_health_engine(settings)
    app.state.offer_store = OfferStore(engine, health_engine=health_engine)
    logger.info("Offer store ready")
    try:
        yield
    finally:
        engine.dispose()
        health_engine.dispose()
        logger.info("Connection pool closed")


def create_app() -> FastAPI:
    app = FastAPI(title="DogOp", lifespan=lifespan)

    if settings.frontend_url:
        parsed = urlparse(settings.frontend_url)
        origin = f"{parsed.scheme}://{parsed.netloc}"
        app.add_middleware(
            CORSMiddleware,
            allow_origins=[origin],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    register_exception_handlers(app)
    app.include_router(api_router)
    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the API on the configured host and port."""
    configure_logging()
    logger.info("Listening on port %s", settings.port)
    uvicorn.run("dogop.main:app", host=settings.host, port=settings.port)
