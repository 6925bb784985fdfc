import asyncio
import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse, PlainTextResponse

from dogop.api.deps import get_offer_store
from dogop.core.config import settings
from dogop.errors import StorageError
from dogop.repositories.offer import OfferStore
from dogop.schemas.health import STATUS_OK, STATUS_UNAVAILABLE, HealthCheck

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])

GREETING = "Hello DogOp!"


async def check_database(store: OfferStore, timeout: float) -> str | None:
    """Ping the database; return a failure detail, or None if it is reachable."""
    try:
        await asyncio.wait_for(run_in_threadpool(store.ping), timeout=timeout)
    except asyncio.TimeoutError:
        return f"timed out after {timeout:g}s"
    except StorageError as e:
        return str(e)
    return None


@router.get("/health", response_model=HealthCheck, response_model_exclude_none=True)
async def health(store: OfferStore = Depends(get_offer_store)):
    """
    Readiness check. 200 while the database answers, 503 with the failing check otherwise.
    """
    failure = await check_database(store, settings.health_check_timeout)
    now = datetime.now(timezone.utc)
    if failure is None:
        return HealthCheck(status=STATUS_OK, timestamp=now)

    logger.warning("Health check failed: db: %s", failure)
    body = HealthCheck(status=STATUS_UNAVAILABLE, timestamp=now, failures={"db": failure})
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content=body.model_dump(mode="json", exclude_none=True),
    )


@router.get("/", response_class=PlainTextResponse)
def greeting():
    return GREETING
