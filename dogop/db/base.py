import math

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import NullPool

from dogop.core.config import Settings

Base = declarative_base()

# libpq ignores connect timeouts below two seconds
MIN_CONNECT_TIMEOUT = 2


def normalize_database_url(url: str) -> str:
    """Normalize PostgreSQL URLs to use the psycopg3 driver.

    SQLite URLs (used in tests) are returned unchanged.
    """
    if url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql://", 1)
    if url.startswith("postgresql://") and "+psycopg" not in url:
        return url.replace("postgresql://", "postgresql+psycopg://", 1)
    return url


def database_connect_args(
    database_url: str, connect_timeout: float, statement_timeout_ms: int
) -> dict:
    """Driver arguments bounding how long one connect or statement may take.

    PostgreSQL gets a libpq connect timeout and a server-side statement
    timeout; SQLite only needs to be usable from the request threadpool.
    """
    if database_url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {
        "connect_timeout": max(MIN_CONNECT_TIMEOUT, math.ceil(connect_timeout)),
        "options": f"-c statement_timeout={int(statement_timeout_ms)}",
    }


def create_db_engine(settings: Settings) -> Engine:
    """Build the pooled engine shared by every request.

    The pool bounds the number of database operations in flight.
    """
    database_url = normalize_database_url(settings.database_url)
    connect_args = database_connect_args(
        database_url, settings.db_connect_timeout, settings.db_statement_timeout_ms
    )
    if database_url.startswith("sqlite"):
        return create_engine(database_url, connect_args=connect_args)

    return create_engine(
        database_url,
        connect_args=connect_args,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_timeout=settings.db_pool_timeout,
        pool_pre_ping=True,
    )


def create_health_engine(settings: Settings) -> Engine:
    """Build an unpooled engine for health checks.

    Every connect and query it makes is bounded by the health check timeout,
    and it never takes a slot from the request pool.
    """
    database_url = normalize_database_url(settings.database_url)
    timeout = settings.health_check_timeout
    connect_args = database_connect_args(database_url, timeout, int(timeout * 1000))
    if database_url.startswith("sqlite"):
        connect_args["timeout"] = timeout
    return create_engine(database_url, connect_args=connect_args, poolclass=NullPool)
