import os
import tempfile

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event

from dogop.api.deps import get_offer_store
from dogop.db.migrate import run_migrations
from dogop.main import app
from dogop.repositories.offer import OfferStore


@pytest.fixture(scope="function")
def db_url():
    """Create a fresh SQLite database file for each test and run migrations."""
    temp_db_dir = tempfile.mkdtemp()
    test_db_path = os.path.join(temp_db_dir, "test.db")
    test_db_url = f"sqlite:///{test_db_path}"

    run_migrations(test_db_url)

    yield test_db_url

    # Clean up - remove test database file and directory
    try:
        for suffix in ["", "-wal", "-shm"]:
            path = f"{test_db_path}{suffix}"
            if os.path.exists(path):
                os.remove(path)
        if os.path.exists(temp_db_dir):
            os.rmdir(temp_db_dir)
    except OSError as e:
        print(f"Cleanup failed: {e}")


@pytest.fixture(scope="function")
def engine(db_url):
    test_engine = create_engine(db_url, connect_args={"check_same_thread": False})

    # Enable WAL mode to reduce locking issues
    @event.listens_for(test_engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()

    yield test_engine

    test_engine.dispose()


@pytest.fixture(scope="function")
def offer_store(engine) -> OfferStore:
    return OfferStore(engine)


@pytest.fixture(scope="function")
def client(offer_store):
    """Create a test client with the offer store dependency overridden."""
    app.dependency_overrides[get_offer_store] = lambda: offer_store

    yield TestClient(app)

    app.dependency_overrides.clear()
