# Set test environment before any application or db imports.
import os

os.environ["TESTING"] = "true"
os.environ["TESTING_DATABASE_URL"] = "sqlite:///:memory:"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from db import Connector, get_connector
from main import app
from models import Base
from models.unit_type import UnitType  # noqa: F401 - register with Base

DB_CONFIG = {
    "host": "db.test",
    "port": 5432,
    "user": "fleet",
    "password": "secret",
    "database": "fleet_test",
    "table": "unit_type",
}


@pytest.fixture
def engine():
    """Fresh in-memory SQLite database per test, tables created."""
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(eng)
    try:
        yield eng
    finally:
        eng.dispose()


@pytest.fixture
def connector(engine):
    """Connector whose every config resolves to the test engine."""
    return Connector(engine_factory=lambda config: engine)


@pytest.fixture
def db_conn(engine):
    """Open connection for repository tests; closed on teardown."""
    with engine.connect() as conn:
        yield conn


@pytest.fixture
def db_config():
    """Request connection config (copy so tests may mutate it)."""
    return dict(DB_CONFIG)


@pytest.fixture
def client(connector):
    """API test client; overrides get_connector to use the test connector, cleared on teardown."""
    app.dependency_overrides[get_connector] = lambda: connector
    try:
        with TestClient(app) as c:
            yield c
    finally:
        app.dependency_overrides.clear()
