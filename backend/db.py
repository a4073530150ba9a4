"""Pooled database connections keyed by the connection config carried in each request."""
from collections import OrderedDict
from collections.abc import Callable
import logging
import os
import threading

from sqlalchemy import create_engine
from sqlalchemy.engine import URL, Connection, Engine

from schemas.vessel_types import ConnectionConfig
from utils.config import DB_CONNECT_TIMEOUT_S, DB_MAX_OVERFLOW, DB_POOL_SIZE

LOG = logging.getLogger(__name__)

# Distinct configs beyond this evict the least recently used engine.
MAX_ENGINES = 8


def build_url(config: ConnectionConfig) -> URL:
    """PostgreSQL URL for a request config. Password is passed as a URL part, never formatted into text."""
    return URL.create(
        "postgresql+psycopg2",
        username=config.user,
        password=config.password.get_secret_value(),
        host=config.host,
        port=config.port,
        database=config.database,
    )


def postgres_engine(config: ConnectionConfig) -> Engine:
    """Bounded pool for one database; stale connections are detected before use."""
    # Runtime safety: when TESTING=true, never open a real database.
    if os.environ.get("TESTING") == "true":
        raise RuntimeError(
            "Tests must not connect to a real database. Override get_connector with a test Connector."
        )
    return create_engine(
        build_url(config),
        pool_size=DB_POOL_SIZE,
        max_overflow=DB_MAX_OVERFLOW,
        pool_pre_ping=True,
        connect_args={"connect_timeout": DB_CONNECT_TIMEOUT_S},
        echo=False,
    )


class Connector:
    """Hands out pooled connections, one engine per distinct ConnectionConfig."""

    def __init__(
        self,
        engine_factory: Callable[[ConnectionConfig], Engine] = postgres_engine,
        max_engines: int = MAX_ENGINES,
    ) -> None:
        self._engine_factory = engine_factory
        self._max_engines = max_engines
        self._engines: OrderedDict[ConnectionConfig, Engine] = OrderedDict()
        self._lock = threading.Lock()

    def engine_for(self, config: ConnectionConfig) -> Engine:
        """Return the engine for config, creating it on first use."""
        with self._lock:
            engine = self._engines.get(config)
            if engine is not None:
                self._engines.move_to_end(config)
                return engine
            engine = self._engine_factory(config)
            self._engines[config] = engine
            if len(self._engines) > self._max_engines:
                _, evicted = self._engines.popitem(last=False)
                evicted.dispose()
            LOG.info("Created engine for %s@%s:%s/%s", config.user, config.host, config.port, config.database)
            return engine

    def open(self, config: ConnectionConfig) -> Connection:
        """Check out a connection. Caller must close it (use it as a context manager)."""
        return self.engine_for(config).connect()

    def dispose(self) -> None:
        """Dispose every engine; checked-out connections close when returned."""
        with self._lock:
            engines = list(self._engines.values())
            self._engines.clear()
        for engine in engines:
            engine.dispose()

    def __len__(self) -> int:
        return len(self._engines)


_connector: Connector | None = None


def get_connector() -> Connector:
    """FastAPI dependency: the process-wide connector."""
    global _connector
    if _connector is None:
        _connector = Connector()
    return _connector


def dispose_connector() -> None:
    """Release all pooled connections (application shutdown)."""
    global _connector
    if _connector is not None:
        _connector.dispose()
        _connector = None
