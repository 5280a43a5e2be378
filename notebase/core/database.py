"""
Database Configuration.

SQLAlchemy async engine and session management.

The engine owns the connection pool that bounds concurrent store access.
A Database is created once at startup, handed to whoever needs it, and
closed once at shutdown. Repositories receive its session factory and
open one short-lived session per operation.

Usage:
    database = Database.from_config()
    await database.init_schema()

    labels = LabelRepository(database.session_factory)
    ...

    await database.close()
"""

from pathlib import Path
from typing import Any

from sqlalchemy import event, text
from sqlalchemy.engine import URL, make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from notebase.core.logging import get_logger
from notebase.models.base import Base

logger = get_logger(__name__)


def _is_sqlite(url: URL) -> bool:
    return url.get_backend_name() == "sqlite"


def _enable_sqlite_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
    """SQLite ignores FOREIGN KEY clauses unless enabled per connection."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_database_engine(
    url: str | URL,
    pool_size: int = 5,
    max_overflow: int = 10,
    pool_timeout: int = 30,
    pool_recycle: int = 1800,
    echo: bool = False,
) -> AsyncEngine:
    """
    Create an async SQLAlchemy engine.

    In-memory SQLite gets a StaticPool so every session sees the same
    database. All other URLs get a bounded queue pool.
    """
    url = make_url(url)

    if _is_sqlite(url) and url.database in (None, "", ":memory:"):
        engine = create_async_engine(
            url,
            echo=echo,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
    else:
        engine = create_async_engine(
            url,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_timeout=pool_timeout,
            pool_recycle=pool_recycle,
            echo=echo,
        )

    if _is_sqlite(url):
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

    logger.debug(
        "Database engine created",
        extra={"url": url.render_as_string(hide_password=True)},
    )
    return engine


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """
    Create a session factory bound to the engine.

    expire_on_commit is off so entities returned by repositories stay
    readable after their session has closed.
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


class Database:
    """
    Connection pool handle with process-wide lifecycle.

    Wraps the async engine and the session factory bound to it.
    """

    def __init__(self, engine: AsyncEngine) -> None:
        self.engine = engine
        self.session_factory = create_session_factory(engine)

    @classmethod
    def from_config(cls) -> "Database":
        """Build the engine from config/settings/database.yaml and secrets."""
        from notebase.core.config import get_app_config, get_database_url

        db_config = get_app_config().database
        url = get_database_url()

        if _is_sqlite(url) and url.database not in (None, "", ":memory:"):
            Path(url.database).parent.mkdir(parents=True, exist_ok=True)

        engine = create_database_engine(
            url,
            pool_size=db_config.pool_size,
            max_overflow=db_config.max_overflow,
            pool_timeout=db_config.pool_timeout,
            pool_recycle=db_config.pool_recycle,
            echo=db_config.echo,
        )
        return cls(engine)

    async def init_schema(self) -> None:
        """Create missing tables. Existing tables are left untouched."""
        # Register all models on Base.metadata
        import notebase.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database schema ready", extra={"tables": sorted(Base.metadata.tables)})

    async def ping(self) -> None:
        """Round-trip a trivial statement. Raises on connectivity failure."""
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def close(self) -> None:
        """Dispose of the pool, closing all pooled connections."""
        await self.engine.dispose()
        logger.debug("Database engine disposed")
