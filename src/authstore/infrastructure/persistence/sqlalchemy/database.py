"""Engine and session factory construction for the shared connection pool."""

from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from authstore_config.settings import Settings, get_settings


def _enable_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """Turn on foreign key enforcement for every new SQLite connection.

    SQLite ships with enforcement off, which would let sessions and
    accounts reference users that do not exist.
    """
    event.listen(engine.sync_engine, "connect", _enable_foreign_keys)


def create_engine_from_settings(settings: Settings | None = None) -> AsyncEngine:
    """
    Create the async database engine.

    The engine owns the connection pool and is meant to be shared by every
    adapter call. Pool tuning beyond pre-ping is left to the deployment.

    Returns
    -------
    AsyncEngine instance
    """
    settings = settings or get_settings()
    engine = create_async_engine(
        settings.database_url,
        echo=settings.database_echo,
        pool_pre_ping=settings.database_pool_pre_ping,
    )
    if engine.dialect.name == "sqlite":
        enable_sqlite_foreign_keys(engine)
    return engine


def create_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """
    Create the session factory used for per-call units of work.

    Returns
    -------
    async_sessionmaker bound to ``engine``
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
