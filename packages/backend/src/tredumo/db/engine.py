"""Async SQLAlchemy engine and session factory.

Learn: SQLAlchemy 2.0 async mode — create_async_engine for connection pooling,
AsyncSession for per-request database access, dependency injection via FastAPI.

A session borrows one pooled connection for the length of its transaction
and hands it back on commit, rollback, or close. get_db() always closes,
so no request can leave a connection checked out.
"""

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from tredumo.config import settings


def build_engine(url: str, echo: bool = False) -> AsyncEngine:
    """Create an engine for the given URL.

    SQLite (local dev, tests) gets a single shared connection and
    foreign-key enforcement, so tag cascades behave like on the server
    databases. Everything else gets a regular pool: min 5, max 20.
    """
    if url.startswith("sqlite"):
        eng = create_async_engine(
            url,
            echo=echo,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
        event.listen(eng.sync_engine, "connect", _enable_sqlite_foreign_keys)
        return eng

    return create_async_engine(
        url,
        echo=echo,
        pool_size=5,
        max_overflow=15,
        pool_pre_ping=True,
    )


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


# echo=True in debug mode to see SQL queries.
engine = build_engine(settings.database_url, echo=settings.debug)

# Session factory — each request gets its own session.
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_db() -> AsyncSession:
    """FastAPI dependency — yields a session per request, auto-closes."""
    async with async_session_factory() as session:
        try:
            yield session
        finally:
            await session.close()
