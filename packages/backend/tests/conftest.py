"""Test fixtures — a fresh in-memory database per test.

Learn: Testing pattern for async SQLAlchemy + FastAPI:

1. Each test gets its own engine on an in-memory SQLite database
   (sqlite+aiosqlite), with the schema created from the ORM models and
   foreign keys enforced, so tag cascades behave as in production.
2. The app's get_db is overridden to hand out sessions on that engine.
   Every request gets its own session, exactly like in production, so
   commit/rollback behaviour inside the services is exercised for real.
3. Auth is NOT mocked: tests mint real tokens with create_access_token
   and send them in the x-auth-token header.

Env vars must be set before anything imports tredumo.config.
"""

import os

os.environ.setdefault("TREDUMO_JWT_SECRET", "test-secret-0123456789abcdef0123456789abcdef")
os.environ.setdefault("TREDUMO_DATABASE_URL", "sqlite+aiosqlite://")

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker  # noqa: E402

from tredumo.auth.jwt import create_access_token  # noqa: E402
from tredumo.db.engine import build_engine, get_db  # noqa: E402
from tredumo.db.models import Base  # noqa: E402
from tredumo.main import app  # noqa: E402
from tredumo.services.user_service import UserService  # noqa: E402

TEST_DB_URL = "sqlite+aiosqlite://"


@pytest_asyncio.fixture()
async def session_factory():
    """Session factory over a brand-new in-memory database."""
    engine = build_engine(TEST_DB_URL)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()


@pytest_asyncio.fixture()
async def db_session(session_factory):
    """A session for service-level tests and direct row inspection."""
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture()
async def client(session_factory):
    """HTTP client with the app's get_db pointed at the test database."""
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers():
    return {"x-auth-token": create_access_token(1, "admin")}


@pytest.fixture
def editor_headers():
    return {"x-auth-token": create_access_token(2, "editor")}


@pytest_asyncio.fixture()
async def admin_user(session_factory):
    """A persisted admin account with a known password."""
    async with session_factory() as session:
        return await UserService(session).create_user(
            username="admin",
            email="admin@tredumo.com",
            password="admin-password-123",
            role="admin",
        )
