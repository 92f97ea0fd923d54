"""
Test fixtures for the Session Ledger API test suite.

  - db_engine / db_session: Fresh in-memory SQLite database for each test
  - test_app: The FastAPI app with get_db pointed at the test database
  - client: Async HTTP test client with an empty cookie jar (no session yet)
  - second_client: An independent client, i.e. a second anonymous session
  - session_client: A client that already owns a session (cookie set by a
    real POST /transactions, so the cookie flow itself is exercised)

Key design decisions:
  - In-memory SQLite with StaticPool: every session in a test shares the
    single connection, so the schema created here is the one the app sees.
  - get_db is overridden on the app, so route code runs unchanged.
  - Each client keeps its own cookie jar; httpx stores Set-Cookie headers
    and replays them, just like a browser would.
"""

import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from ledger_api.database import Base, get_db
from ledger_api.main import app


# In-memory SQLite for fast, isolated tests
TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest_asyncio.fixture
async def db_engine():
    """Create a fresh async engine with all tables for each test."""
    engine = create_async_engine(TEST_DATABASE_URL, poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_engine):
    """Provide an async session bound to the test engine."""
    async_session = async_sessionmaker(
        db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    async with async_session() as session:
        yield session


@pytest_asyncio.fixture
async def test_app(db_engine):
    """The application with its get_db dependency bound to the test database."""
    async_session = async_sessionmaker(
        db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async def override_get_db():
        async with async_session() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    yield app
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(test_app):
    """Async HTTP test client with no session cookie."""
    async with AsyncClient(
        transport=ASGITransport(app=test_app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest_asyncio.fixture
async def second_client(test_app):
    """A second, independent anonymous session for isolation tests."""
    async with AsyncClient(
        transport=ASGITransport(app=test_app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest_asyncio.fixture
async def session_client(client):
    """
    Client that already owns a session.

    The session is created through the real write path: a first POST without
    a cookie, whose Set-Cookie the client keeps for later requests.
    """
    response = await client.post(
        "/transactions",
        json={"title": "Opening balance", "amount": 100, "type": "credit"},
    )
    assert response.status_code == 201, f"Seed insert failed: {response.text}"
    assert client.cookies.get("sessionId")
    return client
