"""Shared fixtures: in-memory database and HTTP client"""
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool
from app.main import app
from app.db.session import create_tables, get_session
from app.db.repositories.user import SqlAlchemyUserRepository


@pytest_asyncio.fixture
async def db_engine():
    """Fresh in-memory SQLite shared by every session of one test"""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(db_engine, expire_on_commit=False)


@pytest_asyncio.fixture
async def repository(session_factory):
    async with session_factory() as session:
        yield SqlAlchemyUserRepository(session)


@pytest_asyncio.fixture
async def client(session_factory):
    """API client whose requests hit the in-memory database"""
    async def override_get_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
