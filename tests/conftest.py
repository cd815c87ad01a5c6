"""
Shared pytest fixtures for the Thai Stock Tracker test suite.

Every test gets its own in-memory SQLite database. Market data sources and
the email notifier are replaced by in-process fakes so no test touches the
network.
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import select
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from thai_stock.core.database import Base, get_async_session
from thai_stock.core.dependencies import get_history_source, get_notifier, get_price_source
from thai_stock.main import app
from tests.fakes import FakeHistorySource, FakeNotifier, FakePriceSource


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine):
    return async_sessionmaker(bind=engine, expire_on_commit=False)


@pytest.fixture
async def session(session_maker):
    async with session_maker() as session:
        yield session


@pytest.fixture
def price_source():
    return FakePriceSource()


@pytest.fixture
def history_source():
    return FakeHistorySource()


@pytest.fixture
def notifier():
    return FakeNotifier()


@pytest.fixture
async def client(session_maker, price_source, history_source, notifier):
    async def override_session():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_async_session] = override_session
    app.dependency_overrides[get_price_source] = lambda: price_source
    app.dependency_overrides[get_history_source] = lambda: history_source
    app.dependency_overrides[get_notifier] = lambda: notifier

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def fetch_all(session_maker):
    """Read rows of a model through a fresh session."""

    async def _fetch_all(model, **filter_by):
        async with session_maker() as session:
            result = await session.execute(select(model).filter_by(**filter_by).order_by(model.id))
            return result.scalars().all()

    return _fetch_all
