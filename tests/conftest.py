"""Root conftest — shared test configuration, in-memory DB and store fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - Handler fixtures use InMemoryMessageStore and a fresh AtomicCounter
"""

import os

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

# Settings are cached on first import of the app; keep tests off real databases
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")

from simple_api.config import Settings  # noqa: E402
from simple_api.core.counter import AtomicCounter  # noqa: E402
from simple_api.db.base import Base  # noqa: E402
import simple_api.models  # noqa: E402,F401
from simple_api.services.request_handler import RequestHandler  # noqa: E402
from tests.fakes import InMemoryMessageStore, StepClock  # noqa: E402


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def store():
    return InMemoryMessageStore()


@pytest.fixture
def clock():
    return StepClock()


@pytest.fixture
def handler(store, clock):
    """RequestHandler over the in-memory store with a fresh counter."""
    return RequestHandler(
        store=store, counter=AtomicCounter(), settings=Settings(), clock=clock,
    )
