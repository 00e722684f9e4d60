"""Database Session Manager — schema creation, health checks, error mapping."""

import pytest
from sqlalchemy import text

from simple_api.core.errors import DatabaseError
from simple_api.infrastructure.database import DatabaseSessionManager
from simple_api.infrastructure.message_store import SqlMessageStore


@pytest.fixture
async def manager():
    m = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    yield m
    await m.dispose()


async def test_create_schema_is_idempotent(manager):
    await manager.create_schema()
    await manager.create_schema()
    async with manager.session() as db:
        assert await SqlMessageStore(db).count() == 0


async def test_health_check_ok(manager):
    assert await manager.health_check() is True


async def test_sqlalchemy_error_mapped_to_database_error(manager):
    with pytest.raises(DatabaseError) as exc_info:
        async with manager.session() as db:
            await db.execute(text("SELECT * FROM no_such_table"))
    assert exc_info.value.http_status == 503


async def test_non_database_errors_pass_through(manager):
    with pytest.raises(ValueError):
        async with manager.session():
            raise ValueError("not a db error")
