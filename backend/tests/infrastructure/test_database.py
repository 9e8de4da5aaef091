"""Database Session Manager — lifecycle and error mapping."""

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

import maze_api.infrastructure.database as db_module
from maze_api.core.errors import NotFoundError, StoreError
from maze_api.infrastructure.database import (
    DatabaseSessionManager, init_db, close_db, get_db,
)


async def test_init_and_close_db(monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    init_db("sqlite+aiosqlite:///:memory:", pool_size=3, max_overflow=1)
    assert db_module.db_manager is not None
    assert await db_module.db_manager.health_check() is True

    await close_db()
    assert db_module.db_manager is None


async def test_get_db_requires_init(monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    with pytest.raises(RuntimeError):
        async for _ in get_db():
            pass


@pytest.mark.parametrize(
    "error",
    [
        OperationalError("SELECT 1", {}, Exception("gone")),
        IntegrityError("INSERT", {}, Exception("duplicate key")),
    ],
)
async def test_session_rolls_back_and_maps_sqlalchemy_errors(monkeypatch, error):
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    rolled_back = []

    with pytest.raises(StoreError) as exc_info:
        async with manager.session() as session:
            async def _rollback():
                rolled_back.append(True)

            monkeypatch.setattr(session, "rollback", _rollback)
            raise error

    assert exc_info.value.operation == "session"
    assert exc_info.value.__cause__ is error
    assert rolled_back == [True]
    await manager.close()


async def test_session_passes_domain_errors_through():
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    with pytest.raises(NotFoundError):
        async with manager.session():
            raise NotFoundError("ZZZZZZZZZZ")
    await manager.close()
