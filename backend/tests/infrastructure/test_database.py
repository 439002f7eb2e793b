"""Database Session Manager - error mapping, rollback and health checks.

Invariants:
    - SQLAlchemy failures inside a session surface as DatabaseError
    - health_check is True for a reachable database, False otherwise
    - SQLite URLs are accepted without pool sizing arguments
"""

import pytest
from sqlalchemy import text

from persona_api.core.errors import DatabaseError
from persona_api.db.base import Base
from persona_api.infrastructure.database import DatabaseSessionManager
from persona_api.models.persona import Persona


@pytest.fixture
async def manager():
    mgr = DatabaseSessionManager("sqlite+aiosqlite:///:memory:", pool_size=5)
    async with mgr.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield mgr
    await mgr.dispose()


async def test_operational_error_maps_to_database_error(manager):
    with pytest.raises(DatabaseError) as exc_info:
        async with manager.session() as db:
            await db.execute(text("SELECT * FROM no_such_table"))

    assert exc_info.value.code == "DATABASE_ERROR"
    assert exc_info.value.http_status == 503
    assert exc_info.value.operation == "execute"


async def test_integrity_error_maps_to_database_error(manager):
    async with manager.session() as db:
        db.add(Persona(id=1, nombre="Juan", apellido="Perez", edad=30))
        await db.commit()

    with pytest.raises(DatabaseError) as exc_info:
        async with manager.session() as db:
            db.add(Persona(id=1, nombre="Otro", apellido="Juan", edad=1))
            await db.commit()

    assert exc_info.value.operation == "commit"


async def test_failed_session_leaves_committed_data_intact(manager):
    async with manager.session() as db:
        db.add(Persona(id=1, nombre="Juan", apellido="Perez", edad=30))
        await db.commit()

    with pytest.raises(DatabaseError):
        async with manager.session() as db:
            db.add(Persona(id=1, nombre="Otro", apellido="Juan", edad=1))
            await db.commit()

    async with manager.session() as db:
        persona = await db.get(Persona, 1)
    assert persona.nombre == "Juan"


async def test_health_check_true_when_reachable(manager):
    assert await manager.health_check() is True


async def test_health_check_false_after_failure(manager, monkeypatch):
    async def broken_execute(*args, **kwargs):
        raise RuntimeError("connection refused")

    monkeypatch.setattr(
        "sqlalchemy.ext.asyncio.AsyncSession.execute", broken_execute,
    )
    assert await manager.health_check() is False
