"""SQL Persona Repository - the Persistence Gateway over an AsyncSession.

Invariants:
    - Each mutating call commits before returning (one unit of work per call)
    - fetch_by_id returns None for absent keys, never raises
    - upsert never changes the id of an existing record
    - delete_by_id on an absent key is a no-op
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from persona_api.core.domain_types import PersonaId
from persona_api.models.persona import Persona

logger = logging.getLogger(__name__)


class SqlPersonaRepository:
    """PersonaRepository implementation backed by SQLAlchemy."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def fetch_all(self) -> list[Persona]:
        result = await self._db.execute(select(Persona).order_by(Persona.id))
        return list(result.scalars().all())

    async def fetch_by_id(self, persona_id: PersonaId) -> Persona | None:
        return await self._db.get(Persona, persona_id)

    async def upsert(self, persona: Persona) -> Persona:
        """Replace the record named by persona.id, or insert a new one."""
        stored = None
        if persona.id is not None:
            stored = await self._db.get(Persona, persona.id)
        if stored is None:
            stored = Persona(
                nombre=persona.nombre,
                apellido=persona.apellido,
                edad=persona.edad,
            )
            self._db.add(stored)
        elif stored is not persona:
            stored.nombre = persona.nombre
            stored.apellido = persona.apellido
            stored.edad = persona.edad
        await self._db.commit()
        await self._db.refresh(stored)
        logger.debug("Persona upserted", extra={"persona_id": stored.id})
        return stored

    async def delete_by_id(self, persona_id: PersonaId) -> None:
        persona = await self._db.get(Persona, persona_id)
        if persona is None:
            return
        await self._db.delete(persona)
        await self._db.commit()
