"""Persona Service - business delegate between the /personas routes and the repository.

Invariants:
    - Every operation forwards its arguments unchanged and returns the repository result unchanged
    - No validation and no business rule live here

Design Decisions:
    - Kept as a separate layer so routes never see the storage technology
"""

from persona_api.core.domain_types import PersonaId
from persona_api.core.repository_protocols import PersonaRepository
from persona_api.models.persona import Persona


class PersonaService:
    """Pass-through delegate over a PersonaRepository."""

    def __init__(self, repository: PersonaRepository):
        self._repository = repository

    async def fetch_all(self) -> list[Persona]:
        return await self._repository.fetch_all()

    async def fetch_by_id(self, persona_id: PersonaId) -> Persona | None:
        return await self._repository.fetch_by_id(persona_id)

    async def upsert(self, persona: Persona) -> Persona:
        return await self._repository.upsert(persona)

    async def delete_by_id(self, persona_id: PersonaId) -> None:
        await self._repository.delete_by_id(persona_id)
