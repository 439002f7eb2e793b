"""Boundary Protocols - contracts between the service layer and persistence.

Invariants:
    - Services depend on PersonaRepository, never on SQLAlchemy directly
    - Absence is reported as None; no valid Persona is ever None
    - Implementations provided by infrastructure via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Async methods: implementations do IO against the store
"""

from typing import TYPE_CHECKING, Protocol

from persona_api.core.domain_types import PersonaId

if TYPE_CHECKING:
    from persona_api.models.persona import Persona


class PersonaRepository(Protocol):
    """Contract for Persona persistence: fetch-all, fetch-by-key, upsert, delete-by-key."""
    async def fetch_all(self) -> list["Persona"]: ...
    async def fetch_by_id(self, persona_id: PersonaId) -> "Persona | None": ...
    async def upsert(self, persona: "Persona") -> "Persona": ...
    async def delete_by_id(self, persona_id: PersonaId) -> None: ...
