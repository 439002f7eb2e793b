"""Dependency Providers - composition root wiring routes to services and repositories.

Invariants:
    - One AsyncSession per request, shared by the repository and the service it backs
    - Nothing here holds state between requests

Design Decisions:
    - FastAPI Depends chain instead of a container: tests swap any layer via dependency_overrides
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from persona_api.core.repository_protocols import PersonaRepository
from persona_api.infrastructure.database import get_db
from persona_api.infrastructure.persona_repository import SqlPersonaRepository
from persona_api.services.persona_service import PersonaService


def get_persona_repository(
    db: AsyncSession = Depends(get_db),
) -> PersonaRepository:
    return SqlPersonaRepository(db)


def get_persona_service(
    repository: PersonaRepository = Depends(get_persona_repository),
) -> PersonaService:
    return PersonaService(repository)
