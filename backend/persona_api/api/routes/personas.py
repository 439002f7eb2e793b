"""Persona Routes - list, get, create, update and delete under /personas.

Invariants:
    - Every id-qualified update/delete checks existence first; a miss is a 404 and changes nothing
    - The path id is authoritative; an id in the request body is ignored
    - 404 responses carry an empty body
    - Path ids outside the 32-bit store range are a 400 validation error, never reach the store
    - Concurrent updates of the same id are last-write-wins

Design Decisions:
    - get_persona_or_404 raises ResourceNotFoundError; the global handler renders the empty 404
"""

import logging

from fastapi import APIRouter, Depends, Path, Response, status

from persona_api.api.dependencies import get_persona_service
from persona_api.core.domain_types import INT32_MAX, INT32_MIN, PersonaId
from persona_api.core.errors import ResourceNotFoundError
from persona_api.models.persona import Persona
from persona_api.schemas.persona import PersonaPayload, PersonaResponse
from persona_api.services.persona_service import PersonaService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/personas", tags=["personas"])


async def get_persona_or_404(
    persona_id: int, service: PersonaService,
) -> Persona:
    """Fetch a Persona or raise ResourceNotFoundError."""
    persona = await service.fetch_by_id(PersonaId(persona_id))
    if persona is None:
        raise ResourceNotFoundError("Persona", str(persona_id))
    return persona


def _copy_mutable_fields(target: Persona, body: PersonaPayload) -> None:
    target.nombre = body.nombre
    target.apellido = body.apellido
    target.edad = body.edad


@router.get("", response_model=list[PersonaResponse])
async def list_personas(
    service: PersonaService = Depends(get_persona_service),
):
    """List every stored Persona."""
    return await service.fetch_all()


@router.get("/{persona_id}", response_model=PersonaResponse)
async def get_persona(
    persona_id: int = Path(ge=INT32_MIN, le=INT32_MAX),
    service: PersonaService = Depends(get_persona_service),
):
    return await get_persona_or_404(persona_id, service)


@router.post(
    "", response_model=PersonaResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_persona(
    body: PersonaPayload,
    service: PersonaService = Depends(get_persona_service),
):
    """Create a Persona. The store assigns the id."""
    persona = Persona()
    _copy_mutable_fields(persona, body)
    saved = await service.upsert(persona)
    logger.info("Persona created", extra={"persona_id": saved.id})
    return saved


@router.put("/{persona_id}", response_model=PersonaResponse)
async def update_persona(
    body: PersonaPayload,
    persona_id: int = Path(ge=INT32_MIN, le=INT32_MAX),
    service: PersonaService = Depends(get_persona_service),
):
    """Replace nombre, apellido and edad of an existing Persona."""
    persona = await get_persona_or_404(persona_id, service)
    _copy_mutable_fields(persona, body)
    updated = await service.upsert(persona)
    logger.info("Persona updated", extra={"persona_id": updated.id})
    return updated


@router.delete(
    "/{persona_id}", status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_persona(
    persona_id: int = Path(ge=INT32_MIN, le=INT32_MAX),
    service: PersonaService = Depends(get_persona_service),
):
    await get_persona_or_404(persona_id, service)
    await service.delete_by_id(PersonaId(persona_id))
    logger.info("Persona deleted", extra={"persona_id": persona_id})
    return Response(status_code=status.HTTP_204_NO_CONTENT)
