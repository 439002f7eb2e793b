"""Persona Schemas - JSON shapes accepted and returned by /personas.

Invariants:
    - PersonaPayload accepts an id but the handlers never use it
    - Missing fields default to None (names) or 0 (edad); an explicit null edad is 0 too
    - edad must fit the 32-bit store column; out-of-range values are a validation error
    - PersonaResponse always carries the store-assigned id
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from persona_api.core.domain_types import INT32_MAX, INT32_MIN


class PersonaPayload(BaseModel):
    """Request body for POST and PUT."""
    id: int | None = None
    nombre: str | None = None
    apellido: str | None = None
    edad: int | None = Field(0, ge=INT32_MIN, le=INT32_MAX)

    @field_validator("edad")
    @classmethod
    def null_edad_is_zero(cls, v: int | None) -> int:
        return 0 if v is None else v


class PersonaResponse(BaseModel):
    """Stored Persona as returned to clients."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    nombre: str | None
    apellido: str | None
    edad: int
