"""Persona Schemas - defaults, coercion and ORM serialization.

Invariants:
    - Missing names default to None, missing edad to 0
    - Numeric strings coerce to int; non-numeric edad is rejected
    - Explicit null edad is 0; edad outside the 32-bit range is rejected
    - PersonaResponse reads straight from the ORM object
"""

import pytest
from pydantic import ValidationError

from persona_api.models.persona import Persona
from persona_api.schemas.persona import PersonaPayload, PersonaResponse


def test_payload_defaults_for_missing_fields():
    body = PersonaPayload()

    assert body.id is None
    assert body.nombre is None
    assert body.apellido is None
    assert body.edad == 0


def test_payload_coerces_numeric_string_age():
    assert PersonaPayload(edad="30").edad == 30


def test_payload_rejects_non_numeric_age():
    with pytest.raises(ValidationError):
        PersonaPayload(edad="treinta")


def test_payload_null_age_becomes_zero():
    assert PersonaPayload(edad=None).edad == 0


def test_payload_age_bounded_to_int32():
    assert PersonaPayload(edad=2**31 - 1).edad == 2**31 - 1
    assert PersonaPayload(edad=-2**31).edad == -2**31
    with pytest.raises(ValidationError):
        PersonaPayload(edad=2**31)
    with pytest.raises(ValidationError):
        PersonaPayload(edad=-2**31 - 1)


def test_payload_accepts_id_field():
    assert PersonaPayload(id=9, nombre="Juan").id == 9


def test_response_from_orm_object():
    persona = Persona(id=1, nombre="Juan", apellido="Perez", edad=30)

    dumped = PersonaResponse.model_validate(persona).model_dump()

    assert dumped == {"id": 1, "nombre": "Juan", "apellido": "Perez", "edad": 30}
