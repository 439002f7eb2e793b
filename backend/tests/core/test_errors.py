"""Error Hierarchy - codes, statuses and the REST envelope.

Tests:
    - ResourceNotFoundError is a 404 carrying the resource type and id
    - DatabaseError is a critical 503 carrying the failed operation
    - to_response() envelope shape
"""

from persona_api.core.errors import (
    DatabaseError,
    ErrorCategory,
    ErrorSeverity,
    PersonaApiError,
    ResourceNotFoundError,
)


def test_resource_not_found_is_404():
    err = ResourceNotFoundError("Persona", "5")

    assert isinstance(err, PersonaApiError)
    assert err.http_status == 404
    assert err.code == "RESOURCE_NOT_FOUND"
    assert err.category == ErrorCategory.RESOURCE_NOT_FOUND
    assert err.message == "Persona '5' not found"


def test_resource_not_found_context_names_resource():
    err = ResourceNotFoundError("Persona", "5")
    ctx = err.to_response()["error"]["context"]

    assert ctx == {"resource_type": "Persona", "resource_id": "5"}


def test_database_error_is_critical_503():
    err = DatabaseError("Connection or operational error", "execute")

    assert err.http_status == 503
    assert err.severity == ErrorSeverity.CRITICAL
    assert err.operation == "execute"
    assert err.message == "Database execute failed: Connection or operational error"


def test_to_response_envelope_fields():
    body = DatabaseError("x", "commit").to_response()["error"]

    assert body["code"] == "DATABASE_ERROR"
    assert body["category"] == "database"
    assert body["severity"] == "critical"
    assert "timestamp" in body


def test_error_categories_match_envelope_strings():
    assert ErrorCategory.VALIDATION.value == "validation"
    assert ErrorCategory.INTERNAL.value == "internal"
    assert ErrorCategory.DATABASE.value == "database"
