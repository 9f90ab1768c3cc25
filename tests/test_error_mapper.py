from __future__ import annotations

from hmis_menu_access.error_mapper import map_error
from hmis_menu_access.exceptions import (
    ApiError,
    AuthError,
    ConflictError,
    NotFoundError,
    PermissionDeniedError,
    RateLimitError,
    ServerError,
    ValidationError,
)


def test_error_mapper_classes() -> None:
    assert isinstance(map_error(401, {"message": "bad token"}), AuthError)
    assert isinstance(map_error(403, {"message": "no"}), PermissionDeniedError)
    assert isinstance(map_error(404, {"message": "Role not found"}), NotFoundError)
    assert isinstance(map_error(422, {"message": "bad"}), ValidationError)
    assert isinstance(map_error(409, {}), ConflictError)
    assert isinstance(map_error(429, {}), RateLimitError)
    assert isinstance(map_error(503, {}), ServerError)
    assert type(map_error(418, {})) is ApiError


def test_error_message_resolution() -> None:
    err = map_error(500, {"message": "Error updating role menu config", "error": "Deadlock found"})
    assert err.message == "Deadlock found"
    assert err.code == "HTTP_ERROR"
    assert str(err) == "[500] HTTP_ERROR: Deadlock found"

    assert map_error(400, {"msg": "userId required"}).message == "userId required"
    assert map_error(502, None).message == "HTTP error! status: 502"


def test_error_keeps_payload() -> None:
    payload = {"code": "ROLE_MISSING", "message": "Role not found", "details": {"roleId": 9}}
    err = map_error(404, payload)
    assert err.code == "ROLE_MISSING"
    assert err.details == {"roleId": 9}
    assert err.raw_payload == payload
