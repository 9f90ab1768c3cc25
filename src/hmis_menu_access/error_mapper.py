from __future__ import annotations

from typing import Mapping

from .exceptions import (
    ApiError,
    AuthError,
    ConflictError,
    NotFoundError,
    PermissionDeniedError,
    RateLimitError,
    ServerError,
    ValidationError,
)

# The access-control service reports failures as {"message": ..., "error": ...};
# "error" carries the underlying cause and is the more useful of the two.
_MESSAGE_KEYS = ("error", "message", "msg")


def _resolve_message(payload: Mapping[str, object], status_code: int) -> str:
    for key in _MESSAGE_KEYS:
        value = payload.get(key)
        if value:
            return str(value)
    return f"HTTP error! status: {status_code}"


def map_error(status_code: int, payload: Mapping[str, object] | None) -> ApiError:
    payload = payload or {}
    code = str(payload.get("code") or "HTTP_ERROR")
    message = _resolve_message(payload, status_code)
    details = payload.get("details")
    mapped: type[ApiError]
    if status_code == 401:
        mapped = AuthError
    elif status_code == 403:
        mapped = PermissionDeniedError
    elif status_code == 404:
        mapped = NotFoundError
    elif status_code in {400, 422}:
        mapped = ValidationError
    elif status_code == 409:
        mapped = ConflictError
    elif status_code == 429:
        mapped = RateLimitError
    elif status_code >= 500:
        mapped = ServerError
    else:
        mapped = ApiError
    return mapped(
        code=code,
        message=message,
        details=details,
        status_code=status_code,
        raw_payload=dict(payload),
    )
