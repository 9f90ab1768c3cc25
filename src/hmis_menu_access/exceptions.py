from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ApiError(Exception):
    code: str
    message: str
    details: object | None
    status_code: int
    raw_payload: object | None = None

    def __str__(self) -> str:
        return f"[{self.status_code}] {self.code}: {self.message}"


class AuthError(ApiError):
    """Bearer token missing, expired or rejected."""


class PermissionDeniedError(ApiError):
    """The caller's role may not read or change this menu configuration."""


class NotFoundError(ApiError):
    """Unknown user or role."""


class ValidationError(ApiError):
    pass


class ConflictError(ApiError):
    pass


class RateLimitError(ApiError):
    pass


class ServerError(ApiError):
    """5xx server-side failures."""


class TransportError(ApiError):
    """Network/transport failure before an HTTP response was returned."""


class MalformedInputError(TypeError):
    """A filter received something other than a collection where one is required."""
