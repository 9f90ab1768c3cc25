from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class ClientConfig:
    """Where the HMIS API lives and how the menu-access client talks to it."""

    api_base_url: str
    access_token: str | None = None
    timeout_seconds: float = 10.0
    retries: int = 2
    retry_backoff_seconds: float = 0.3
    verify_ssl: bool = True


def _number(name: str, default: str, cast, *, minimum: float, inclusive: bool):
    raw = (os.getenv(name) or default).strip()
    try:
        value = cast(raw)
    except ValueError as exc:
        kind = "an integer" if cast is int else "a number"
        raise ConfigError(f"Invalid {name}: expected {kind}, got {raw!r}") from exc
    if value < minimum or (value == minimum and not inclusive):
        bound = ">=" if inclusive else ">"
        raise ConfigError(f"Invalid {name}: expected {bound} {minimum:g}, got {raw}")
    return value


def load_config(env_file: str | None = None) -> ClientConfig:
    """Build a ``ClientConfig`` from ``HMIS_*`` variables, reading ``env_file`` first if given.

    ``HMIS_ENV`` selects a deployment profile: ``HMIS_API_BASE_URL_<ENV>`` wins
    over the plain ``HMIS_API_BASE_URL``. ``HMIS_ACCESS_TOKEN`` is the bearer
    token sent on every menu-access request; an empty value means no token.
    """
    load_dotenv(env_file)

    profile = (os.getenv("HMIS_ENV") or "dev").strip().upper()
    api_base_url = (
        (os.getenv(f"HMIS_API_BASE_URL_{profile}") or "").strip()
        or (os.getenv("HMIS_API_BASE_URL") or "").strip()
    )
    if not api_base_url:
        raise ConfigError("Missing required config values: HMIS_API_BASE_URL")

    verify = (os.getenv("HMIS_VERIFY_SSL") or "true").strip().lower()

    return ClientConfig(
        api_base_url=api_base_url.rstrip("/"),
        access_token=(os.getenv("HMIS_ACCESS_TOKEN") or "").strip() or None,
        timeout_seconds=_number("HMIS_TIMEOUT_SECONDS", "10", float, minimum=0, inclusive=False),
        retries=_number("HMIS_RETRIES", "2", int, minimum=0, inclusive=True),
        retry_backoff_seconds=_number("HMIS_RETRY_BACKOFF_SECONDS", "0.3", float, minimum=0, inclusive=True),
        verify_ssl=verify in {"1", "true", "yes", "on"},
    )
