from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any
from urllib.parse import urljoin

import requests

from .config import ClientConfig
from .error_mapper import map_error
from .exceptions import TransportError
from .logging_utils import get_logger, log_action

_IDEMPOTENT_METHODS = {"GET", "HEAD"}


@dataclass
class HttpClient:
    config: ClientConfig
    session: requests.Session | None = None
    logger: logging.Logger | None = None

    def __post_init__(self) -> None:
        if self.session is None:
            self.session = requests.Session()
        if self.logger is None:
            self.logger = get_logger("hmis_menu_access.http")

    def _build_url(self, path: str) -> str:
        base = self.config.api_base_url.rstrip("/") + "/"
        return urljoin(base, path.lstrip("/"))

    def request(
        self,
        method: str,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        json_body: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> dict[str, Any] | list[Any] | None:
        if self.session is None:
            raise RuntimeError("HTTP session not initialized")
        request_headers = {"Accept": "application/json"}
        if headers:
            request_headers.update(headers)

        normalized_method = method.upper()
        url = self._build_url(path)
        attempts = self.config.retries + 1 if normalized_method in _IDEMPOTENT_METHODS else 1

        response: requests.Response | None = None
        for attempt in range(attempts):
            try:
                response = self.session.request(
                    method=normalized_method,
                    url=url,
                    headers=request_headers,
                    json=json_body,
                    params=params,
                    timeout=self.config.timeout_seconds,
                    verify=self.config.verify_ssl,
                )
            except requests.RequestException as exc:
                if attempt >= attempts - 1:
                    self._log_failure(normalized_method, path, 0, str(exc))
                    raise TransportError(
                        code="TRANSPORT_ERROR",
                        message=str(exc),
                        details={"type": type(exc).__name__},
                        status_code=0,
                        raw_payload=None,
                    ) from exc
            else:
                if response.status_code < 500 or attempt >= attempts - 1:
                    break
            time.sleep(self.config.retry_backoff_seconds * (2**attempt))

        if response is None:
            raise RuntimeError(f"HTTP request to {url} finished without a response")

        if response.ok:
            if not response.content:
                return None
            return response.json()

        try:
            payload = response.json()
        except ValueError:
            payload = {"message": response.text}
        if not isinstance(payload, dict):
            payload = {"details": payload}
        error = map_error(response.status_code, payload)
        self._log_failure(normalized_method, path, response.status_code, error.message)
        raise error

    def _log_failure(self, method: str, path: str, status_code: int, message: str) -> None:
        log_action(
            self.logger,
            "http",
            f"{method} {path}",
            None,
            "error",
            level=logging.WARNING,
            status_code=status_code,
            message=message,
        )
