from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import quote

from ..config import ClientConfig, load_config
from ..http_client import HttpClient


def path_segment(value: object) -> str:
    """Percent-encode one path segment; ``/`` included, so ids cannot add segments."""
    return quote(str(value), safe="")


@dataclass
class BaseClient:
    http: HttpClient
    access_token: str | None = None

    @classmethod
    def from_config(cls, config: ClientConfig | None = None, **kwargs):
        """Client over a fresh ``HttpClient``; ``config`` defaults to ``load_config()``."""
        return cls(http=HttpClient(config or load_config()), **kwargs)

    def _token(self) -> str | None:
        return self.access_token or self.http.config.access_token

    def _auth_headers(self) -> dict[str, str]:
        token = self._token()
        return {"Authorization": f"Bearer {token}"} if token else {}

    def _request(self, method: str, path: str, **kwargs):
        headers = kwargs.pop("headers", {})
        merged = {**self._auth_headers(), **headers}
        return self.http.request(method, path, headers=merged, **kwargs)
