from __future__ import annotations

import os

import pytest

from hmis_menu_access.config import ConfigError, load_config

_ENV_KEYS = (
    "HMIS_ENV",
    "HMIS_API_BASE_URL",
    "HMIS_API_BASE_URL_DEV",
    "HMIS_API_BASE_URL_STAGING",
    "HMIS_ACCESS_TOKEN",
    "HMIS_TIMEOUT_SECONDS",
    "HMIS_RETRIES",
    "HMIS_RETRY_BACKOFF_SECONDS",
    "HMIS_VERIFY_SSL",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # load_dotenv writes straight into os.environ; a private copy keeps that from leaking.
    environ = {key: value for key, value in os.environ.items() if key not in _ENV_KEYS}
    monkeypatch.setattr(os, "environ", environ)


def test_load_config_requires_base_url() -> None:
    with pytest.raises(ConfigError, match="HMIS_API_BASE_URL"):
        load_config()


def test_load_config_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HMIS_API_BASE_URL", "http://localhost:3001/")

    cfg = load_config()

    assert cfg.api_base_url == "http://localhost:3001"
    assert cfg.access_token is None
    assert cfg.timeout_seconds == 10.0
    assert cfg.retries == 2
    assert cfg.verify_ssl is True


def test_load_config_profile(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HMIS_ENV", "staging")
    monkeypatch.setenv("HMIS_API_BASE_URL", "https://fallback.example.com")
    monkeypatch.setenv("HMIS_API_BASE_URL_STAGING", "https://staging.example.com")
    monkeypatch.setenv("HMIS_VERIFY_SSL", "off")

    cfg = load_config()

    assert cfg.api_base_url == "https://staging.example.com"
    assert cfg.verify_ssl is False


def test_load_config_reads_env_file(tmp_path) -> None:
    env_file = tmp_path / "hmis.env"
    env_file.write_text("HMIS_API_BASE_URL=https://file.example.com\nHMIS_RETRIES=0\nHMIS_ACCESS_TOKEN=file-token\n")

    cfg = load_config(str(env_file))

    assert cfg.api_base_url == "https://file.example.com"
    assert cfg.retries == 0
    assert cfg.access_token == "file-token"


@pytest.mark.parametrize(
    ("key", "value"),
    [
        ("HMIS_TIMEOUT_SECONDS", "0"),
        ("HMIS_TIMEOUT_SECONDS", "-1"),
        ("HMIS_RETRIES", "1.5"),
        ("HMIS_RETRIES", "-1"),
        ("HMIS_RETRY_BACKOFF_SECONDS", "-0.1"),
        ("HMIS_RETRIES", "abc"),
        ("HMIS_TIMEOUT_SECONDS", "abc"),
    ],
)
def test_load_config_rejects_invalid_values(monkeypatch: pytest.MonkeyPatch, key: str, value: str) -> None:
    monkeypatch.setenv("HMIS_API_BASE_URL", "https://api.example.com")
    monkeypatch.setenv(key, value)

    with pytest.raises(ConfigError, match=key):
        load_config()


def test_blank_access_token_means_no_token(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HMIS_API_BASE_URL", "https://api.example.com")
    monkeypatch.setenv("HMIS_ACCESS_TOKEN", "   ")

    assert load_config().access_token is None
