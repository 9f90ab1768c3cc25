from __future__ import annotations

import sys
from pathlib import Path

import pytest

BASE_DIR = Path(__file__).resolve().parents[1]
SRC_DIR = BASE_DIR / "src"

sys.path.insert(0, str(SRC_DIR))

from hmis_menu_access.config import ClientConfig  # noqa: E402
from hmis_menu_access.http_client import HttpClient  # noqa: E402

BASE_URL = "https://hmis.example.com"


class ManualDispatcher:
    """Queues fetch tasks so a test decides when, and in which order, they resolve."""

    def __init__(self) -> None:
        self.tasks: list = []

    def __call__(self, task) -> None:
        self.tasks.append(task)

    def run(self, index: int = 0) -> None:
        self.tasks.pop(index)()

    def run_all(self) -> None:
        while self.tasks:
            self.run()


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig(api_base_url=BASE_URL, retries=1, retry_backoff_seconds=0)


@pytest.fixture
def http(config: ClientConfig) -> HttpClient:
    return HttpClient(config)


@pytest.fixture
def dispatcher() -> ManualDispatcher:
    return ManualDispatcher()
