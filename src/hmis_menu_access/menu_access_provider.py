from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from .clients.role_menu import RoleMenuClient
from .exceptions import ApiError
from .logging_utils import get_logger, log_action
from .models import RoleMenuAccess

Fetcher = Callable[[str | None], RoleMenuAccess | Mapping[str, object] | None]
Task = Callable[[], None]
Dispatcher = Callable[[Task], None]

DEFAULT_ERROR_MESSAGE = "Failed to load menu access"

_UNSET = object()


class ProviderStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


@dataclass(frozen=True)
class MenuAccessSnapshot:
    menu_access: RoleMenuAccess | None
    loading: bool
    error: str | None
    refetch: Callable[[], None]


def thread_dispatcher(task: Task) -> None:
    threading.Thread(target=task, daemon=True).start()


def inline_dispatcher(task: Task) -> None:
    task()


def describe_error(exc: BaseException) -> str:
    if isinstance(exc, ApiError):
        return exc.message or DEFAULT_ERROR_MESSAGE
    return str(exc) or DEFAULT_ERROR_MESSAGE


def _normalize(result: RoleMenuAccess | Mapping[str, object] | None) -> RoleMenuAccess:
    if isinstance(result, RoleMenuAccess):
        return result
    return RoleMenuAccess.model_validate(result or {})


class MenuAccessProvider:
    """Holds one user's access record and keeps it in step with the user identity.

    Fetches run through ``dispatcher`` (a daemon thread by default) and race:
    whichever resolves last publishes its result. With ``discard_stale=True``
    only the most recently issued ``load`` may publish.
    """

    def __init__(
        self,
        fetch: Fetcher,
        *,
        dispatcher: Dispatcher | None = None,
        discard_stale: bool = False,
        on_change: Callable[[MenuAccessSnapshot], None] | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._fetch = fetch
        self._dispatch = dispatcher or thread_dispatcher
        self.discard_stale = discard_stale
        self.on_change = on_change
        self.logger = logger or get_logger("hmis_menu_access.provider")
        self._lock = threading.Lock()
        self._observed_user: object = _UNSET
        self._user_id: str | None = None
        self._menu_access: RoleMenuAccess | None = None
        self._error: str | None = None
        self._settled_status = ProviderStatus.IDLE
        self._sequence = 0
        self._in_flight = 0

    @classmethod
    def from_client(cls, client: RoleMenuClient, **kwargs) -> MenuAccessProvider:
        return cls(client.get_user_menu_access, **kwargs)

    @property
    def menu_access(self) -> RoleMenuAccess | None:
        return self._menu_access

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def loading(self) -> bool:
        return self._in_flight > 0

    @property
    def status(self) -> ProviderStatus:
        return ProviderStatus.LOADING if self.loading else self._settled_status

    @property
    def user_id(self) -> str | None:
        return self._user_id

    def snapshot(self) -> MenuAccessSnapshot:
        with self._lock:
            return self._snapshot_locked()

    def set_user(self, user_id: str | None) -> bool:
        """Load for ``user_id`` unless it is the identity already observed."""
        with self._lock:
            if self._observed_user is not _UNSET and self._observed_user == user_id:
                return False
            self._observed_user = user_id
        self.load(user_id)
        return True

    def refetch(self) -> None:
        self.load(self._user_id)

    def load(self, user_id: str | None = None) -> None:
        with self._lock:
            self._sequence += 1
            token = self._sequence
            self._in_flight += 1
            self._user_id = user_id
            self._error = None
            snapshot = self._snapshot_locked()
        log_action(self.logger, "menu_access", "load", user_id, "started", request=token)
        try:
            self._notify(snapshot)
            self._dispatch(lambda: self._run(user_id, token))
        except Exception:
            with self._lock:
                self._in_flight -= 1
            raise

    def _run(self, user_id: str | None, token: int) -> None:
        try:
            record = _normalize(self._fetch(user_id))
        except Exception as exc:
            message = describe_error(exc)
            log_action(
                self.logger,
                "menu_access",
                "load",
                user_id,
                "error",
                level=logging.ERROR,
                request=token,
                error=message,
            )
            self._settle(token, None, message)
            return
        log_action(
            self.logger,
            "menu_access",
            "load",
            user_id,
            "success",
            request=token,
            role_id=record.role_id,
        )
        self._settle(token, record, None)

    def _settle(self, token: int, record: RoleMenuAccess | None, error: str | None) -> None:
        with self._lock:
            self._in_flight -= 1
            if self.discard_stale and token != self._sequence:
                snapshot = self._snapshot_locked()
            else:
                self._menu_access = record
                self._error = error
                self._settled_status = ProviderStatus.ERROR if error else ProviderStatus.READY
                snapshot = self._snapshot_locked()
        try:
            self._notify(snapshot)
        except Exception as exc:
            # Settling usually happens on a worker thread with nobody to re-raise to.
            log_action(
                self.logger,
                "menu_access",
                "on_change",
                self._user_id,
                "error",
                level=logging.ERROR,
                request=token,
                error=repr(exc),
            )

    def _snapshot_locked(self) -> MenuAccessSnapshot:
        return MenuAccessSnapshot(
            menu_access=self._menu_access,
            loading=self._in_flight > 0,
            error=self._error,
            refetch=self.refetch,
        )

    def _notify(self, snapshot: MenuAccessSnapshot) -> None:
        if self.on_change is not None:
            self.on_change(snapshot)
