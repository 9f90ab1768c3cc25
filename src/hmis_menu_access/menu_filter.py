"""Role-based visibility filters for navigation categories, sidebar items, tabs and queues.

Two policies meet here and are kept apart on purpose:

* no access record at all (still loading, or the fetch failed) permits
  everything, so navigation never renders empty while access data is pending;
* once a record exists, only what it enumerates is visible. A page path with
  no tab entries shows no tabs.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, TypeVar

from .exceptions import MalformedInputError
from .models import RoleMenuAccess
from .navigation import NavigationCategory, NavigationItem

WILDCARD = "*"
_DYNAMIC_SEGMENT = re.compile(r"\[.*?\]")

T = TypeVar("T")


@dataclass(frozen=True)
class TabItem:
    value: str
    label: str


def _require_sequence(value: object, name: str) -> Sequence[Any]:
    if isinstance(value, (str, bytes, Mapping)) or not isinstance(value, Sequence):
        raise MalformedInputError(f"{name} must be a list or tuple, got {type(value).__name__}")
    return value


def _require_access(access: object) -> RoleMenuAccess | None:
    if access is None or isinstance(access, RoleMenuAccess):
        return access
    raise MalformedInputError(f"access must be a RoleMenuAccess or None, got {type(access).__name__}")


def _require_text(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise MalformedInputError(f"{name} must be a string, got {type(value).__name__}")
    return value


def _tab_value(tab: object) -> str:
    if isinstance(tab, Mapping):
        value = tab.get("value")
    else:
        value = getattr(tab, "value", None)
    if not isinstance(value, str):
        raise MalformedInputError(f"tab entries need a string 'value', got {tab!r}")
    return value


def normalize_page_path(path: str) -> str:
    """Replace dynamic route segments such as ``[id]`` with ``*``."""
    return _DYNAMIC_SEGMENT.sub(WILDCARD, _require_text(path, "page path"))


def match_page_path(page_path: str, pattern: str) -> bool:
    """Segment-by-segment comparison of two normalized paths.

    A ``*`` segment in ``pattern`` matches exactly one segment of
    ``page_path``; a ``*`` in ``page_path`` only matches a ``*``. Segment
    counts must agree, so ``/patients`` never matches ``/patients/123``.
    """
    left = normalize_page_path(page_path).rstrip("/").split("/")
    right = normalize_page_path(pattern).rstrip("/").split("/")
    if len(left) != len(right):
        return False
    return all(a == b or b == WILDCARD for a, b in zip(left, right))


def filter_navigation_categories(
    categories: Sequence[NavigationCategory],
    access: RoleMenuAccess | None,
) -> list[NavigationCategory]:
    categories = _require_sequence(categories, "categories")
    access = _require_access(access)
    if access is None:
        return list(categories)
    allowed = set(access.categories)
    return [category for category in categories if category.id in allowed]


def filter_sidebar_items(
    items: Sequence[NavigationItem],
    category_id: str,
    access: RoleMenuAccess | None,
) -> list[NavigationItem]:
    items = _require_sequence(items, "items")
    access = _require_access(access)
    if access is None:
        return list(items)
    if category_id not in access.categories:
        return []
    allowed_paths = {entry.path for entry in access.menu_items if entry.category_id == category_id}
    return [item for item in items if item.href in allowed_paths]


def _allowed_tab_ids(normalized: str, access: RoleMenuAccess) -> set[str]:
    return {tab.tab_id for tab in access.tabs if match_page_path(normalized, tab.page_path)}


def filter_tabs(tabs: Sequence[T], page_path_pattern: str, access: RoleMenuAccess | None) -> list[T]:
    tabs = _require_sequence(tabs, "tabs")
    normalized = normalize_page_path(page_path_pattern)
    access = _require_access(access)
    if access is None:
        return list(tabs)
    allowed = _allowed_tab_ids(normalized, access)
    return [tab for tab in tabs if _tab_value(tab) in allowed]


def is_tab_allowed(page_path_pattern: str, tab_value: str, access: RoleMenuAccess | None) -> bool:
    normalized = normalize_page_path(page_path_pattern)
    tab_value = _require_text(tab_value, "tab value")
    access = _require_access(access)
    if access is None:
        return True
    return tab_value in _allowed_tab_ids(normalized, access)


def resolve_default_tab(tabs: Sequence[object], default_value: str | None = None) -> str | None:
    """Pick ``default_value`` if it survived filtering, else the first remaining tab."""
    values = [_tab_value(tab) for tab in _require_sequence(tabs, "tabs")]
    if default_value is not None and default_value in values:
        return default_value
    return values[0] if values else None


def is_queue_allowed(service_point: str, access: RoleMenuAccess | None) -> bool:
    service_point = _require_text(service_point, "service point")
    access = _require_access(access)
    if access is None:
        return True
    return service_point in access.queues


def filter_queue_service_points(service_points: Sequence[str], access: RoleMenuAccess | None) -> list[str]:
    service_points = _require_sequence(service_points, "service_points")
    access = _require_access(access)
    if access is None:
        return list(service_points)
    allowed = set(access.queues)
    return [point for point in service_points if point in allowed]
