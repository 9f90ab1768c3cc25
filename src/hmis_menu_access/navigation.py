from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class NavigationItem:
    title: str
    href: str
    icon: str
    description: str | None = None


@dataclass(frozen=True)
class NavigationCategory:
    id: str
    title: str
    icon: str
    description: str
    items: tuple[NavigationItem, ...] = ()


@dataclass(frozen=True)
class NavigationTable:
    """Static navigation configuration, built once and shared by reference."""

    categories: tuple[NavigationCategory, ...]

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for category in self.categories:
            if category.id in seen:
                raise ValueError(f"Duplicate navigation category id: {category.id}")
            seen.add(category.id)

    def __iter__(self) -> Iterator[NavigationCategory]:
        return iter(self.categories)

    def __len__(self) -> int:
        return len(self.categories)

    def get_category_by_id(self, category_id: str) -> NavigationCategory | None:
        return next((category for category in self.categories if category.id == category_id), None)

    def get_category_by_path(self, pathname: str) -> NavigationCategory | None:
        """Category owning the longest item href that prefixes ``pathname``.

        Falls back to the first category when nothing matches.
        """
        best: tuple[int, NavigationCategory] | None = None
        for category in self.categories:
            for item in category.items:
                if not _path_starts_with(pathname, item.href):
                    continue
                if best is None or len(item.href) > best[0]:
                    best = (len(item.href), category)
        if best is not None:
            return best[1]
        return self.categories[0] if self.categories else None


def _path_starts_with(pathname: str, href: str) -> bool:
    if href == "/":
        return pathname == "/"
    return pathname == href or pathname.startswith(href.rstrip("/") + "/")


def _items(*rows: tuple[str, str, str]) -> tuple[NavigationItem, ...]:
    return tuple(NavigationItem(title=title, href=href, icon=icon) for title, href, icon in rows)


HOSPITAL_NAVIGATION = NavigationTable(
    categories=(
        NavigationCategory(
            id="overview",
            title="Dashboard",
            icon="home",
            description="Main dashboard and overview sections",
            items=_items(
                ("Dashboard", "/", "home"),
                ("Departments", "/departments", "building-2"),
                ("Analytics", "/analytics", "bar-chart-3"),
                ("Regional Dashboard", "/regional-dashboard", "map-pin"),
            ),
        ),
        NavigationCategory(
            id="patient-care",
            title="Patient Care",
            icon="users",
            description="Patient management and care services",
            items=_items(
                ("Patient Registration", "/patients", "users"),
                ("Triaging", "/triaging", "activity"),
                ("Appointments", "/appointments", "calendar"),
                ("Queue Management", "/queue", "list-ordered"),
                ("Medical Records", "/medical-records", "file-text"),
            ),
        ),
        NavigationCategory(
            id="clinical-services",
            title="Clinical Services",
            icon="stethoscope",
            description="Clinical departments and services",
            items=_items(
                ("Doctors Module", "/doctors", "stethoscope"),
                ("Pharmacy", "/pharmacy", "pill"),
                ("Laboratory", "/laboratory", "flask-conical"),
                ("Radiology", "/radiology", "image"),
                ("Inpatient", "/inpatient", "bed-double"),
                ("Maternity", "/maternity", "baby"),
                ("ICU", "/icu", "heart-pulse"),
            ),
        ),
        NavigationCategory(
            id="financial",
            title="Financial Management",
            icon="dollar-sign",
            description="Financial operations and billing",
            items=_items(
                ("General Ledger", "/finance/ledger", "clipboard"),
                ("Accounts Payable", "/finance/payable", "receipt"),
                ("Accounts Receivable", "/finance/receivable", "credit-card"),
                ("Budgeting", "/finance/budgeting", "dollar-sign"),
                ("Cash Management", "/finance/cash", "dollar-sign"),
                ("Fixed Assets", "/finance/assets", "building-2"),
                ("Hospital Charges", "/finance/charges", "dollar-sign"),
                ("Revenue Share", "/finance/revenue-share", "dollar-sign"),
                ("Billing & Invoicing", "/billing", "receipt"),
                ("Insurance Management", "/insurance", "file-text"),
            ),
        ),
        NavigationCategory(
            id="procurement",
            title="Procurement & Inventory",
            icon="shopping-cart",
            description="Procurement and inventory management",
            items=_items(
                ("Vendor Management", "/procurement/vendors", "users"),
                ("Purchase Orders", "/procurement/orders", "shopping-cart"),
                ("Inventory Overview", "/inventory", "grid"),
                ("Add Inventory Item", "/inventory/new", "plus-circle"),
                ("Stock Adjustment", "/inventory/adjust", "layers"),
                ("Inventory Analytics", "/inventory/analytics", "bar-chart-3"),
                ("Drug Notifications", "/procurement/notifications", "bell"),
            ),
        ),
        NavigationCategory(
            id="administrative",
            title="Administrative",
            icon="user-cog",
            description="HR and administrative functions",
            items=_items(
                ("Employee Management", "/hr/employees", "user-cog"),
                ("System Administration", "/administration", "shield"),
                ("Clinical Configuration", "/configuration", "clipboard-list"),
                ("Settings", "/settings", "settings"),
            ),
        ),
    )
)
