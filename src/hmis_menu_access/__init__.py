from .breadcrumbs import Breadcrumb, build_breadcrumbs
from .clients.role_menu import RoleMenuClient
from .config import ClientConfig, ConfigError, load_config
from .exceptions import (
    ApiError,
    AuthError,
    MalformedInputError,
    NotFoundError,
    PermissionDeniedError,
    ServerError,
    TransportError,
    ValidationError,
)
from .http_client import HttpClient
from .menu_access_provider import MenuAccessProvider, MenuAccessSnapshot, ProviderStatus
from .menu_filter import (
    TabItem,
    filter_navigation_categories,
    filter_queue_service_points,
    filter_sidebar_items,
    filter_tabs,
    is_queue_allowed,
    is_tab_allowed,
    match_page_path,
    normalize_page_path,
    resolve_default_tab,
)
from .models import MenuItemAccess, RoleMenuAccess, RoleMenuConfig, TabAccess
from .navigation import HOSPITAL_NAVIGATION, NavigationCategory, NavigationItem, NavigationTable

__all__ = [
    "ApiError",
    "AuthError",
    "Breadcrumb",
    "ClientConfig",
    "ConfigError",
    "HOSPITAL_NAVIGATION",
    "HttpClient",
    "MalformedInputError",
    "MenuAccessProvider",
    "MenuAccessSnapshot",
    "MenuItemAccess",
    "NavigationCategory",
    "NavigationItem",
    "NavigationTable",
    "NotFoundError",
    "PermissionDeniedError",
    "ProviderStatus",
    "RoleMenuAccess",
    "RoleMenuClient",
    "RoleMenuConfig",
    "ServerError",
    "TabAccess",
    "TabItem",
    "TransportError",
    "ValidationError",
    "build_breadcrumbs",
    "filter_navigation_categories",
    "filter_queue_service_points",
    "filter_sidebar_items",
    "filter_tabs",
    "is_queue_allowed",
    "is_tab_allowed",
    "load_config",
    "match_page_path",
    "normalize_page_path",
    "resolve_default_tab",
]
