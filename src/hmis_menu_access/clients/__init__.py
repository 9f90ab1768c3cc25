from .role_menu import RoleMenuClient

__all__ = ["RoleMenuClient"]
