from __future__ import annotations

from ..models import MessageResponse, RoleMenuAccess, RoleMenuConfig
from .base import BaseClient, path_segment


class RoleMenuClient(BaseClient):
    def get_user_menu_access(self, user_id: str | None = None) -> RoleMenuAccess:
        """Access record for ``user_id``, or for the token's own user when omitted."""
        params = {"userId": user_id} if user_id else None
        data = self._request("GET", "/api/users/me/menu-access", params=params)
        return RoleMenuAccess.model_validate(data or {})

    def get_role_menu_config(self, role_id: str) -> RoleMenuConfig:
        data = self._request("GET", self._menu_config_path(role_id))
        return RoleMenuConfig.model_validate(data or {})

    def update_role_menu_config(self, role_id: str, config: RoleMenuConfig) -> MessageResponse:
        payload = config.model_dump(mode="json", by_alias=True)
        data = self._request("POST", self._menu_config_path(role_id), json_body=payload)
        return MessageResponse.model_validate(data or {})

    @staticmethod
    def _menu_config_path(role_id: str) -> str:
        return f"/api/roles/{path_segment(role_id)}/menu-config"
