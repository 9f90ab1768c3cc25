from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator


def _pair_to_mapping(value: Any, first: str, second: str) -> Any:
    if isinstance(value, (list, tuple)) and len(value) == 2:
        return {first: value[0], second: value[1]}
    return value


class MenuItemAccess(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    category_id: str = Field(alias="categoryId")
    path: str = Field(validation_alias=AliasChoices("path", "menuItemPath"))

    @model_validator(mode="before")
    @classmethod
    def _accept_pair(cls, value: Any) -> Any:
        return _pair_to_mapping(value, "categoryId", "path")


class TabAccess(BaseModel):
    """One permitted (page path pattern, tab id) pair.

    The service sends ``{"pagePath": ..., "tabId": ...}`` objects; plain
    two-element pairs are accepted too so fixtures can stay terse.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    page_path: str = Field(alias="pagePath")
    tab_id: str = Field(alias="tabId")

    @model_validator(mode="before")
    @classmethod
    def _accept_pair(cls, value: Any) -> Any:
        return _pair_to_mapping(value, "pagePath", "tabId")


class RoleMenuAccess(BaseModel):
    """Everything a role is permitted to see.

    Missing or null sub-collections become empty; an empty collection grants
    nothing. Instances are frozen and replaced wholesale on refetch.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    role_id: str | None = Field(default=None, alias="roleId")
    categories: tuple[str, ...] = ()
    menu_items: tuple[MenuItemAccess, ...] = Field(default=(), alias="menuItems")
    tabs: tuple[TabAccess, ...] = ()
    queues: tuple[str, ...] = ()

    @field_validator("categories", "menu_items", "tabs", "queues", mode="before")
    @classmethod
    def _missing_as_empty(cls, value: Any) -> Any:
        return () if value is None else value

    @field_validator("role_id", mode="before")
    @classmethod
    def _role_id_as_text(cls, value: Any) -> Any:
        return None if value is None else str(value)

    @property
    def tab_pairs(self) -> tuple[tuple[str, str], ...]:
        return tuple((tab.page_path, tab.tab_id) for tab in self.tabs)


class CategoryRule(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    category_id: str = Field(alias="categoryId")
    is_allowed: bool = Field(default=True, alias="isAllowed")


class MenuItemRule(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    category_id: str = Field(alias="categoryId")
    menu_item_path: str = Field(alias="menuItemPath")
    is_allowed: bool = Field(default=True, alias="isAllowed")


class TabRule(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    page_path: str = Field(alias="pagePath")
    tab_id: str = Field(alias="tabId")
    is_allowed: bool = Field(default=True, alias="isAllowed")


class QueueRule(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    service_point: str = Field(alias="servicePoint")
    is_allowed: bool = Field(default=True, alias="isAllowed")


class RoleMenuConfig(BaseModel):
    """Administrative view of a role's menu configuration, denied rows included."""

    model_config = ConfigDict(populate_by_name=True)

    categories: list[CategoryRule] = Field(default_factory=list)
    menu_items: list[MenuItemRule] = Field(default_factory=list, alias="menuItems")
    tabs: list[TabRule] = Field(default_factory=list)
    queues: list[QueueRule] = Field(default_factory=list)

    @field_validator("categories", "menu_items", "tabs", "queues", mode="before")
    @classmethod
    def _missing_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    def to_access(self, role_id: str | None = None) -> RoleMenuAccess:
        return RoleMenuAccess(
            role_id=role_id,
            categories=tuple(rule.category_id for rule in self.categories if rule.is_allowed),
            menu_items=tuple(
                MenuItemAccess(category_id=rule.category_id, path=rule.menu_item_path)
                for rule in self.menu_items
                if rule.is_allowed
            ),
            tabs=tuple(
                TabAccess(page_path=rule.page_path, tab_id=rule.tab_id)
                for rule in self.tabs
                if rule.is_allowed
            ),
            queues=tuple(rule.service_point for rule in self.queues if rule.is_allowed),
        )


class MessageResponse(BaseModel):
    message: str | None = None
