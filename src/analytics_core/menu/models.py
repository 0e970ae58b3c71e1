"""Menu data models."""

from typing import Any

from pydantic import BaseModel, Field

MenuUrl = dict[str, Any] | str | None


class MenuItem(BaseModel):
    """A top-level menu entry or one of its submenu entries."""

    name: str
    url: MenuUrl = None
    order: int
    tooltip: str | None = None
    is_html: bool = False
    children: dict[str, "MenuItem"] = Field(default_factory=dict)

    @property
    def has_submenu(self) -> bool:
        return bool(self.children)


class MenuEntry(BaseModel):
    """An ``add`` call, kept until the menu is built."""

    main: str
    sub: str | None = None
    url: MenuUrl = None
    order: int
    tooltip: str | None = None
    is_html: bool = False
