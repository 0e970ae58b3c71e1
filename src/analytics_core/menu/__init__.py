"""Menu registries for the reporting, admin and top menus."""

from .models import MenuItem
from .registry import AdminMenu, MainMenu, MenuRegistry, TopMenu

__all__ = [
    "AdminMenu",
    "MainMenu",
    "MenuItem",
    "MenuRegistry",
    "TopMenu",
]
