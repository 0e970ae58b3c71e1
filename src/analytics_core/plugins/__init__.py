"""Plugin loading for the analytics core."""

from .base import Plugin, PluginLoadError
from .manager import PluginManager

__all__ = [
    "Plugin",
    "PluginLoadError",
    "PluginManager",
]
