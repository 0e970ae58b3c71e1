"""Plugin base class.

A plugin declares which events it observes. The PluginManager registers those
hooks with the event dispatcher under the plugin's name, so dispatches that
carry a plugin filter can target it.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any


class PluginLoadError(Exception):
    """Raised when a plugin cannot be loaded.

    This occurs when:
    - A plugin with the same name is already loaded
    - A hook names a method the plugin does not have
    - A hook is neither a method name nor a callable
    """


class Plugin(ABC):
    """Base class for analytics plugins.

    Example:
        ```python
        class Goals(Plugin):
            def get_registered_hooks(self):
                return {"Site.created": "create_default_goals"}

            def create_default_goals(self, params: list) -> None:
                params.append({"goals": []})
        ```
    """

    name: str | None = None

    @property
    def plugin_name(self) -> str:
        """The name observers are registered under. Defaults to the class name."""
        return self.name or type(self).__name__

    @abstractmethod
    def get_registered_hooks(self) -> dict[str, str | Callable[[list[Any]], Any]]:
        """Map event names to a method name on this plugin or to any callable."""

    def resolve_hook(self, event_name: str, hook: str | Callable[[list[Any]], Any]) -> Callable[[list[Any]], Any]:
        """Turn a hook declaration into the callable to register.

        Raises:
            PluginLoadError: If the hook cannot be resolved
        """
        if isinstance(hook, str):
            method = getattr(self, hook, None)
            if method is None or not callable(method):
                raise PluginLoadError(f"Plugin {self.plugin_name} has no method {hook!r} for event {event_name}")
            return method
        if callable(hook):
            return hook
        raise PluginLoadError(f"Plugin {self.plugin_name} declares an invalid hook for event {event_name}: {hook!r}")
