"""Plugin manager.

Loads plugins into the event dispatcher and replays pending events to plugins
that arrive after those events were posted.
"""

from collections.abc import Iterable

from loguru import logger

from analytics_core.event_dispatcher import EventDispatcher, to_event_name

from .base import Plugin, PluginLoadError


class PluginManager:
    """Keeps track of loaded plugins and wires their hooks into the dispatcher."""

    def __init__(self, dispatcher: EventDispatcher):
        self.dispatcher = dispatcher
        self._loaded: dict[str, Plugin] = {}

    def load_plugin(self, plugin: Plugin) -> Plugin:
        """Load a plugin and register its hooks.

        Hooks and event names are checked before anything is registered, so a
        plugin with a broken hook leaves the dispatcher untouched.

        Args:
            plugin: The plugin instance to load

        Returns:
            The loaded plugin

        Raises:
            PluginLoadError: If the plugin is already loaded or a hook is invalid
            ObserverRegistrationError: If a hook names an invalid event
        """
        name = plugin.plugin_name
        if name in self._loaded:
            raise PluginLoadError(f"Plugin {name} is already loaded")

        hooks = [
            (to_event_name(event_name), plugin.resolve_hook(event_name, hook))
            for event_name, hook in plugin.get_registered_hooks().items()
        ]

        with self.dispatcher.registering_for(name):
            for event_name, callback in hooks:
                self.dispatcher.register(event_name, callback)

        self._loaded[name] = plugin
        logger.info(f"Plugin {name} loaded with {len(hooks)} hooks")

        pending = self.dispatcher.get_pending_events()
        if pending:
            logger.debug(f"Replaying {len(pending)} pending events to plugin {name}")
            self.dispatcher.post_pending_events_to([name])

        return plugin

    def load_plugins(self, plugins: Iterable[Plugin]) -> list[Plugin]:
        """Load several plugins in order."""
        return [self.load_plugin(plugin) for plugin in plugins]

    def get_loaded_plugin(self, name: str) -> Plugin:
        """Get a loaded plugin by name.

        Raises:
            KeyError: If no plugin with that name is loaded
        """
        if name not in self._loaded:
            raise KeyError(f"Plugin {name} not loaded")
        return self._loaded[name]

    def get_loaded_plugin_names(self) -> list[str]:
        """Names of loaded plugins, in load order."""
        return list(self._loaded.keys())

    def is_plugin_loaded(self, name: str) -> bool:
        return name in self._loaded
