"""Dependency injection setup module.

This module is the composition root of the analytics core: it builds the one
EventDispatcher of the process and hands it to every service that registers
observers or posts events.
"""

from loguru import logger

from analytics_core.event_dispatcher import EventDispatcher
from analytics_core.menu import AdminMenu, MainMenu, TopMenu
from analytics_core.options import InMemoryOptionBackend, OptionBackend, OptionStore
from analytics_core.plugins import PluginManager
from analytics_core.services.registry import ServiceRegistry
from analytics_core.settings import Settings, get_settings
from analytics_core.translation import Translator


def register_core_services(registry: ServiceRegistry, settings: Settings) -> EventDispatcher:
    """Register the event dispatcher and plugin manager.

    Args:
        registry: Service registry instance to register services in
        settings: Settings providing test mode and the observer error policy

    Returns:
        The registered EventDispatcher
    """
    logger.debug("Registering core services in DI container")

    dispatcher = EventDispatcher(error_policy=settings.observer_error_policy, test_mode=settings.test_mode)
    registry.register_singleton(Settings, settings)
    registry.register_singleton(EventDispatcher, dispatcher)
    registry.register_singleton(PluginManager, PluginManager(dispatcher))
    return dispatcher


def register_app_services(
    registry: ServiceRegistry,
    settings: Settings,
    dispatcher: EventDispatcher,
    option_backend: OptionBackend | None = None,
) -> None:
    """Register translation, options and menus.

    Args:
        registry: Service registry instance to register services in
        settings: Settings for translation strictness and menu ordering
        dispatcher: The dispatcher the menus post their build events through
        option_backend: Option persistence; defaults to an in-memory backend
    """
    logger.debug("Registering application services in DI container")

    registry.register_singleton(Translator, Translator(strict=settings.translations_are_strict))
    registry.register_singleton(OptionStore, OptionStore(option_backend or InMemoryOptionBackend()))
    registry.register_singleton(MainMenu, MainMenu(dispatcher, settings.default_menu_order))
    registry.register_singleton(AdminMenu, AdminMenu(dispatcher, settings.default_menu_order))
    registry.register_singleton(TopMenu, TopMenu(dispatcher, settings.default_menu_order))


def register_all_services(
    registry: ServiceRegistry,
    settings: Settings | None = None,
    option_backend: OptionBackend | None = None,
) -> ServiceRegistry:
    """Register all services in the service registry.

    Args:
        registry: Service registry instance to register services in
        settings: Settings to use; defaults to ``get_settings()``
        option_backend: Option persistence; defaults to an in-memory backend

    Returns:
        The same registry, for chaining
    """
    settings = settings or get_settings()
    dispatcher = register_core_services(registry, settings)
    register_app_services(registry, settings, dispatcher, option_backend)
    logger.info("Analytics core services registered")
    return registry
