"""Tests for the composition root."""

from analytics_core.event_dispatcher import EventDispatcher
from analytics_core.menu import AdminMenu, MainMenu, TopMenu
from analytics_core.options import InMemoryOptionBackend, OptionStore
from analytics_core.plugins import PluginManager
from analytics_core.services.di import register_all_services
from analytics_core.services.registry import ServiceRegistry
from analytics_core.settings import Settings
from analytics_core.translation import Translator


def test_all_services_share_one_dispatcher():
    registry = register_all_services(ServiceRegistry(), Settings(_env_file=None))
    dispatcher = registry.get(EventDispatcher)

    assert registry.get(PluginManager).dispatcher is dispatcher
    assert registry.get(MainMenu).dispatcher is dispatcher
    assert registry.get(AdminMenu).dispatcher is dispatcher
    assert registry.get(TopMenu).dispatcher is dispatcher


def test_services_are_singletons():
    registry = register_all_services(ServiceRegistry(), Settings(_env_file=None))
    assert registry.get(Translator) is registry.get(Translator)
    assert registry.get(OptionStore) is registry.get(OptionStore)


def test_settings_flow_into_services():
    settings = Settings(_env_file=None, test_mode=True, observer_error_policy="raise", default_menu_order=42)
    registry = register_all_services(ServiceRegistry(), settings)

    dispatcher = registry.get(EventDispatcher)
    assert dispatcher.test_mode is True
    assert dispatcher.error_policy == "raise"
    assert registry.get(Translator).strict is True
    assert registry.get(MainMenu).default_order == 42
    assert registry.get(Settings) is settings


def test_custom_option_backend():
    backend = InMemoryOptionBackend()
    registry = register_all_services(ServiceRegistry(), Settings(_env_file=None), option_backend=backend)
    assert registry.get(OptionStore).backend is backend
