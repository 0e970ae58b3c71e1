"""Free-function bridge to the analytics core services.

Plugin code written against the function-style API calls these helpers; each
one resolves its service from the process service registry (populated by
``register_all_services``) and delegates to it.

Example:
    ```python
    from analytics_core import functions
    from analytics_core.services.di import register_all_services
    from analytics_core.services.registry import get_service_registry

    register_all_services(get_service_registry())

    functions.add_action("Site.created", on_site_created)
    functions.post_event("Site.created", [site_id])
    ```
"""

from collections.abc import Iterable
from typing import Any

from analytics_core.event_dispatcher import DispatchReport, EventDispatcher, Observer
from analytics_core.event_dispatcher.core import ObserverCallback
from analytics_core.menu import AdminMenu, MainMenu, MenuItem, TopMenu
from analytics_core.menu.models import MenuUrl
from analytics_core.options import OptionStore
from analytics_core.services.registry import ServiceRegistry, get_service_registry
from analytics_core.translation import Translator

ADMIN_SETTINGS_MENU = "General_Settings"


def _registry(registry: ServiceRegistry | None) -> ServiceRegistry:
    return registry if registry is not None else get_service_registry()


# Events


def post_event(
    event_name: str,
    params: list[Any] | None = None,
    pending: bool = False,
    plugins: Iterable[str] | str | None = None,
    *,
    registry: ServiceRegistry | None = None,
) -> DispatchReport:
    """Post an event to the dispatcher, which notifies the observers.

    Args:
        event_name: The event name
        params: Parameter list forwarded to every observer; mutated in place
        pending: Also replay the event to plugins loaded later
        plugins: Restrict delivery to these plugins
        registry: Service registry to use instead of the process one
    """
    return _registry(registry).get(EventDispatcher).dispatch(event_name, params, pending, plugins)


def add_action(
    event_name: str,
    callback: ObserverCallback,
    plugin: str | None = None,
    *,
    registry: ServiceRegistry | None = None,
) -> Observer:
    """Register a callback to run when ``event_name`` is posted."""
    return _registry(registry).get(EventDispatcher).register(event_name, callback, plugin)


def post_test_event(
    event_name: str,
    params: list[Any] | None = None,
    pending: bool = False,
    plugins: Iterable[str] | str | None = None,
    *,
    registry: ServiceRegistry | None = None,
) -> DispatchReport | None:
    """Post an event only if the process runs in test mode."""
    return _registry(registry).get(EventDispatcher).test_only_dispatch(event_name, params, pending, plugins)


# Translations


def translate(key: str, *args: Any, registry: ServiceRegistry | None = None) -> str:
    """Return the translated string, or ``key`` if there is no translation."""
    return _registry(registry).get(Translator).translate(key, *args)


def translate_exception(key: str, *args: Any, registry: ServiceRegistry | None = None) -> str:
    """Like ``translate`` but never raises. Use it to build exception messages."""
    try:
        translator = _registry(registry).get(Translator)
    except KeyError:
        return str(key)
    return translator.translate_exception(key, *args)


# Options


def get_option(name: str, *, registry: ServiceRegistry | None = None) -> str | None:
    """Return the option value, or None if it doesn't exist."""
    return _registry(registry).get(OptionStore).get(name)


def set_option(name: str, value: Any, autoload: bool = False, *, registry: ServiceRegistry | None = None) -> None:
    """Store an option value.

    Args:
        name: Option name
        value: Option value
        autoload: Load the option on every request; use for options nearly every request reads
        registry: Service registry to use instead of the process one
    """
    _registry(registry).get(OptionStore).set(name, value, autoload)


# Admin menu


def get_admin_menu(*, registry: ServiceRegistry | None = None) -> dict[str, MenuItem]:
    return _registry(registry).get(AdminMenu).get()


def add_admin_menu(
    admin_menu_name: str,
    url: MenuUrl,
    displayed_for_current_user: bool = True,
    order: int | None = None,
    *,
    registry: ServiceRegistry | None = None,
) -> None:
    """Add an entry under the admin settings menu."""
    _registry(registry).get(AdminMenu).add(ADMIN_SETTINGS_MENU, admin_menu_name, url, displayed_for_current_user, order)


def add_admin_sub_menu(
    admin_menu_name: str,
    admin_sub_menu_name: str,
    url: MenuUrl,
    displayed_for_current_user: bool = True,
    order: int | None = None,
    *,
    registry: ServiceRegistry | None = None,
) -> None:
    _registry(registry).get(AdminMenu).add(admin_menu_name, admin_sub_menu_name, url, displayed_for_current_user, order)


def rename_admin_menu_entry(
    admin_menu_original: str,
    admin_menu_renamed: str,
    *,
    registry: ServiceRegistry | None = None,
) -> None:
    _registry(registry).get(AdminMenu).rename(admin_menu_original, None, admin_menu_renamed, None)


# Main menu


def get_menu(*, registry: ServiceRegistry | None = None) -> dict[str, MenuItem]:
    return _registry(registry).get(MainMenu).get()


def add_menu(
    main_menu_name: str,
    sub_menu_name: str | None,
    url: MenuUrl,
    displayed_for_current_user: bool = True,
    order: int | None = None,
    *,
    registry: ServiceRegistry | None = None,
) -> None:
    """Add an entry to the reporting menu."""
    _registry(registry).get(MainMenu).add(main_menu_name, sub_menu_name, url, displayed_for_current_user, order)


def rename_menu_entry(
    main_menu_original: str,
    sub_menu_original: str | None,
    main_menu_renamed: str,
    sub_menu_renamed: str | None,
    *,
    registry: ServiceRegistry | None = None,
) -> None:
    _registry(registry).get(MainMenu).rename(main_menu_original, sub_menu_original, main_menu_renamed, sub_menu_renamed)


def edit_menu_url(
    main_menu_to_edit: str,
    sub_menu_to_edit: str | None,
    new_url: MenuUrl,
    *,
    registry: ServiceRegistry | None = None,
) -> None:
    _registry(registry).get(MainMenu).edit_url(main_menu_to_edit, sub_menu_to_edit, new_url)


# Top menu


def get_top_menu(*, registry: ServiceRegistry | None = None) -> dict[str, MenuItem]:
    return _registry(registry).get(TopMenu).get()


def add_top_menu(
    top_menu_name: str,
    data: MenuUrl,
    displayed_for_current_user: bool = True,
    order: int | None = None,
    is_html: bool = False,
    tooltip: str | None = None,
    *,
    registry: ServiceRegistry | None = None,
) -> None:
    """Add an entry to the top menu.

    Args:
        top_menu_name: Entry name
        data: The URL, or markup if ``is_html`` is set
        displayed_for_current_user: Entries the current user may not see are dropped
        order: Sort key; lower comes first
        is_html: Treat ``data`` as markup
        tooltip: Tooltip to display
        registry: Service registry to use instead of the process one
    """
    top_menu = _registry(registry).get(TopMenu)
    if is_html:
        top_menu.add_html(top_menu_name, str(data), displayed_for_current_user, order, tooltip)
    else:
        top_menu.add(top_menu_name, None, data, displayed_for_current_user, order, tooltip)


def rename_top_menu_entry(
    top_menu_original: str,
    top_menu_renamed: str,
    *,
    registry: ServiceRegistry | None = None,
) -> None:
    _registry(registry).get(TopMenu).rename(top_menu_original, None, top_menu_renamed, None)
