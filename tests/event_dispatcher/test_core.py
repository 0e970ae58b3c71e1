"""Tests for event dispatcher types."""

import pytest

from analytics_core.event_dispatcher import CoreEvents, Observer, ObserverRegistrationError, to_event_name


def site_created(params: list) -> None:
    """Module-level observer with a stable qualname."""


def test_to_event_name_accepts_conventional_names():
    assert to_event_name("Site.created") == "Site.created"
    assert to_event_name("Goals_Manage") == "Goals_Manage"


def test_to_event_name_accepts_core_events():
    name = to_event_name(CoreEvents.MENU_ADMIN_ADD_ITEMS)
    assert name == "Menu.Admin.addItems"
    assert type(name) is str


@pytest.mark.parametrize("name", ["", "has space", "tab\tname", "Site.created\n", None, 42])
def test_to_event_name_rejects_invalid(name):
    with pytest.raises(ObserverRegistrationError):
        to_event_name(name)


def test_observer_describe():
    assert Observer(callback=site_created, sequence=0).describe() == "site_created"
    assert Observer(callback=site_created, plugin="Goals", sequence=1).describe() == "Goals:site_created"


def test_observer_accepts():
    owned = Observer(callback=site_created, plugin="Goals", sequence=0)
    anonymous = Observer(callback=site_created, sequence=1)

    assert owned.accepts(None) is True
    assert owned.accepts({"Goals"}) is True
    assert owned.accepts({"Live"}) is False
    assert anonymous.accepts(None) is True
    assert anonymous.accepts({"Goals"}) is False


def test_observer_is_frozen():
    observer = Observer(callback=site_created, sequence=0)
    with pytest.raises(Exception):
        observer.sequence = 5
