"""Core Event Dispatcher Components.

This module contains the fundamental abstractions of the observer registry.
They have no dependency on the rest of the package and can be imported from
plugin bootstrap code without pulling in the dispatcher itself.

## Key Components

- **EventName**: Typed event identifier (``Plugin.Suffix`` or ``Plugin_Suffix``)
- **CoreEvents**: Events posted by the analytics core itself
- **Observer**: A registered callback with its owning plugin and sequence number
- **EventDispatcherError**: Base exception for all dispatcher related errors
- **ObserverRegistrationError**: Raised when an observer cannot be registered
- **ObserverFailureError**: Raised when an observer fails under the ``raise`` policy

## Usage Example

```python
from analytics_core.event_dispatcher import EventDispatcher

dispatcher = EventDispatcher()

def add_site_name(params: list) -> None:
    params.append({"name": "demo"})

with dispatcher.registering_for("SitesManager"):
    dispatcher.register("Site.created", add_site_name)

params = [{"site_id": 5}]
dispatcher.dispatch("Site.created", params)
assert params == [{"site_id": 5}, {"name": "demo"}]
```

"""

import re
from collections.abc import Callable
from enum import StrEnum
from typing import Any, NewType

from pydantic import BaseModel, ConfigDict

EventName = NewType("EventName", str)
ObserverCallback = Callable[[list[Any]], Any]

_EVENT_NAME_PATTERN = re.compile(r"\S+")


class CoreEvents(StrEnum):
    """Events posted by the analytics core itself."""

    MENU_REPORTING_ADD_ITEMS = "Menu.Reporting.addItems"
    MENU_ADMIN_ADD_ITEMS = "Menu.Admin.addItems"
    MENU_TOP_ADD_ITEMS = "Menu.Top.addItems"


class EventDispatcherError(Exception):
    """Base exception for all event dispatcher related errors.

    Use this for catching any dispatcher related error:
        ```python
        try:
            dispatcher.dispatch("Site.created", params)
        except EventDispatcherError as e:
            logger.error(f"Event dispatcher error: {e}")
        ```
    """


class ObserverRegistrationError(EventDispatcherError):
    """Raised when observer registration fails.

    This occurs when:
    - The event name is empty or contains whitespace
    - The observer is not callable
    """


class ObserverFailureError(EventDispatcherError):
    """Raised when an observer fails and the error policy is ``raise``.

    The original exception is available as ``__cause__``.
    """

    def __init__(self, event_name: str, observer: "Observer", error: Exception):
        self.event_name = event_name
        self.observer = observer
        self.error = error
        super().__init__(f"Observer {observer.describe()} failed for {event_name}: {error}")


class Observer(BaseModel):
    """A registered callback plus the metadata used to select and order it."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    callback: ObserverCallback
    plugin: str | None = None
    sequence: int

    def describe(self) -> str:
        """Human readable name of the callback, for logs and failure reports."""
        name = getattr(self.callback, "__qualname__", None) or repr(self.callback)
        if self.plugin:
            return f"{self.plugin}:{name}"
        return name

    def accepts(self, plugin_filter: set[str] | None) -> bool:
        """Check whether this observer passes the given plugin filter."""
        if plugin_filter is None:
            return True
        return self.plugin is not None and self.plugin in plugin_filter


def to_event_name(name: str) -> EventName:
    """Validate a raw string and return it as an ``EventName``.

    Args:
        name: Raw event name

    Returns:
        The same string typed as ``EventName``

    Raises:
        ObserverRegistrationError: If the name is empty or contains whitespace
    """
    if not isinstance(name, str) or not _EVENT_NAME_PATTERN.fullmatch(name):
        raise ObserverRegistrationError(f"Invalid event name: {name!r}")
    return EventName(str(name))
