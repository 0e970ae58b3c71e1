"""Event Dispatcher for Plugin Communication.

This package provides the observer registry that lets plugins react to named
events posted by the host application. It supports:

- **Ordered Delivery**: Observers run in the exact order they were registered
- **Shared Parameters**: Observers mutate one parameter list in place
- **Plugin Filtering**: Dispatches can target a subset of plugins
- **Pending Events**: Replayed to plugins that load after the event was posted
- **Test-only Events**: Fire only when the process runs in test mode
- **Error Isolation**: Observer failures don't affect other observers (by default)

## Quick Start

```python
from analytics_core.event_dispatcher import EventDispatcher

def append_name(params: list) -> None:
    params.append("demo")

dispatcher = EventDispatcher()
dispatcher.register("Site.created", append_name, plugin="SitesManager")

params = [5]
dispatcher.dispatch("Site.created", params)
assert params == [5, "demo"]
```

For types and exceptions, see `core.py`.
For the dispatcher API, see `dispatcher.py`.

"""

from .core import (
    CoreEvents,
    EventDispatcherError,
    EventName,
    Observer,
    ObserverFailureError,
    ObserverRegistrationError,
    to_event_name,
)
from .dispatcher import EventDispatcher
from .models import DispatchReport, ObserverFailure

__all__ = [
    "CoreEvents",
    "DispatchReport",
    "EventDispatcher",
    "EventDispatcherError",
    "EventName",
    "Observer",
    "ObserverFailure",
    "ObserverFailureError",
    "ObserverRegistrationError",
    "to_event_name",
]
