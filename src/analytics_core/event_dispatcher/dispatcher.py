"""Event Dispatcher Implementation.

This module provides the EventDispatcher class that maps event names to
ordered observer lists and delivers events to them.

## Key Features

- **Registration Order**: Observers run first-registered, first-invoked
- **Shared Parameters**: Every observer receives the same list object, so
  mutations are seen by later observers and by the caller
- **Plugin Filtering**: A dispatch can be restricted to a set of plugins
- **Pending Events**: Pending dispatches are recorded and replayed to plugins
  that load later
- **Test-only Events**: ``test_only_dispatch`` is inert unless test mode is on
- **Error Isolation**: Observer failures are logged and collected by default

## Usage Invariant

Dispatch is synchronous and single-threaded. Plugins register their observers
while they load, before the host application starts dispatching. The
dispatcher does not lock; registering from one thread while dispatching from
another is not supported.

## Advanced Usage

```python
from analytics_core.event_dispatcher import EventDispatcher

dispatcher = EventDispatcher(error_policy="continue")
dispatcher.register("Tracker.newVisit", record_visit, plugin="Live")
dispatcher.register("Tracker.newVisit", geolocate, plugin="UserCountry")

# Only the UserCountry observer runs
report = dispatcher.dispatch("Tracker.newVisit", [visit], plugin_filter={"UserCountry"})
print(f"{report.succeeded} succeeded, {report.failed} failed")
```

"""

from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from typing import Any, Literal

from loguru import logger

from .core import (
    EventName,
    Observer,
    ObserverCallback,
    ObserverFailureError,
    ObserverRegistrationError,
    to_event_name,
)
from .models import DispatchReport, ObserverFailure

ErrorPolicy = Literal["continue", "raise"]


def _plugin_set(plugins: Iterable[str] | str) -> set[str]:
    # A bare string names one plugin, not a set of characters
    if isinstance(plugins, str):
        return {plugins}
    return set(plugins)


class EventDispatcher:
    """Observer registry with ordered, synchronous event delivery.

    One instance is built by the composition root and shared by every
    component that registers or dispatches (see ``register_all_services``).

    Example:
        ```python
        dispatcher = EventDispatcher()
        dispatcher.register("Site.created", on_site_created, plugin="Goals")
        dispatcher.dispatch("Site.created", [site_id])
        ```
    """

    def __init__(self, error_policy: ErrorPolicy = "continue", test_mode: bool = False) -> None:
        """Initialize a new EventDispatcher instance.

        Args:
            error_policy: ``continue`` isolates observer failures and keeps going,
                          ``raise`` stops at the first failure.
            test_mode: Enables ``test_only_dispatch``.
        """
        if error_policy not in ("continue", "raise"):
            raise ValueError(f"Invalid observer error policy: {error_policy}")

        self._observers: dict[EventName, list[Observer]] = {}
        self._pending_events: list[tuple[EventName, list[Any]]] = []
        self._sequence = 0
        self._current_plugin: str | None = None
        self._error_policy = error_policy
        self._test_mode = test_mode
        logger.debug(f"EventDispatcher initialized (error_policy={error_policy}, test_mode={test_mode})")

    @property
    def error_policy(self) -> ErrorPolicy:
        return self._error_policy

    @property
    def test_mode(self) -> bool:
        return self._test_mode

    def register(self, event_name: str, callback: ObserverCallback, plugin: str | None = None) -> Observer:
        """Register an observer for an event.

        Duplicate registrations are kept and will be invoked once each.

        Args:
            event_name: Name of the event to observe
            callback: Callable receiving the shared parameter list
            plugin: Owning plugin. Defaults to the plugin of the active
                    ``registering_for`` context, if any.

        Returns:
            The registered Observer

        Raises:
            ObserverRegistrationError: If the name is invalid or callback is not callable
        """
        name = to_event_name(event_name)

        if not callable(callback):
            raise ObserverRegistrationError(f"Observer must be callable: {callback!r}")

        owner = plugin if plugin is not None else self._current_plugin
        observer = Observer(callback=callback, plugin=owner, sequence=self._sequence)
        self._sequence += 1

        self._observers.setdefault(name, []).append(observer)
        logger.debug(f"Registered observer for {name}: {observer.describe()}")
        return observer

    @contextmanager
    def registering_for(self, plugin: str) -> Iterator[None]:
        """Attribute observers registered inside the block to ``plugin``.

        Example:
            ```python
            with dispatcher.registering_for("Goals"):
                dispatcher.register("Site.created", create_default_goals)
            ```
        """
        previous = self._current_plugin
        self._current_plugin = plugin
        try:
            yield
        finally:
            self._current_plugin = previous

    def dispatch(
        self,
        event_name: str,
        parameters: list[Any] | None = None,
        pending: bool = False,
        plugin_filter: Iterable[str] | None = None,
    ) -> DispatchReport:
        """Deliver an event to its observers in registration order.

        Each observer is called with ``parameters`` itself, not a copy.

        Args:
            event_name: Name of the event
            parameters: Shared mutable parameter list. None means an empty list.
            pending: Record the event so it is replayed to plugins loaded later.
                     Delivery to the current registry still happens now.
            plugin_filter: If given, only observers owned by these plugins run.
                           A single string is taken as one plugin name.

        Returns:
            A DispatchReport with the number of invoked observers and failures

        Raises:
            ObserverFailureError: On the first observer failure when the error policy is ``raise``
        """
        if parameters is None:
            parameters = []
        allowed = _plugin_set(plugin_filter) if plugin_filter is not None else None

        if pending:
            self._pending_events.append((EventName(event_name), parameters))
            logger.trace(f"Recorded pending event {event_name}")

        report = DispatchReport(event_name=event_name, pending=pending)

        observers = self._observers.get(EventName(event_name))
        if not observers:
            logger.trace(f"No observers registered for {event_name}")
            return report

        # Snapshot so observers registering during dispatch do not run in this pass
        selected = [observer for observer in list(observers) if observer.accepts(allowed)]
        logger.debug(f"Dispatching {event_name} to {len(selected)} of {len(observers)} observers")

        for observer in selected:
            report.invoked += 1
            logger.trace(f"Invoking observer {observer.describe()} for {event_name}")
            try:
                observer.callback(parameters)
            except Exception as e:
                if self._error_policy == "raise":
                    logger.error(f"Observer {observer.describe()} failed for {event_name}: {e}")
                    raise ObserverFailureError(event_name, observer, e) from e

                logger.opt(exception=e).error(f"Observer {observer.describe()} failed for {event_name}: {e}")
                report.failures.append(
                    ObserverFailure(
                        observer=observer.describe(),
                        plugin=observer.plugin,
                        sequence=observer.sequence,
                        error=e,
                    )
                )

        if report.failed > 0:
            logger.warning(f"Event {event_name}: {report.succeeded} successful, {report.failed} failed observers")

        return report

    def test_only_dispatch(
        self,
        event_name: str,
        parameters: list[Any] | None = None,
        pending: bool = False,
        plugin_filter: Iterable[str] | None = None,
    ) -> DispatchReport | None:
        """Dispatch an event only when test mode is on.

        Without test mode this returns None immediately and touches nothing.
        """
        if not self._test_mode:
            return None
        return self.dispatch(event_name, parameters, pending, plugin_filter)

    def post_pending_events_to(self, plugins: Iterable[str]) -> list[DispatchReport]:
        """Replay every recorded pending event to the given plugins.

        Used when plugins are loaded after pending events were posted. Replays
        are not pending themselves and are not recorded again.

        Args:
            plugins: Names of the plugins that should receive the events

        Returns:
            One DispatchReport per replayed event, in posting order
        """
        plugin_names = _plugin_set(plugins)
        reports = []
        for event_name, parameters in list(self._pending_events):
            reports.append(self.dispatch(event_name, parameters, pending=False, plugin_filter=plugin_names))
        return reports

    def get_observer_count(self, event_name: str) -> int:
        """Get the number of observers registered for an event."""
        return len(self._observers.get(EventName(event_name), []))

    def get_observers(self, event_name: str) -> list[Observer]:
        """Get the observers registered for an event, in registration order."""
        return list(self._observers.get(EventName(event_name), []))

    def get_registered_events(self) -> list[EventName]:
        """Get all event names that have observers, in first-registration order."""
        return list(self._observers.keys())

    def get_pending_events(self) -> list[tuple[EventName, list[Any]]]:
        """Get the recorded pending events, oldest first."""
        return list(self._pending_events)

    def reset(self) -> None:
        """Forget every observer and pending event.

        Intended for test harnesses. Normal operation never unregisters observers.
        """
        self._observers.clear()
        self._pending_events.clear()
        self._sequence = 0
        self._current_plugin = None
        logger.debug("EventDispatcher reset")
