"""Persistence backends for application options."""

from typing import Protocol


class OptionBackend(Protocol):
    """Where option values are persisted.

    The analytics core only talks to storage through this protocol; the host
    application supplies a database-backed implementation.
    """

    def fetch(self, name: str) -> str | None: ...

    def store(self, name: str, value: str, autoload: bool) -> None: ...

    def remove(self, name: str) -> None: ...

    def fetch_autoloaded(self) -> dict[str, str]: ...


class InMemoryOptionBackend:
    """Option backend that keeps everything in a dict. Used in tests and tools."""

    def __init__(self):
        self._values: dict[str, str] = {}
        self._autoload: set[str] = set()

    def fetch(self, name: str) -> str | None:
        return self._values.get(name)

    def store(self, name: str, value: str, autoload: bool) -> None:
        self._values[name] = value
        if autoload:
            self._autoload.add(name)
        else:
            self._autoload.discard(name)

    def remove(self, name: str) -> None:
        self._values.pop(name, None)
        self._autoload.discard(name)

    def fetch_autoloaded(self) -> dict[str, str]:
        return {name: self._values[name] for name in self._autoload if name in self._values}
