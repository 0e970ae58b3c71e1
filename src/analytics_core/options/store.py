"""Application option storage with autoload caching.

Options flagged ``autoload`` are the ones needed on nearly every request. The
first read loads all of them in one backend call; every other option is
fetched on demand and cached afterwards.
"""

from typing import Any

from loguru import logger

from .backend import OptionBackend


class OptionStore:
    """Read-through cache in front of an OptionBackend."""

    def __init__(self, backend: OptionBackend):
        self.backend = backend
        self._cache: dict[str, str] = {}
        self._missing: set[str] = set()
        self._autoloaded = False

    def _autoload(self) -> None:
        if self._autoloaded:
            return
        values = self.backend.fetch_autoloaded()
        self._cache.update(values)
        self._autoloaded = True
        logger.debug(f"Autoloaded {len(values)} options")

    def get(self, name: str) -> str | None:
        """Get an option value.

        Returns:
            The stored value, or None if the option doesn't exist
        """
        self._autoload()

        if name in self._cache:
            return self._cache[name]
        if name in self._missing:
            return None

        value = self.backend.fetch(name)
        if value is None:
            self._missing.add(name)
            return None

        self._cache[name] = value
        return value

    def set(self, name: str, value: Any, autoload: bool = False) -> None:
        """Store an option value.

        Args:
            name: Option name
            value: Value to store; stored as its string form
            autoload: Load this option with the autoload batch on future requests
        """
        stored = str(value)
        self.backend.store(name, stored, autoload)
        self._cache[name] = stored
        self._missing.discard(name)
        logger.trace(f"Option {name} set (autoload={autoload})")

    def delete(self, name: str) -> None:
        self.backend.remove(name)
        self._cache.pop(name, None)
        self._missing.add(name)

    def clear_cache(self) -> None:
        """Drop cached values so the next read goes back to the backend."""
        self._cache.clear()
        self._missing.clear()
        self._autoloaded = False
