"""Key/value application options."""

from .backend import InMemoryOptionBackend, OptionBackend
from .store import OptionStore

__all__ = [
    "InMemoryOptionBackend",
    "OptionBackend",
    "OptionStore",
]
