"""Translation lookup for plugin strings."""

from .core import TranslationError, TranslationFormatError, TranslationResult
from .formatting import format_template
from .translator import Translator

__all__ = [
    "TranslationError",
    "TranslationFormatError",
    "TranslationResult",
    "Translator",
    "format_template",
]
