"""Translation errors and the result type returned by ``Translator.try_translate``."""

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict


class TranslationError(Exception):
    """Base exception for translation errors.

    A missing key is not an error: lookups fall back to the key itself.
    """


class TranslationFormatError(TranslationError):
    """Raised when a template and its arguments don't fit together.

    This occurs when:
    - The template has more placeholders than arguments were supplied
    - Arguments were supplied that no placeholder consumes
    - An argument can't be converted by its placeholder (e.g. ``%d`` with text)
    """

    def __init__(self, template: str, args: tuple[Any, ...], reason: str):
        self.template = template
        self.args_supplied = args
        self.reason = reason
        super().__init__(f"Cannot format {template!r} with {len(args)} argument(s): {reason}")


class TranslationResult(BaseModel):
    """Either a translated string or the error that prevented it.

    Example:
        ```python
        message = translator.try_translate("General_Error", detail).unwrap_or("General_Error")
        ```
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    value: str | None = None
    error: Exception | None = None

    @classmethod
    def success(cls, value: str) -> "TranslationResult":
        return cls(value=value)

    @classmethod
    def failure(cls, error: Exception) -> "TranslationResult":
        return cls(error=error)

    @property
    def is_ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> str:
        """Return the value or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.value or ""

    def unwrap_or(self, fallback: str) -> str:
        """Return the value, or ``fallback`` if translation failed."""
        if self.error is not None:
            return fallback
        return self.value or ""

    def or_else(self, recover: Callable[[Exception], str]) -> str:
        """Return the value, or compute a fallback from the error."""
        if self.error is not None:
            return recover(self.error)
        return self.value or ""
