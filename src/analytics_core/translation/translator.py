"""Per-plugin translation lookup.

Translation keys carry their plugin as a prefix: ``Goals_AddNewGoal`` or
``Goals.AddNewGoal`` look up ``AddNewGoal`` in the ``Goals`` table. A key that
isn't in the catalog is returned as-is, so a missing translation shows up as
its key rather than breaking the page.
"""

import re
from collections.abc import Mapping
from typing import Any

from loguru import logger

from .core import TranslationFormatError, TranslationResult
from .formatting import format_template

_KEY_SEPARATOR = re.compile(r"[_.]")


class Translator:
    """Looks up and formats translated strings from per-plugin tables."""

    def __init__(self, strict: bool = False, catalog: Mapping[str, Mapping[str, str]] | None = None):
        """Initialize the translator.

        Args:
            strict: Raise TranslationFormatError on format mismatches instead of
                    returning the template unformatted
            catalog: Initial translations, keyed by plugin then by key
        """
        self.strict = strict
        self._catalog: dict[str, dict[str, str]] = {}
        for plugin, mapping in (catalog or {}).items():
            self.add_translations(plugin, mapping)

    def add_translations(self, plugin: str, mapping: Mapping[str, str]) -> None:
        """Merge translations for a plugin over any already loaded."""
        self._catalog.setdefault(plugin, {}).update(mapping)
        logger.debug(f"Loaded {len(mapping)} translations for {plugin}")

    def get_plugin_translations(self, plugin: str) -> dict[str, str]:
        return dict(self._catalog.get(plugin, {}))

    def has_translation(self, key: str) -> bool:
        return self._lookup(key) is not None

    def _lookup(self, key: str) -> str | None:
        parts = _KEY_SEPARATOR.split(key, maxsplit=1)
        if len(parts) != 2:
            return None
        plugin, name = parts
        return self._catalog.get(plugin, {}).get(name)

    def translate(self, key: str, *args: Any) -> str:
        """Translate ``key`` and substitute ``args`` printf-style.

        Without arguments the template is returned unformatted, so literal
        ``%`` signs survive.

        Raises:
            TranslationFormatError: Only in strict mode, if the arguments don't fit the template
        """
        template = self._lookup(key)
        if template is None:
            logger.trace(f"No translation for {key}")
            template = key

        if not args:
            return template

        try:
            return format_template(template, args)
        except TranslationFormatError as e:
            if self.strict:
                raise
            logger.warning(f"Translation {key} left unformatted: {e}")
            return template

    def try_translate(self, key: str, *args: Any) -> TranslationResult:
        """Translate ``key``, returning failures as a result instead of raising."""
        try:
            return TranslationResult.success(self.translate(key, *args))
        except Exception as e:
            return TranslationResult.failure(e)

    def translate_exception(self, key: str, *args: Any) -> str:
        """Translate a message for an exception. Never raises.

        Falls back to the raw key, so this is safe to call while building an
        error message.
        """
        return self.try_translate(key, *args).unwrap_or(str(key))
