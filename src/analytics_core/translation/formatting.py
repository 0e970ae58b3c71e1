"""printf-style formatting for translation templates.

Templates use the same placeholders as C/PHP ``sprintf``: ``%s``, ``%d``,
``%f``, ``%x`` and friends, with optional flags, width and precision, ``%%``
for a literal percent sign, and positional placeholders such as ``%2$s`` so
translators can reorder arguments.
"""

import re
from collections.abc import Sequence
from typing import Any

from .core import TranslationFormatError

PLACEHOLDER_PATTERN = re.compile(r"%(?:(\d+)\$)?([-+ 0#]*\d*(?:\.\d+)?)([bcdeEfFgGosuxX%])")


def _convert(template: str, args: tuple[Any, ...], flags: str, conversion: str, value: Any) -> str:
    if conversion == "b":
        try:
            return format(int(value), "b")
        except (TypeError, ValueError) as e:
            raise TranslationFormatError(template, args, f"%b needs an integer, got {value!r}") from e

    if conversion == "u":
        conversion = "d"

    try:
        return f"%{flags}{conversion}" % (value,)
    except (TypeError, ValueError, OverflowError) as e:
        raise TranslationFormatError(template, args, f"%{flags}{conversion} cannot format {value!r}") from e


def format_template(template: str, args: Sequence[Any]) -> str:
    """Substitute ``args`` into ``template``.

    Args:
        template: Template with printf-style placeholders
        args: Values for the placeholders, in order

    Returns:
        The formatted string

    Raises:
        TranslationFormatError: If placeholders and arguments don't match up

    Examples:
        >>> format_template("Hello %s", ["World"])
        'Hello World'
        >>> format_template("%2$s before %1$s", ["a", "b"])
        'b before a'
        >>> format_template("%.1f%%", [99.44])
        '99.4%'
    """
    values = tuple(args)
    used: set[int] = set()
    next_index = 0

    def substitute(match: re.Match) -> str:
        nonlocal next_index
        position, flags, conversion = match.groups()

        if conversion == "%":
            return "%"

        if position is not None:
            index = int(position) - 1
        else:
            index = next_index
            next_index += 1

        if index < 0 or index >= len(values):
            raise TranslationFormatError(template, values, f"no argument for placeholder {match.group(0)!r}")

        used.add(index)
        return _convert(template, values, flags, conversion, values[index])

    result = PLACEHOLDER_PATTERN.sub(substitute, template)

    unused = len(values) - len(used)
    if unused > 0:
        raise TranslationFormatError(template, values, f"{unused} argument(s) not used by the template")

    return result
