"""Text substitution for resolved strings."""

import re
from typing import Any, Mapping, Sequence

from uistrings.i18n.exceptions import FormattingError
from uistrings.logging import get_module_logger

logger = get_module_logger()

# printf-style conversion specifier; "*" width or precision takes a value too
CONVERSION = re.compile(
    r"%(?:\([^)]*\))?[#0\- +]*(\*|\d+)?(?:\.(\*|\d*))?[hlL]?([diouxXeEfFgGcrsa%])"
)


def count_conversions(text: str) -> int:
    """Return how many positional values the text consumes.

    Example:
        >>> count_conversions("%d%% of %s")
        2
    """
    count = 0
    for match in CONVERSION.finditer(text):
        width, precision, conversion = match.groups()
        if conversion == "%":
            continue
        count += 1 + (width == "*") + (precision == "*")
    return count


def format_positional(text: str, replacements: Sequence[Any]) -> str:
    """Apply printf-style substitution with ordered values.

    Values beyond the ones the text consumes are ignored, so a translation
    may leave some of them out.

    Example:
        >>> format_positional("Hello %s, you have %d messages", ["Ann", 3])
        'Hello Ann, you have 3 messages'
        >>> format_positional("Hello %s", ["Ann", 3])
        'Hello Ann'

    Raises:
        FormattingError: If there are too few values or they do not match
            their conversions.
    """
    values = tuple(replacements)
    needed = count_conversions(text)
    if needed < len(values):
        values = values[:needed]
    try:
        return text % values
    except (TypeError, ValueError, KeyError) as e:
        logger.error(
            "positional_substitution_failed",
            text=text,
            replacement_count=len(replacements),
            error=str(e),
        )
        raise FormattingError(f"Cannot substitute {list(replacements)!r} into {text!r}: {e}") from e


def format_named(text: str, variables: Mapping[str, Any]) -> str:
    """Replace every occurrence of each placeholder with its value.

    Placeholders are literal substrings, applied in mapping order.

    Example:
        >>> format_named("Welcome {name}", {"{name}": "Sam"})
        'Welcome Sam'
    """
    for placeholder, value in variables.items():
        text = text.replace(placeholder, str(value))
    return text
