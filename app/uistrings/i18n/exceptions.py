"""Exceptions raised by the string resolver.

All resolver exceptions inherit from LangError so callers can catch them
with a single handler.
"""

from typing import Optional


class LangError(Exception):
    """Base exception for all string resolution errors.

    Example:
        try:
            text = strings.get_str("welcome")
        except LangError as e:
            logger.error("string_resolution_failed", error=str(e))
    """

    pass


class InvalidDefinitionError(LangError):
    """Raised when a structured entry has no ``text`` field.

    Attributes:
        language: Code of the language the entry was found in.
        namespace: Namespace holding the entry.
        key: String id of the entry.

    Example:
        >>> strings.get_str("broken")
        Traceback (most recent call last):
        ...
        InvalidDefinitionError: Invalid language definition: 'en:ui:broken'
    """

    def __init__(self, language: Optional[str], namespace: Optional[str], key: str):
        self.language = language
        self.namespace = namespace
        self.key = key
        super().__init__(f"Invalid language definition: '{language}:{namespace}:{key}'")


class FormattingError(LangError, ValueError):
    """Raised when substitution values do not fit the resolved text."""

    pass


class InvalidOptionsError(LangError, ValueError):
    """Raised when a lookup is given conflicting options."""

    pass
