"""uistrings - localized UI strings with language inheritance and namespaces."""

from uistrings.i18n import (
    FormattingError,
    InvalidDefinitionError,
    InvalidOptionsError,
    LangError,
    LookupOptions,
    ResolvedString,
    Strings,
    create_strings,
)

__all__ = [
    "FormattingError",
    "InvalidDefinitionError",
    "InvalidOptionsError",
    "LangError",
    "LookupOptions",
    "ResolvedString",
    "Strings",
    "create_strings",
]
