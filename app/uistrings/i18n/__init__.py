"""i18n - runtime lookup of localized UI strings.

Resolves string ids into localized text across language inheritance chains
and namespace search orders, with caching, substitution and reverse lookup.

Main components:
- models: LanguageDefinition, LanguageTable, StructuredEntry, LookupOptions, ResolvedString
- languages: LanguageResolver for language search order
- namespaces: NamespaceResolver for namespace search order
- cache: LookupCache for memoized lookups
- strings: Strings resolution engine
- factory: create_strings() from settings
"""

from uistrings.i18n.cache import CachedLookup, LookupCache
from uistrings.i18n.exceptions import (
    FormattingError,
    InvalidDefinitionError,
    InvalidOptionsError,
    LangError,
)
from uistrings.i18n.factory import create_strings
from uistrings.i18n.languages import AUTO, LanguageResolver
from uistrings.i18n.models import (
    Entry,
    LanguageDefinition,
    LanguageTable,
    LookupOptions,
    ResolvedString,
    StructuredEntry,
)
from uistrings.i18n.namespaces import NamespaceResolver, split_namespace_prefix
from uistrings.i18n.strings import StringLookup, Strings

__all__ = [
    "AUTO",
    "CachedLookup",
    "Entry",
    "FormattingError",
    "InvalidDefinitionError",
    "InvalidOptionsError",
    "LangError",
    "LanguageDefinition",
    "LanguageResolver",
    "LanguageTable",
    "LookupCache",
    "LookupOptions",
    "NamespaceResolver",
    "ResolvedString",
    "StringLookup",
    "Strings",
    "StructuredEntry",
    "create_strings",
    "split_namespace_prefix",
]
