"""Translation models for the string resolver.

Defines the translation table structures, per-call lookup options and the
structured lookup result.
"""

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Mapping, Optional, Sequence, Tuple, Union

from uistrings.i18n.exceptions import InvalidOptionsError

INHERITS_KEY = ".inherits"


@dataclass
class StructuredEntry:
    """A translation entry carrying metadata beyond its text.

    Attributes:
        text: The translated text. None when the definition omitted it,
            which makes the entry invalid at resolution time.
        metadata: Every other field of the definition (plural forms, context...).
    """

    text: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "StructuredEntry":
        """Create a StructuredEntry from a raw definition mapping.

        Args:
            data: Mapping with an optional "text" field plus metadata.

        Returns:
            StructuredEntry instance.
        """
        text = data.get("text")
        metadata = {name: value for name, value in data.items() if name != "text"}
        return cls(text=None if text is None else str(text), metadata=metadata)

    def to_dict(self) -> Dict[str, Any]:
        """Return the entry in its raw mapping form."""
        result = dict(self.metadata)
        if self.text is not None:
            result["text"] = self.text
        return result


# A literal string or a structured record.
Entry = Union[str, StructuredEntry]


def entry_text(entry: Entry) -> Optional[str]:
    """Return the literal text of an entry, or None if it has none."""
    if isinstance(entry, StructuredEntry):
        return entry.text
    return entry


def as_codes(value: Union[None, str, Sequence[str]]) -> Tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(value)


@dataclass
class LanguageDefinition:
    """All namespaces and entries for one language code.

    Attributes:
        code: Language code (e.g., "en", "fr-CA").
        namespaces: Nested dict structure {namespace: {key: entry}}.
        inherits: Parent language codes merged in after this one.
    """

    code: str
    namespaces: Dict[str, Dict[str, Entry]] = field(default_factory=dict)
    inherits: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, code: str, data: Mapping[str, Any]) -> "LanguageDefinition":
        """Create a LanguageDefinition from a raw nested mapping.

        The reserved ``.inherits`` key (a code or a list of codes) becomes
        the ``inherits`` field. Namespace values that are not mappings are
        ignored, as are entries that are neither text nor a mapping.

        Args:
            code: Language code of the definition.
            data: Mapping of {namespace: {key: entry}} plus ``.inherits``.

        Returns:
            LanguageDefinition instance.
        """
        namespaces: Dict[str, Dict[str, Entry]] = {}
        for namespace, table in data.items():
            if namespace == INHERITS_KEY or not isinstance(table, Mapping):
                continue
            entries: Dict[str, Entry] = {}
            for key, value in table.items():
                if isinstance(value, Mapping):
                    entries[key] = StructuredEntry.from_dict(value)
                elif isinstance(value, str):
                    entries[key] = value
            namespaces[namespace] = entries
        return cls(
            code=code,
            namespaces=namespaces,
            inherits=as_codes(data.get(INHERITS_KEY)),
        )

    def get_namespace(self, namespace: str) -> Dict[str, Entry]:
        """Get all entries of a namespace, or an empty dict if it is missing."""
        return self.namespaces.get(namespace, {})

    def get_entry(self, namespace: str, key: str) -> Optional[Entry]:
        """Retrieve an entry by namespace and key.

        Returns:
            The entry, or None if not defined in this language.
        """
        return self.get_namespace(namespace).get(key)


class LanguageTable:
    """Read-only collection of language definitions keyed by code."""

    def __init__(self, definitions: Optional[Sequence[LanguageDefinition]] = None):
        self._definitions: Dict[str, LanguageDefinition] = {}
        for definition in definitions or []:
            self._definitions[definition.code] = definition

    @classmethod
    def from_dict(cls, data: Mapping[str, Mapping[str, Any]]) -> "LanguageTable":
        """Build a table from {code: {namespace: {key: entry}}} data."""
        return cls(
            [LanguageDefinition.from_dict(code, langdef) for code, langdef in data.items()]
        )

    def get(self, code: str) -> Optional[LanguageDefinition]:
        return self._definitions.get(code)

    def __contains__(self, code: object) -> bool:
        return code in self._definitions

    def __iter__(self) -> Iterator[str]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    @property
    def codes(self) -> Tuple[str, ...]:
        return tuple(self._definitions)


@dataclass(frozen=True)
class LookupOptions:
    """Per-call options for string lookups.

    Precedence rules:
    - ``set_namespaces`` replaces the default namespaces; ``add_namespaces``
      and ``insert_namespaces`` are ignored when it is given.
    - ``cache`` forces caching on or off. When unset, giving ``lang`` or any
      namespace option disables caching, since the cached entry does not
      record which overrides produced it.
    - ``replacements`` (printf-style) and ``variables`` (literal
      placeholder replacement) are mutually exclusive.
    - ``complex`` returns a ResolvedString instead of plain text.

    Attributes:
        lang: Language code(s) searched instead of the configured defaults.
        set_namespaces: Namespaces replacing the default search order.
        add_namespaces: Namespaces appended to the default search order.
        insert_namespaces: Namespaces each inserted at the front, in turn.
        cache: Explicit cache behavior override.
        replacements: Ordered values for positional substitution.
        variables: Mapping of placeholder substrings to replacement values.
        complex: Return the structured result.
    """

    lang: Optional[Tuple[str, ...]] = None
    set_namespaces: Optional[Tuple[str, ...]] = None
    add_namespaces: Optional[Tuple[str, ...]] = None
    insert_namespaces: Optional[Tuple[str, ...]] = None
    cache: Optional[bool] = None
    replacements: Optional[Tuple[Any, ...]] = None
    variables: Optional[Mapping[str, Any]] = None
    complex: bool = False

    def __post_init__(self):
        for name in ("lang", "set_namespaces", "add_namespaces", "insert_namespaces"):
            value = getattr(self, name)
            if value is not None:
                object.__setattr__(self, name, as_codes(value))
        if self.replacements is not None:
            object.__setattr__(self, "replacements", tuple(self.replacements))
        if self.replacements is not None and self.variables is not None:
            raise InvalidOptionsError(
                "replacements and variables cannot be used in the same lookup"
            )

    @classmethod
    def build(cls, options: Optional["LookupOptions"] = None, **kwargs) -> "LookupOptions":
        """Merge an optional LookupOptions instance with keyword overrides.

        Example:
            LookupOptions.build(lang="fr", variables={"{name}": "Sam"})
        """
        if options is None:
            return cls(**kwargs)
        if kwargs:
            return dataclasses.replace(options, **kwargs)
        return options

    @property
    def cacheable(self) -> bool:
        """Whether a lookup with these options may use the cache."""
        if self.cache is not None:
            return self.cache
        return (
            self.set_namespaces is None
            and self.add_namespaces is None
            and self.insert_namespaces is None
            and self.lang is None
        )


@dataclass
class ResolvedString:
    """Structured lookup result.

    Attributes:
        text: Final text, after substitution.
        namespace: Namespace the entry was found in.
        key: String id of the entry (without any namespace prefix).
        language: Code of the language the entry was found in.
        metadata: Metadata of structured entries.
        raw_text: Text before substitution, set when substitution was applied.
        replacements: Positional substitution values used, if any.
        variables: Named substitution mapping used, if any.
    """

    text: str
    namespace: Optional[str]
    key: str
    language: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)
    raw_text: Optional[str] = None
    replacements: Optional[Tuple[Any, ...]] = None
    variables: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Flatten into a single mapping of metadata and lookup fields."""
        result = dict(self.metadata)
        result.update(text=self.text, ns=self.namespace, key=self.key)
        if self.raw_text is not None:
            result["raw_text"] = self.raw_text
        if self.replacements is not None:
            result["reps"] = list(self.replacements)
        if self.variables is not None:
            result["vars"] = dict(self.variables)
        return result
