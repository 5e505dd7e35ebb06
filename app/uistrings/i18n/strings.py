"""String resolution engine.

Resolves string ids into localized text by searching languages (outer)
and namespaces (inner) in order, with caching, substitution and reverse
lookup.
"""

import re
from typing import (
    Any,
    Dict,
    Iterable,
    List,
    Mapping,
    NamedTuple,
    Optional,
    Pattern,
    Protocol,
    runtime_checkable,
    Sequence,
    Union,
)

from uistrings.i18n.cache import CachedLookup, LookupCache
from uistrings.i18n.exceptions import InvalidDefinitionError
from uistrings.i18n.formatting import format_named, format_positional
from uistrings.i18n.languages import DefaultLang, LanguageResolver, PreferenceProvider
from uistrings.i18n.models import (
    Entry,
    LanguageDefinition,
    LanguageTable,
    LookupOptions,
    ResolvedString,
    StructuredEntry,
    entry_text,
)
from uistrings.i18n.namespaces import NamespaceResolver, split_namespace_prefix
from uistrings.logging import get_module_logger

logger = get_module_logger()


@runtime_checkable
class StringLookup(Protocol):
    """Read-only key to text lookup capability."""

    def __getitem__(self, key: str) -> Any: ...

    def __contains__(self, key: object) -> bool: ...


class _Match(NamedTuple):
    language: str
    namespace: str
    key: str
    entry: Entry


class Strings:
    """A set of UI strings in multiple languages.

    Strings are read with ``strings["id"]`` or get_str() for per-call
    options. Translations cannot be changed through this object: item
    assignment and deletion raise the interpreter's TypeError for every key.

    Attributes:
        default_lang: Default language. A code or list of codes, "auto" to
            always use the locale preferences, a boolean overriding
            use_accept, or None to ignore.
        fallback_lang: Language searched last in every lookup.
        use_accept: Merge in languages from the locale preferences.
        accept_languages: Provider of the caller's locale preferences, an
            ordered mapping of {code: weight}.

    Example:
        strings = Strings(
            {"en": {"ui": {"hello": "Hello %s"}}, "fr": {"ui": {"hello": "Bonjour %s"}}},
            namespaces=["ui"],
        )
        strings.get_str("hello", lang="fr", replacements=["Ann"])  # "Bonjour Ann"
    """

    def __init__(
        self,
        data: Union[LanguageTable, Mapping[str, Mapping[str, Any]]],
        namespaces: Optional[Sequence[str]] = None,
        default: DefaultLang = None,
        fallback: str = "en",
        accept: bool = False,
        accept_languages: Optional[PreferenceProvider] = None,
        cache_max_size: Optional[int] = None,
    ):
        """Initialize Strings.

        Args:
            data: LanguageTable, or raw {code: {namespace: {key: entry}}} data.
            namespaces: Default namespaces to search, in order.
            default: Initial default_lang.
            fallback: Initial fallback_lang (default: "en").
            accept: Initial use_accept.
            accept_languages: Provider of the caller's locale preferences.
            cache_max_size: Maximum cached lookups (default: unbounded).
        """
        self._table = data if isinstance(data, LanguageTable) else LanguageTable.from_dict(data)
        self._languages = LanguageResolver(self._table)
        self._namespaces = NamespaceResolver(namespaces)
        self._cache = LookupCache(max_size=cache_max_size)
        self.default_lang = default
        self.fallback_lang = fallback
        self.use_accept = accept
        self.accept_languages = accept_languages
        logger.debug(
            "initialized_strings",
            languages=list(self._table.codes),
            default_namespaces=self.default_ns,
            fallback_lang=fallback,
        )

    @property
    def table(self) -> LanguageTable:
        return self._table

    @property
    def cache(self) -> LookupCache:
        return self._cache

    @property
    def default_ns(self) -> List[str]:
        """Default namespace search order."""
        return self._namespaces.default_ns

    @default_ns.setter
    def default_ns(self, namespaces: Sequence[str]) -> None:
        self._namespaces.default_ns = list(namespaces)

    def clear_cache(self) -> None:
        """Invalidate every cached lookup."""
        self._cache.clear()

    def search_languages(self, options: Optional[LookupOptions] = None, **kwargs) -> List[str]:
        """Return the language codes a lookup would search, in order."""
        opts = LookupOptions.build(options, **kwargs)
        return [definition.code for definition in self._language_order(opts)]

    def search_namespaces(self, options: Optional[LookupOptions] = None, **kwargs) -> List[str]:
        """Return the namespaces a lookup would search, in order.

        A namespace prefix in the string id is not included.
        """
        return self._namespaces.resolve(LookupOptions.build(options, **kwargs))

    def _language_order(self, opts: LookupOptions) -> List[LanguageDefinition]:
        return self._languages.search_order(
            self.fallback_lang,
            override=opts.lang,
            default_lang=self.default_lang,
            use_accept=self.use_accept,
            preferences=self.accept_languages,
        )

    def _scan(self, key: str, opts: LookupOptions) -> Optional[_Match]:
        """Find the first entry for a key across languages and namespaces."""
        namespaces = self._namespaces.resolve(opts)
        languages = self._language_order(opts)

        prefix, key = split_namespace_prefix(key)
        if prefix is not None:
            namespaces.insert(0, prefix)

        for definition in languages:
            for namespace in namespaces:
                entry = definition.get_entry(namespace, key)
                if entry is not None:
                    return _Match(definition.code, namespace, key, entry)
        return None

    def get_str(
        self, key: str, options: Optional[LookupOptions] = None, **kwargs
    ) -> Union[str, ResolvedString]:
        """Look up a string.

        Options may be given as a LookupOptions instance, as keyword
        arguments, or both (keywords win).

        Args:
            key: String id, optionally prefixed with "namespace:".
            options: Per-call LookupOptions.
            **kwargs: LookupOptions fields.

        Returns:
            The formatted text, a ResolvedString when ``complex`` is set, or
            the original key unchanged if no entry was found.

        Raises:
            InvalidDefinitionError: If the matched entry has no text.
            FormattingError: If substitution values do not fit the text.
            InvalidOptionsError: If the options conflict.
        """
        opts = LookupOptions.build(options, **kwargs)
        use_cache = opts.cacheable

        cached = self._cache.get(key) if use_cache else None
        if cached is not None:
            if cached.is_literal_fallback:
                return key
            _, lookup_key = split_namespace_prefix(key)
            match = _Match(cached.language, cached.namespace, lookup_key, cached.value)
        else:
            match = self._scan(key, opts)
            if match is None:
                logger.debug("string_not_found", key=key)
                if use_cache:
                    self._cache.set(
                        key, CachedLookup(namespace=None, value=key, is_literal_fallback=True)
                    )
                return key
            if use_cache:
                self._cache.set(
                    key,
                    CachedLookup(
                        namespace=match.namespace,
                        value=match.entry,
                        language=match.language,
                    ),
                )

        return self._render(match, opts)

    def _render(self, match: _Match, opts: LookupOptions) -> Union[str, ResolvedString]:
        text = entry_text(match.entry)
        if text is None:
            logger.error(
                "invalid_language_definition",
                language=match.language,
                namespace=match.namespace,
                key=match.key,
            )
            raise InvalidDefinitionError(match.language, match.namespace, match.key)

        if not opts.complex:
            if opts.replacements is not None:
                return format_positional(text, opts.replacements)
            if opts.variables is not None:
                return format_named(text, opts.variables)
            return text

        result = self._resolved(match)
        if opts.replacements is not None:
            result.raw_text = text
            result.replacements = opts.replacements
            result.text = format_positional(text, opts.replacements)
        elif opts.variables is not None:
            result.raw_text = text
            result.variables = dict(opts.variables)
            result.text = format_named(text, opts.variables)
        return result

    @staticmethod
    def _resolved(match: _Match) -> ResolvedString:
        metadata = dict(match.entry.metadata) if isinstance(match.entry, StructuredEntry) else {}
        return ResolvedString(
            text=entry_text(match.entry),
            namespace=match.namespace,
            key=match.key,
            language=match.language,
            metadata=metadata,
        )

    def lookup_str(
        self, text: str, options: Optional[LookupOptions] = None, **kwargs
    ) -> Union[None, str, ResolvedString]:
        """Reverse lookup: find the string id for a translated text.

        Uses the same language and namespace order as get_str() but never
        touches the cache. Matching is exact and case-sensitive.

        Args:
            text: Text to search for.
            options: Per-call LookupOptions.
            **kwargs: LookupOptions fields.

        Returns:
            The string id, a ResolvedString when ``complex`` is set, or None
            if no entry has this text.
        """
        opts = LookupOptions.build(options, **kwargs)
        namespaces = self._namespaces.resolve(opts)

        for definition in self._language_order(opts):
            for namespace in namespaces:
                for key, entry in definition.get_namespace(namespace).items():
                    if entry_text(entry) != text:
                        continue
                    if opts.complex:
                        return self._resolved(_Match(definition.code, namespace, key, entry))
                    return key

        logger.debug("text_not_found", text=text)
        return None

    def find_keys(
        self,
        pattern: Union[str, Pattern[str]],
        strip: bool = False,
        options: Optional[LookupOptions] = None,
        **kwargs,
    ) -> List[str]:
        """Find all string ids matching a regular expression.

        Searches the keys of every namespace and language a lookup with the
        same options would search.

        Args:
            pattern: Regular expression searched for in each key.
            strip: Remove the matched part from the returned keys.
            options: Per-call LookupOptions.
            **kwargs: LookupOptions fields.

        Returns:
            Matching keys, first-seen order, without duplicates.
        """
        opts = LookupOptions.build(options, **kwargs)
        regex = re.compile(pattern) if isinstance(pattern, str) else pattern
        namespaces = self._namespaces.resolve(opts)

        keys: Dict[str, None] = {}
        for definition in self._language_order(opts):
            for namespace in namespaces:
                for key in definition.get_namespace(namespace):
                    if regex.search(key):
                        keys[regex.sub("", key) if strip else key] = None
        return list(keys)

    def str_array(
        self,
        ids: Union[Sequence[str], Mapping[str, Any]],
        prefix: str = "",
        options: Optional[LookupOptions] = None,
        **kwargs,
    ) -> Dict[str, Any]:
        """Resolve several string ids at once.

        Args:
            ids: A list of string ids, each also being its own default, or a
                mapping of {string id: default}. When empty and a prefix is
                given, every key starting with the prefix is used.
            prefix: Prefix added to each string id before lookup.
            options: Per-call LookupOptions.
            **kwargs: LookupOptions fields.

        Returns:
            Dict of {string id (without prefix): text or default}.
        """
        opts = LookupOptions.build(options, **kwargs)
        if not ids and prefix.strip():
            ids = self.find_keys("^" + re.escape(prefix), strip=True, options=opts)

        pairs: Iterable = ids.items() if isinstance(ids, Mapping) else ((i, i) for i in ids)

        result = {}
        for key, default in pairs:
            string_id = prefix + key
            value = self.get_str(string_id, opts)
            result[key] = default if value == string_id else value
        return result

    def str_struct(
        self,
        structure: Mapping[str, Any],
        sep: str = ".",
        ns: str = "",
        options: Optional[LookupOptions] = None,
        **kwargs,
    ) -> Dict[str, Any]:
        """Resolve a nested structure of string ids.

        Each top-level item maps a prefix to a definition (a list of ids or
        a mapping of {id: default}). Ids are looked up as
        ``ns + prefix + sep + id``; nested lists and mappings keep the same
        prefix.

        Example:
            strings.str_struct({"menu": ["open", {"save": "Save"}]}, ns="ui:")
            # {"menu": {"open": ..., 1: {"save": ...}}}
        """
        opts = LookupOptions.build(options, **kwargs)
        return {
            prefix: self._struct_definition(definition, prefix, sep, ns, opts)
            for prefix, definition in structure.items()
        }

    def _struct_definition(self, definition, prefix: str, sep: str, ns: str, opts: LookupOptions):
        positional = not isinstance(definition, Mapping)
        items = enumerate(definition) if positional else definition.items()

        result: Dict[Any, Any] = {}
        for index, value in items:
            if isinstance(value, (Mapping, list, tuple)):
                result[index] = self._struct_definition(value, prefix, sep, ns, opts)
                continue
            key, default = (value, value) if positional else (index, value)
            string_id = f"{ns}{prefix}{sep}{key}"
            text = self.get_str(string_id, opts)
            result[key] = default if text == string_id else text
        return result

    # Read-only accessor

    def __getitem__(self, key: str) -> Union[str, ResolvedString]:
        """Alias for get_str() with default options."""
        return self.get_str(key)

    def __contains__(self, key: object) -> bool:
        """Whether the key resolves to anything other than itself.

        Performs a full lookup, so prefer get_str() where possible.
        """
        if not isinstance(key, str):
            return False
        return self.get_str(key) != key
