"""Language search order resolution.

Expands requested language codes into an ordered list of language
definitions, following ``.inherits`` links and closing every search with
the fallback language.
"""

from typing import Callable, Iterable, List, Mapping, Optional, Set, Union

from uistrings.i18n.models import LanguageDefinition, LanguageTable, as_codes
from uistrings.logging import get_module_logger

logger = get_module_logger()

AUTO = "auto"

# Returns {code: weight}, ordered by descending preference.
PreferenceProvider = Callable[[], Mapping[str, float]]

DefaultLang = Union[None, bool, str, List[str]]


class LanguageResolver:
    """Builds the ordered list of language definitions to search.

    Expansion is first-wins: a language already in the list is never added
    twice, and inherited languages are appended after the language that
    declares them.

    Attributes:
        table: LanguageTable the codes are looked up in.
    """

    def __init__(self, table: LanguageTable):
        self.table = table

    def expand(
        self,
        requested: Union[str, Iterable[str]],
        into: Optional[List[LanguageDefinition]] = None,
        skip: Iterable[str] = (),
    ) -> List[LanguageDefinition]:
        """Append the definitions for the requested codes to a search list.

        Codes missing from the table are ignored. Inheritance cycles are
        broken by the already-seen set.

        Args:
            requested: A language code or a list of codes.
            into: Existing search list to extend in place.
            skip: Codes that must not be added by this expansion.

        Returns:
            The extended search list.
        """
        langs = [] if into is None else into
        seen: Set[str] = {definition.code for definition in langs}
        seen.update(skip)
        self._expand(as_codes(requested), langs, seen)
        return langs

    def _expand(self, codes, langs: List[LanguageDefinition], seen: Set[str]) -> None:
        for code in codes:
            if code in seen:
                continue
            seen.add(code)
            definition = self.table.get(code)
            if definition is None:
                continue
            langs.append(definition)
            if definition.inherits:
                self._expand(definition.inherits, langs, seen)

    def search_order(
        self,
        fallback: str,
        override: Optional[Iterable[str]] = None,
        default_lang: DefaultLang = None,
        use_accept: bool = False,
        preferences: Optional[PreferenceProvider] = None,
    ) -> List[LanguageDefinition]:
        """Build the full language search list for one lookup.

        Order:
        1. Per-call override, or else the configured default language:
           a code or list of codes is expanded, "auto" forces the locale
           preferences on, and a boolean replaces ``use_accept``.
        2. Locale preferences, when in use, in their given order.
        3. The fallback language, always last.

        Args:
            fallback: Fallback language code.
            override: Per-call language code(s).
            default_lang: Configured default language.
            use_accept: Whether to merge in the locale preferences.
            preferences: Provider of the caller's locale preferences.

        Returns:
            Ordered, de-duplicated list of LanguageDefinition.
        """
        skip = (fallback,)
        langs: List[LanguageDefinition] = []

        if override is not None:
            self.expand(override, langs, skip)
        elif isinstance(default_lang, bool):
            use_accept = default_lang
        elif isinstance(default_lang, str):
            if default_lang == AUTO:
                use_accept = True
            else:
                self.expand(default_lang, langs, skip)
        elif default_lang is not None:
            self.expand(default_lang, langs, skip)

        if use_accept:
            if preferences is None:
                logger.debug("no_locale_preferences_provider")
            else:
                self.expand(list(preferences()), langs, skip)

        self.expand(fallback, langs)
        return langs
