"""Factory functions for creating string resolvers.

Provides a convenience function for building a Strings instance with the
defaults from the application settings.
"""

from typing import Any, Mapping, Optional, Sequence, Union

from uistrings.configuration import Settings, get_settings
from uistrings.i18n.languages import PreferenceProvider
from uistrings.i18n.models import LanguageTable
from uistrings.i18n.strings import Strings
from uistrings.logging import get_module_logger

logger = get_module_logger()


def create_strings(
    data: Union[LanguageTable, Mapping[str, Mapping[str, Any]]],
    namespaces: Optional[Sequence[str]] = None,
    accept_languages: Optional[PreferenceProvider] = None,
    settings: Optional[Settings] = None,
) -> Strings:
    """Create and configure a Strings instance.

    Args:
        data: Translation data, already loaded and parsed.
        namespaces: Default namespaces (default: STRINGS_DEFAULT_NAMESPACES).
        accept_languages: Provider of the caller's locale preferences.
        settings: Settings to read defaults from (default: get_settings()).

    Returns:
        Strings: Configured resolver

    Usage:
        # Use environment defaults
        strings = create_strings(translations)

        # Explicit namespaces and locale preferences
        strings = create_strings(
            translations,
            namespaces=["ui", "errors"],
            accept_languages=lambda: {"fr-CA": 1.0, "fr": 0.9},
        )
    """
    config = (settings or get_settings()).strings

    strings = Strings(
        data,
        namespaces=config.DEFAULT_NAMESPACES if namespaces is None else namespaces,
        default=config.DEFAULT_LANG,
        fallback=config.FALLBACK_LANG,
        accept=config.USE_ACCEPT,
        accept_languages=accept_languages,
        cache_max_size=config.CACHE_MAX_SIZE,
    )
    logger.debug(
        "strings_created_from_settings",
        default_lang=config.DEFAULT_LANG,
        use_accept=config.USE_ACCEPT,
        cache_max_size=config.CACHE_MAX_SIZE,
    )
    return strings
