"""String resolver settings."""

from typing import List, Optional, Union

from pydantic import Field

from uistrings.configuration.base import LibrarySettings


class StringsSettings(LibrarySettings):
    """Default configuration for new string resolvers.

    Environment Variables:
        STRINGS_DEFAULT_LANG: Default language. A code, a JSON list of codes,
            "auto" to always use the locale preferences, or a JSON boolean
            overriding STRINGS_USE_ACCEPT (default: unset)
        STRINGS_FALLBACK_LANG: Language searched last (default: "en")
        STRINGS_USE_ACCEPT: Merge in the caller's locale preferences (default: false)
        STRINGS_DEFAULT_NAMESPACES: JSON list of namespaces to search (default: [])
        STRINGS_CACHE_MAX_SIZE: Maximum number of cached lookups (default: unbounded)

    Example:
        ```python
        from uistrings.configuration import get_settings

        settings = get_settings()

        fallback = settings.strings.FALLBACK_LANG
        ```
    """

    DEFAULT_LANG: Optional[Union[bool, List[str], str]] = Field(
        default=None, alias="STRINGS_DEFAULT_LANG"
    )
    FALLBACK_LANG: str = Field(default="en", alias="STRINGS_FALLBACK_LANG")
    USE_ACCEPT: bool = Field(default=False, alias="STRINGS_USE_ACCEPT")
    DEFAULT_NAMESPACES: List[str] = Field(
        default_factory=list, alias="STRINGS_DEFAULT_NAMESPACES"
    )
    CACHE_MAX_SIZE: Optional[int] = Field(
        default=None, alias="STRINGS_CACHE_MAX_SIZE", ge=1
    )
