"""Configuration module - public API.

Centralized configuration for uistrings using Pydantic BaseSettings.

Exports:
    get_settings: Cached Settings instance, loaded on first call
    Settings: Main settings class (for testing/overrides)
    StringsSettings: Resolver default settings

Example:
    ```python
    from uistrings.configuration import get_settings

    namespaces = get_settings().strings.DEFAULT_NAMESPACES
    ```
"""

from uistrings.configuration.settings import Settings, get_settings
from uistrings.configuration.strings import StringsSettings

__all__ = ["Settings", "StringsSettings", "get_settings"]
