"""Configuration module - public API.

Centralized configuration management using Pydantic BaseSettings.

Exports:
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Locale resolution settings
    LanguageConfig: Language entry of ``I18N_LANGUAGES``
    get_settings: Cached settings instance

Example:
    ```python
    from locale_middleware.configuration import get_settings

    settings = get_settings()
    languages = settings.i18n.LANGUAGES
    ```
"""

from locale_middleware.configuration.i18n import I18nSettings, LanguageConfig
from locale_middleware.configuration.settings import Settings, get_settings

__all__ = ["Settings", "I18nSettings", "LanguageConfig", "get_settings"]
