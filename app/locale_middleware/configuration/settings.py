"""Application settings - main aggregator."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from locale_middleware.configuration.i18n import I18nSettings


class Settings(BaseSettings):
    """Application configuration settings.

    Environment Variables:
        PREFIX: Environment prefix; empty means production
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        I18N_*: Locale resolution settings, see ``I18nSettings``

    Example:
        ```python
        from locale_middleware.configuration import get_settings

        settings = get_settings()
        directory = settings.i18n.DIRECTORY
        if settings.is_production:
            ...
        ```
    """

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"

    i18n: I18nSettings

    @property
    def is_production(self) -> bool:
        """True if PREFIX is empty (production), False otherwise."""
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        """Initialize Settings, instantiating sub-settings not given explicitly."""
        if "i18n" not in kwargs:
            kwargs["i18n"] = I18nSettings()
        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
