"""Locale middleware settings read from the environment."""

from typing import List, Optional

from pydantic import BaseModel, Field

from locale_middleware.configuration.base import InfrastructureSettings


class LanguageConfig(BaseModel):
    """A language entry as written in ``I18N_LANGUAGES``."""

    name: str
    description: str = ""


class I18nSettings(InfrastructureSettings):
    """Locale resolution configuration.

    Environment Variables:
        I18N_DIRECTORY: Primary directory of catalog files (default: locales)
        I18N_APPEND_DIRECTORIES: JSON list of override directories
        I18N_LANGUAGES: JSON list of {"name": ..., "description": ...}
        I18N_DEFAULT: Default language name (default: first language)
        I18N_NAME_FORMAT: Catalog file name format (default: locale_%s.ini)
        I18N_QUERY_PARAMETER: URL query parameter name (default: lang)
        I18N_COOKIE_NAME: Cookie name (default: lang)
        I18N_COOKIE_PATH: Cookie Path attribute (default: /)
        I18N_COOKIE_DOMAIN: Cookie Domain attribute (default: unset)
        I18N_COOKIE_MAX_AGE: Cookie Max-Age in seconds (default: 2147483647)
        I18N_COOKIE_SECURE: Whether to set Secure (default: false)
        I18N_COOKIE_HTTP_ONLY: Whether to set HttpOnly (default: true)
        I18N_COOKIE_SAME_SITE: SameSite attribute (default: Lax)

    Example:
        ```bash
        I18N_LANGUAGES='[{"name": "en-US", "description": "English"},
                         {"name": "zh-CN", "description": "简体中文"}]'
        I18N_APPEND_DIRECTORIES='["/etc/myapp/locales"]'
        ```
    """

    DIRECTORY: str = Field(default="locales", alias="I18N_DIRECTORY")
    APPEND_DIRECTORIES: List[str] = Field(
        default_factory=list, alias="I18N_APPEND_DIRECTORIES"
    )
    LANGUAGES: List[LanguageConfig] = Field(
        default_factory=list, alias="I18N_LANGUAGES"
    )
    DEFAULT: str = Field(default="", alias="I18N_DEFAULT")
    NAME_FORMAT: str = Field(default="locale_%s.ini", alias="I18N_NAME_FORMAT")
    QUERY_PARAMETER: str = Field(default="lang", alias="I18N_QUERY_PARAMETER")

    COOKIE_NAME: str = Field(default="lang", alias="I18N_COOKIE_NAME")
    COOKIE_PATH: str = Field(default="/", alias="I18N_COOKIE_PATH")
    COOKIE_DOMAIN: Optional[str] = Field(default=None, alias="I18N_COOKIE_DOMAIN")
    COOKIE_MAX_AGE: int = Field(default=0, alias="I18N_COOKIE_MAX_AGE")
    COOKIE_SECURE: bool = Field(default=False, alias="I18N_COOKIE_SECURE")
    COOKIE_HTTP_ONLY: bool = Field(default=True, alias="I18N_COOKIE_HTTP_ONLY")
    COOKIE_SAME_SITE: str = Field(default="Lax", alias="I18N_COOKIE_SAME_SITE")
