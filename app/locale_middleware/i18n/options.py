"""Options for the locale middleware.

``I18nOptions`` is built once at startup. ``parse_options`` fills in the
defaults that depend on other fields and rejects configurations the
middleware cannot serve with.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from locale_middleware.i18n.errors import ConfigurationError
from locale_middleware.i18n.models import Language
from locale_middleware.i18n.sources import CatalogSource
from locale_middleware.logging import get_module_logger

logger = get_module_logger()

# Largest signed 32-bit integer; effectively a non-expiring cookie.
MAX_COOKIE_AGE = 2**31 - 1

SAME_SITE_MODES = {"lax": "Lax", "strict": "Strict", "none": "None"}

SameSite = Literal["Lax", "Strict", "None"]


class CookieOptions(BaseModel):
    """Attributes of the cookie that persists the chosen language."""

    model_config = ConfigDict(frozen=True)

    name: str = "lang"
    path: str = "/"
    domain: Optional[str] = None
    max_age: int = MAX_COOKIE_AGE
    secure: bool = False
    http_only: bool = True
    same_site: SameSite = "Lax"

    @field_validator("name", mode="before")
    @classmethod
    def default_name(cls, v):
        return v or "lang"

    @field_validator("path", mode="before")
    @classmethod
    def default_path(cls, v):
        return v or "/"

    @field_validator("domain", mode="before")
    @classmethod
    def empty_domain(cls, v):
        return v or None

    @field_validator("max_age", mode="before")
    @classmethod
    def positive_max_age(cls, v):
        if v is None or (isinstance(v, int) and v <= 0):
            return MAX_COOKIE_AGE
        return v

    @field_validator("same_site", mode="before")
    @classmethod
    def normalize_same_site(cls, v):
        """Map case variants onto the canonical value; unknown values become Lax."""
        mode = SAME_SITE_MODES.get(str(v).lower()) if v is not None else None
        if mode is None:
            logger.warning("invalid_cookie_same_site", value=v, replacement="Lax")
            return "Lax"
        return mode


class I18nOptions(BaseModel):
    """Options for the locale middleware.

    Attributes:
        file_system: Source of the primary catalogs. Takes precedence over
            ``directory`` when set.
        directory: Primary directory of catalog files.
        append_directories: Local directories whose catalogs override keys of
            the primary catalogs, applied in order.
        languages: Languages to load catalogs for. Required.
        default: Language to fall back to for missing translations. Defaults
            to the first of ``languages``.
        name_format: Catalog file name format with one ``%s`` for the
            language name.
        query_parameter: URL query parameter that overrides the language.
        cookie: Attributes of the persisting cookie.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    file_system: Optional[CatalogSource] = None
    directory: str = "locales"
    append_directories: List[str] = Field(default_factory=list)
    languages: List[Language] = Field(default_factory=list)
    default: str = ""
    name_format: str = "locale_%s.ini"
    query_parameter: str = "lang"
    cookie: CookieOptions = Field(default_factory=CookieOptions)

    @field_validator("directory", mode="before")
    @classmethod
    def default_directory(cls, v):
        return v or "locales"

    @field_validator("name_format", mode="before")
    @classmethod
    def default_name_format(cls, v):
        return v or "locale_%s.ini"

    @field_validator("query_parameter", mode="before")
    @classmethod
    def default_query_parameter(cls, v):
        return v or "lang"

    @field_validator("cookie", mode="before")
    @classmethod
    def default_cookie(cls, v):
        return CookieOptions() if v is None else v


def parse_options(options: I18nOptions) -> I18nOptions:
    """Apply dependent defaults and validate options.

    Returns:
        A new I18nOptions with ``default`` resolved to a configured name.

    Raises:
        ConfigurationError: If no language is specified, names are
            duplicated, the default is not configured or the name format does
            not have exactly one ``%s`` slot.
    """
    if not options.languages:
        raise ConfigurationError("i18n: no language is specified")

    seen = set()
    for lang in options.languages:
        if not lang.name:
            raise ConfigurationError("i18n: language name must not be empty")
        if lang.name.lower() in seen:
            raise ConfigurationError(f"i18n: duplicate language {lang.name!r}")
        seen.add(lang.name.lower())

    try:
        options.name_format % "x"
    except (TypeError, ValueError) as e:
        raise ConfigurationError(
            f"i18n: invalid name format {options.name_format!r}: {e}"
        ) from e

    default = options.default or options.languages[0].name
    for lang in options.languages:
        if lang.name.lower() == default.lower():
            default = lang.name
            break
    else:
        raise ConfigurationError(
            f"i18n: default language {default!r} is not in the configured languages"
        )

    return options.model_copy(update={"default": default})
