"""i18n system - locale resolution and message translation.

Main components:
- models: Language, Catalog, CatalogStore
- sources: CatalogSource with directory, package resource and memory implementations
- loader: load_catalogs builds the store and matcher at startup
- matcher: LanguageMatcher and Accept-Language parsing
- locale: Locale, the per-request translator
- service/factory: I18n runtime state and create_i18n
"""

from locale_middleware.i18n.errors import (
    CatalogParseError,
    ConfigurationError,
    I18nError,
    LocaleNotFoundError,
    MalformedLanguageTagError,
)
from locale_middleware.i18n.factory import create_i18n
from locale_middleware.i18n.loader import load_catalogs, select_source
from locale_middleware.i18n.locale import Locale
from locale_middleware.i18n.matcher import Confidence, LanguageMatcher, parse_accept_language
from locale_middleware.i18n.models import Catalog, CatalogStore, Language
from locale_middleware.i18n.options import CookieOptions, I18nOptions, parse_options
from locale_middleware.i18n.service import I18n
from locale_middleware.i18n.sources import (
    CatalogSource,
    DirectorySource,
    MemorySource,
    ResourceSource,
)
from locale_middleware.i18n.tags import LanguageTag

__all__ = [
    "Catalog",
    "CatalogParseError",
    "CatalogSource",
    "CatalogStore",
    "Confidence",
    "ConfigurationError",
    "CookieOptions",
    "DirectorySource",
    "I18n",
    "I18nError",
    "I18nOptions",
    "Language",
    "LanguageMatcher",
    "LanguageTag",
    "Locale",
    "LocaleNotFoundError",
    "MalformedLanguageTagError",
    "MemorySource",
    "ResourceSource",
    "create_i18n",
    "load_catalogs",
    "parse_accept_language",
    "parse_options",
    "select_source",
]
