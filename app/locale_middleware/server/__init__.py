"""FastAPI integration: middleware, dependencies and application factory."""

from locale_middleware.server.dependencies import I18nDep, LocaleDep, get_i18n, get_locale
from locale_middleware.server.middleware import (
    I18nMiddleware,
    Resolution,
    resolve_language,
    set_language_cookie,
)
from locale_middleware.server.server import create_app, options_from_settings, setup_i18n

__all__ = [
    "I18nDep",
    "I18nMiddleware",
    "LocaleDep",
    "Resolution",
    "create_app",
    "get_i18n",
    "get_locale",
    "options_from_settings",
    "resolve_language",
    "set_language_cookie",
    "setup_i18n",
]
