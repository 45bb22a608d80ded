"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for the request locale and the i18n state.
"""

from typing import Annotated

from fastapi import Depends, Request

from locale_middleware.i18n import I18n, Locale


def get_locale(request: Request) -> Locale:
    """Return the Locale resolved for the current request.

    Usage:
        @router.get("/")
        def index(locale: LocaleDep):
            return {"greeting": locale.translate("greeting")}

    Raises:
        RuntimeError: If I18nMiddleware is not installed on the application.
    """
    locale = getattr(request.state, "locale", None)
    if locale is None:
        raise RuntimeError("i18n: I18nMiddleware is not installed")
    return locale


def get_i18n(request: Request) -> I18n:
    """Return the application's I18n state set up by ``setup_i18n``."""
    i18n = getattr(request.app.state, "i18n", None)
    if i18n is None:
        raise RuntimeError("i18n: setup_i18n has not been called")
    return i18n


# Locale of the current request
LocaleDep = Annotated[Locale, Depends(get_locale)]

# Process-wide catalogs and matcher
I18nDep = Annotated[I18n, Depends(get_i18n)]

__all__ = ["LocaleDep", "I18nDep", "get_locale", "get_i18n"]
