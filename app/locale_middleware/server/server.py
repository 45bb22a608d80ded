"""Application wiring for the locale middleware.

Run the bundled application with any ASGI server, e.g.:

    uvicorn --factory locale_middleware.server:create_app
"""

from typing import Any, Optional

from fastapi import FastAPI

from locale_middleware.configuration import I18nSettings, Settings, get_settings
from locale_middleware.i18n import (
    CatalogSource,
    CookieOptions,
    I18n,
    I18nOptions,
    Language,
    create_i18n,
)
from locale_middleware.logging import configure_logging, get_module_logger
from locale_middleware.server.middleware import I18nMiddleware
from locale_middleware.server.routes import router

logger = get_module_logger()


def options_from_settings(
    settings: I18nSettings, file_system: Optional[CatalogSource] = None
) -> I18nOptions:
    """Build middleware options from environment settings."""
    return I18nOptions(
        file_system=file_system,
        directory=settings.DIRECTORY,
        append_directories=settings.APPEND_DIRECTORIES,
        languages=[
            Language(name=lang.name, description=lang.description)
            for lang in settings.LANGUAGES
        ],
        default=settings.DEFAULT,
        name_format=settings.NAME_FORMAT,
        query_parameter=settings.QUERY_PARAMETER,
        cookie=CookieOptions(
            name=settings.COOKIE_NAME,
            path=settings.COOKIE_PATH,
            domain=settings.COOKIE_DOMAIN,
            max_age=settings.COOKIE_MAX_AGE,
            secure=settings.COOKIE_SECURE,
            http_only=settings.COOKIE_HTTP_ONLY,
            same_site=settings.COOKIE_SAME_SITE,
        ),
    )


def setup_i18n(app: FastAPI, options: Optional[I18nOptions] = None, **kwargs: Any) -> I18n:
    """Load catalogs and install I18nMiddleware on an application.

    Catalogs are loaded immediately, so a misconfiguration raises
    ConfigurationError here instead of on the first request.

    Usage:
        app = FastAPI()
        setup_i18n(
            app,
            languages=[Language("en-US", "English"), Language("zh-CN", "简体中文")],
        )
    """
    i18n = create_i18n(options, **kwargs)
    app.state.i18n = i18n
    app.add_middleware(I18nMiddleware, i18n=i18n)
    return i18n


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create the FastAPI application configured from the environment."""
    settings = settings or get_settings()
    configure_logging(settings)

    handler = FastAPI(title="Locale Middleware")
    i18n = setup_i18n(handler, options_from_settings(settings.i18n))
    handler.include_router(router)

    logger.info(
        "application_startup",
        languages=[lang.name for lang in i18n.languages],
        default=i18n.default,
    )
    return handler
