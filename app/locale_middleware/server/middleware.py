"""Per-request locale resolution middleware.

Resolution order, first non-empty wins:
1. URL query parameter (persisted with a cookie)
2. Cookie (already persisted)
3. Accept-Language header, if it matches a configured language (persisted)
4. Default language (persisted)
"""

from dataclasses import dataclass
from typing import Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from locale_middleware.i18n import Confidence, CookieOptions, I18n
from locale_middleware.i18n.tags import is_valid_tag
from locale_middleware.logging import bind_request_context, get_module_logger

logger = get_module_logger()

SOURCE_QUERY = "query"
SOURCE_COOKIE = "cookie"
SOURCE_HEADER = "header"
SOURCE_DEFAULT = "default"


@dataclass(frozen=True)
class Resolution:
    """Outcome of locale resolution for one request.

    Attributes:
        lang: Selected language name. May name an unconfigured language when
            it comes from user input; ``I18n.locale_for`` degrades those.
        source: Which step selected it ("query", "cookie", "header", "default").
        persist: Whether the response must set the language cookie.
    """

    lang: str
    source: str
    persist: bool


def resolve_language(
    i18n: I18n,
    query_value: Optional[str],
    cookie_value: Optional[str],
    accept_language: Optional[str],
) -> Resolution:
    """Select the language for a request from its inputs.

    A query value that is not a well-formed language tag is still used for
    the request (and degrades to the default) but is never written back to
    the cookie.
    """
    if query_value:
        return Resolution(
            lang=query_value, source=SOURCE_QUERY, persist=is_valid_tag(query_value)
        )

    if cookie_value:
        return Resolution(lang=cookie_value, source=SOURCE_COOKIE, persist=False)

    if accept_language:
        lang, confidence = i18n.matcher.match(accept_language)
        if confidence != Confidence.NO:
            return Resolution(lang=lang, source=SOURCE_HEADER, persist=True)

    return Resolution(lang=i18n.default, source=SOURCE_DEFAULT, persist=True)


def set_language_cookie(response: Response, cookie: CookieOptions, lang: str) -> None:
    """Persist the language on the client."""
    response.set_cookie(
        key=cookie.name,
        value=lang,
        max_age=cookie.max_age,
        path=cookie.path,
        domain=cookie.domain,
        secure=cookie.secure,
        httponly=cookie.http_only,
        samesite=cookie.same_site,  # type: ignore[arg-type]
    )


class I18nMiddleware(BaseHTTPMiddleware):
    """Injects a Locale into ``request.state.locale`` for every request.

    The I18n state must be created before the middleware is added (see
    ``setup_i18n``) so that catalog problems stop the application at startup.
    """

    def __init__(self, app, i18n: I18n):
        super().__init__(app)
        self.i18n = i18n

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        options = self.i18n.options
        resolution = resolve_language(
            self.i18n,
            query_value=request.query_params.get(options.query_parameter),
            cookie_value=request.cookies.get(options.cookie.name),
            accept_language=request.headers.get("accept-language"),
        )
        locale = self.i18n.locale_for(resolution.lang)
        request.state.locale = locale

        with bind_request_context(
            correlation_id=request.headers.get("x-correlation-id"),
            request_path=request.url.path,
            request_method=request.method,
            language=locale.lang,
        ):
            logger.debug(
                "locale_resolved",
                requested=resolution.lang,
                resolved=locale.lang,
                source=resolution.source,
            )
            response = await call_next(request)

        if resolution.persist:
            set_language_cookie(response, options.cookie, resolution.lang)
        return response
