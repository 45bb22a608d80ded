"""Request-bound translator."""

from typing import Any, Optional

from locale_middleware.i18n.models import Catalog
from locale_middleware.logging import get_module_logger

logger = get_module_logger()


class Locale:
    """Message translator for one language with a fallback language.

    A Locale pairs the catalog chosen for the current request with the
    catalog of the configured default language. Keys missing from the
    current catalog are looked up in the fallback; keys missing from both
    translate to the key itself.

    Usage:
        @app.get("/")
        def index(locale: LocaleDep):
            return {"message": locale.translate("home.welcome", user.name)}
    """

    __slots__ = ("current", "fallback")

    def __init__(self, current: Catalog, fallback: Catalog):
        self.current = current
        self.fallback = fallback

    @property
    def lang(self) -> str:
        """BCP 47 name of the current language."""
        return self.current.lang

    @property
    def description(self) -> str:
        """Descriptive name of the current language."""
        return self.current.description

    def has(self, key: str) -> bool:
        """Return True if the key resolves in the current or fallback catalog."""
        return key in self.current or key in self.fallback

    def lookup(self, key: str) -> Optional[str]:
        """Return the raw template for a key without formatting."""
        template = self.current.get(key)
        if template is None:
            template = self.fallback.get(key)
        return template

    def translate(self, key: str, *args: Any) -> str:
        """Translate the message of the given key.

        Positional ``args`` are substituted printf-style into the template
        (e.g. ``"Hello, %s!"``).

        Returns:
            The formatted message, or the key itself if neither the current
            nor the fallback catalog defines it.
        """
        template = self.lookup(key)
        if template is None:
            logger.warning(
                "translation_not_found",
                key=key,
                locale=self.lang,
                fallback_locale=self.fallback.lang,
            )
            return key

        if not args:
            return template
        try:
            return template % args
        except (TypeError, ValueError) as e:
            logger.warning(
                "translation_format_failed",
                key=key,
                locale=self.lang,
                arg_count=len(args),
                error=str(e),
            )
            return template

    def __call__(self, key: str, *args: Any) -> str:
        return self.translate(key, *args)

    def __repr__(self) -> str:
        return f"Locale(lang={self.lang!r}, fallback={self.fallback.lang!r})"
