"""Process-wide i18n state shared by all requests.

``I18n`` bundles the parsed options, the catalog store and the language
matcher. It is created once at startup by ``create_i18n`` and passed by
reference to the middleware; nothing in it changes afterwards.
"""

from dataclasses import dataclass
from typing import List

from locale_middleware.i18n.errors import LocaleNotFoundError
from locale_middleware.i18n.locale import Locale
from locale_middleware.i18n.matcher import LanguageMatcher
from locale_middleware.i18n.models import CatalogStore, Language
from locale_middleware.i18n.options import I18nOptions
from locale_middleware.logging import get_module_logger

logger = get_module_logger()


@dataclass(frozen=True)
class I18n:
    """Loaded catalogs and matcher for the configured languages.

    Attributes:
        options: Parsed options the catalogs were loaded with.
        store: Catalog store, one catalog per configured language.
        matcher: Matcher over the configured language tags.
    """

    options: I18nOptions
    store: CatalogStore
    matcher: LanguageMatcher

    @property
    def default(self) -> str:
        """Name of the default language."""
        return self.store.default_name

    @property
    def languages(self) -> List[Language]:
        return self.store.languages

    def locale_for(self, lang: str) -> Locale:
        """Build the Locale for a language name.

        Unknown names (e.g. a stale or forged cookie) degrade to the default
        language. Any other lookup failure propagates.
        """
        fallback = self.store.default
        try:
            current = self.store.get(lang)
        except LocaleNotFoundError:
            logger.info(
                "locale_not_found_fallback",
                requested=lang,
                fallback_locale=fallback.lang,
            )
            return Locale(current=fallback, fallback=fallback)
        return Locale(current=current, fallback=fallback)
