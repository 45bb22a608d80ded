"""Exceptions raised by the i18n system.

Startup problems (bad options, unreadable catalogs, malformed tags) surface
as ``ConfigurationError`` and must abort the application. Per-request
problems are limited to ``LocaleNotFoundError``, which callers degrade to
the default locale.
"""


class I18nError(Exception):
    """Base class for all i18n exceptions."""


class ConfigurationError(I18nError):
    """Raised when the i18n system cannot be initialized.

    Messages are prefixed with ``i18n:`` and are deterministic for a given
    configuration so they can be asserted on and grepped in logs.
    """


class MalformedLanguageTagError(I18nError, ValueError):
    """Raised when a string is not a well-formed BCP 47 language tag."""

    def __init__(self, value: str, reason: str = "malformed language tag"):
        self.value = value
        self.reason = reason
        super().__init__(f"{reason}: {value!r}")


class CatalogParseError(I18nError, ValueError):
    """Raised when a catalog file cannot be parsed."""

    def __init__(self, name: str, detail: str):
        self.name = name
        self.detail = detail
        super().__init__(f"parse {name}: {detail}")


class LocaleNotFoundError(I18nError, KeyError):
    """Raised when the catalog store has no entry for a language name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"locale not found: {self.name!r}"
