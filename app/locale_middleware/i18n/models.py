"""Core i18n data structures.

Defines languages, per-language message catalogs and the catalog store
built once at startup. None of these change after construction, so they can
be shared across concurrent requests without locking.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from locale_middleware.i18n.errors import ConfigurationError, LocaleNotFoundError


@dataclass(frozen=True)
class Language:
    """A configured language.

    Attributes:
        name: BCP 47 language tag, e.g. "en-US".
        description: Human readable label, e.g. "English".
    """

    name: str
    description: str = ""


@dataclass(frozen=True, eq=False)
class Catalog:
    """Read-only translation messages for a single language.

    Attributes:
        language: The Language this catalog is for.
        messages: Mapping of key (e.g. "greeting", "home.title") to template.
    """

    language: Language
    messages: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.messages, MappingProxyType):
            object.__setattr__(self, "messages", MappingProxyType(dict(self.messages)))

    @classmethod
    def merged(cls, language: Language, sources: Iterable[Mapping[str, str]]) -> "Catalog":
        """Build a catalog from several message mappings.

        Later mappings override earlier ones on duplicate keys.
        """
        messages: Dict[str, str] = {}
        for source in sources:
            messages.update(source)
        return cls(language=language, messages=messages)

    @property
    def lang(self) -> str:
        return self.language.name

    @property
    def description(self) -> str:
        return self.language.description

    def get(self, key: str) -> Optional[str]:
        """Return the template for a key, or None if the key is absent."""
        return self.messages.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self.messages

    def __len__(self) -> int:
        return len(self.messages)


class CatalogStore:
    """Catalogs for all configured languages plus the default language name.

    The store is filled through ``add`` during startup and then frozen with
    ``freeze``; lookups are safe from any number of threads afterwards.
    """

    def __init__(self, default: str):
        self._default = default
        self._catalogs: Dict[str, Catalog] = {}
        self._folded: Dict[str, str] = {}
        self._frozen = False

    def add(self, catalog: Catalog) -> None:
        """Register a catalog under its language name.

        Raises:
            ConfigurationError: If the store is frozen or the name is taken.
        """
        if self._frozen:
            raise ConfigurationError("i18n: catalog store is frozen")
        name = catalog.lang
        if name in self._catalogs or name.lower() in self._folded:
            raise ConfigurationError(f"i18n: duplicate language {name!r}")
        self._catalogs[name] = catalog
        self._folded[name.lower()] = name

    def freeze(self) -> "CatalogStore":
        """Check the default language is present and forbid further changes.

        Raises:
            ConfigurationError: If the default language has no catalog.
        """
        if self._default not in self._catalogs:
            raise ConfigurationError(
                f"i18n: get fallback: {LocaleNotFoundError(self._default)}"
            )
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def default_name(self) -> str:
        return self._default

    @property
    def default(self) -> Catalog:
        """The catalog of the default language."""
        return self.get(self._default)

    def get(self, name: str) -> Catalog:
        """Look up a catalog by language name.

        Matching is exact first, then case-insensitive.

        Raises:
            LocaleNotFoundError: If no catalog is registered for the name.
        """
        catalog = self._catalogs.get(name)
        if catalog is not None:
            return catalog
        canonical = self._folded.get(name.lower()) if name else None
        if canonical is None:
            raise LocaleNotFoundError(name)
        return self._catalogs[canonical]

    @property
    def languages(self) -> List[Language]:
        """Configured languages in registration order."""
        return [catalog.language for catalog in self._catalogs.values()]

    def items(self) -> Iterator[Tuple[str, Catalog]]:
        return iter(self._catalogs.items())

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        return name in self._catalogs or name.lower() in self._folded

    def __len__(self) -> int:
        return len(self._catalogs)
