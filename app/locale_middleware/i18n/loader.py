"""Catalog loading.

Builds the catalog store and language matcher once at startup. Every
configured language must have a readable primary catalog; override
directories are best effort and only contribute files that exist.
"""

import os
from typing import List, Optional, Sequence, Tuple

from locale_middleware.i18n.errors import (
    CatalogParseError,
    ConfigurationError,
    MalformedLanguageTagError,
)
from locale_middleware.i18n.matcher import LanguageMatcher
from locale_middleware.i18n.models import Catalog, CatalogStore, Language
from locale_middleware.i18n.options import I18nOptions
from locale_middleware.i18n.parsers import parse_catalog
from locale_middleware.i18n.sources import CatalogSource, DirectorySource, is_file
from locale_middleware.i18n.tags import LanguageTag
from locale_middleware.logging import get_module_logger

logger = get_module_logger()


def select_source(options: I18nOptions) -> Tuple[CatalogSource, str]:
    """Pick the primary catalog source.

    Returns:
        ``(source, origin)`` where origin is "FileSystem" for an explicit
        source and "local" for the directory.
    """
    if options.file_system is not None:
        return options.file_system, "FileSystem"
    return DirectorySource(options.directory), "local"


def load_catalogs(
    languages: Sequence[Language],
    name_format: str,
    source: CatalogSource,
    append_directories: Sequence[str] = (),
    default: Optional[str] = None,
    origin: str = "local",
) -> Tuple[CatalogStore, LanguageMatcher]:
    """Load the catalogs of all languages.

    For each language, in order: parse its name as a BCP 47 tag, read the
    primary catalog from ``source``, then every override file that exists in
    ``append_directories``, and merge them with later files winning.

    Args:
        languages: Configured languages, in priority order.
        name_format: File name format with one ``%s`` for the language name.
        source: Source of the primary catalogs.
        append_directories: Local directories with override catalogs.
        default: Default language name. Defaults to the first language.
        origin: Label of the primary source used in error messages.

    Returns:
        The frozen catalog store and a matcher over the configured tags.

    Raises:
        ConfigurationError: If any tag is malformed, a primary catalog cannot
            be read, any catalog cannot be parsed, or the default language is
            missing.
    """
    if not languages:
        raise ConfigurationError("i18n: no language is specified")

    store = CatalogStore(default=default or languages[0].name)
    names: List[str] = []

    for lang in languages:
        try:
            LanguageTag.parse(lang.name)
        except MalformedLanguageTagError as e:
            raise ConfigurationError(
                f"i18n: init locales: parse {lang.name!r}: {e}"
            ) from e
        names.append(lang.name)

        filename = name_format % lang.name
        try:
            primary = source.read(filename)
        except OSError as e:
            raise ConfigurationError(
                f"i18n: init locales: open from {origin}: {_describe_os_error(e, filename)}"
            ) from e

        sources = [(filename, primary)]
        for directory in append_directories:
            path = os.path.join(directory, filename)
            if not is_file(path):
                logger.debug("override_skipped", locale=lang.name, path=path)
                continue
            try:
                with open(path, "rb") as fh:
                    sources.append((path, fh.read()))
            except OSError as e:
                raise ConfigurationError(
                    f"i18n: init locales: open override: {_describe_os_error(e, path)}"
                ) from e

        try:
            catalog = Catalog.merged(
                lang, (parse_catalog(name, data) for name, data in sources)
            )
        except CatalogParseError as e:
            raise ConfigurationError(
                f"i18n: init locales: add locale for {lang.name!r}: {e}"
            ) from e

        store.add(catalog)
        logger.info(
            "catalog_loaded",
            locale=lang.name,
            source=source.describe(),
            file_count=len(sources),
            message_count=len(catalog),
        )

    store.freeze()
    return store, LanguageMatcher(names)


def load_from_options(options: I18nOptions) -> Tuple[CatalogStore, LanguageMatcher]:
    """Load catalogs as configured by already parsed options."""
    source, origin = select_source(options)
    return load_catalogs(
        options.languages,
        options.name_format,
        source,
        options.append_directories,
        default=options.default,
        origin=origin,
    )


def _describe_os_error(error: OSError, name: str) -> str:
    target = str(error.filename) if error.filename else name
    if isinstance(error, FileNotFoundError):
        return f"open {target}: no such file or directory"
    return f"open {target}: {error.strerror or error}"
