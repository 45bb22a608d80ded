"""Factory functions for creating i18n components."""

from typing import Any, Optional

from locale_middleware.i18n.loader import load_from_options
from locale_middleware.i18n.options import I18nOptions, parse_options
from locale_middleware.i18n.service import I18n
from locale_middleware.logging import get_module_logger

logger = get_module_logger()


def create_i18n(options: Optional[I18nOptions] = None, **kwargs: Any) -> I18n:
    """Create the process-wide I18n state.

    Loads every configured catalog eagerly, so configuration problems are
    reported here rather than on the first request.

    Args:
        options: Options to load with. When omitted, ``kwargs`` are used to
            build an I18nOptions.

    Returns:
        I18n: Loaded catalogs and matcher.

    Raises:
        ConfigurationError: If the options are invalid or a catalog cannot
            be loaded.

    Usage:
        i18n = create_i18n(
            languages=[Language("en-US", "English"), Language("zh-CN", "简体中文")],
            append_directories=["/etc/myapp/locales"],
        )
    """
    if options is None:
        options = I18nOptions(**kwargs)
    options = parse_options(options)
    store, matcher = load_from_options(options)

    logger.info(
        "i18n_initialized",
        languages=[lang.name for lang in store.languages],
        default=store.default_name,
        override_directories=len(options.append_directories),
    )
    return I18n(options=options, store=store, matcher=matcher)
