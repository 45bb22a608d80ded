"""Language negotiation against the configured languages.

Parses ``Accept-Language`` headers (RFC 7231) and picks the best configured
language using BCP 47 subtag comparison, preferring exact and same-region
matches over language-family matches.
"""

from enum import IntEnum
from typing import Iterable, List, Optional, Sequence, Tuple

from locale_middleware.i18n.errors import MalformedLanguageTagError
from locale_middleware.i18n.tags import LanguageTag
from locale_middleware.logging import get_module_logger

logger = get_module_logger()

WILDCARD = "*"


class Confidence(IntEnum):
    """How well a negotiated language satisfies the request.

    ``NO`` means nothing acceptable was found; the tag returned alongside it
    is a placeholder and must not be used.
    """

    NO = 0
    LOW = 1
    HIGH = 2
    EXACT = 3


def parse_accept_language(header: Optional[str]) -> List[Tuple[str, float]]:
    """Parse an Accept-Language header into weighted language ranges.

    "da, en-GB;q=0.8, en;q=0.7" -> [("da", 1.0), ("en-GB", 0.8), ("en", 0.7)]

    Entries with a malformed range or weight are skipped, entries with
    ``q=0`` are dropped as not acceptable, and the result is sorted by weight
    (stable, so equal weights keep header order). Never raises.
    """
    if not header:
        return []

    preferences = []
    for part in header.split(","):
        fields = [f.strip() for f in part.split(";")]
        lang_range = fields[0]
        if not lang_range:
            continue

        quality: Optional[float] = 1.0
        for param in fields[1:]:
            name, sep, value = param.partition("=")
            if name.strip().lower() != "q":
                continue
            quality = _parse_quality(value.strip()) if sep else None
        if quality is None or quality <= 0:
            continue

        if lang_range != WILDCARD:
            try:
                LanguageTag.parse(lang_range)
            except MalformedLanguageTagError:
                continue
        preferences.append((lang_range, quality))

    return sorted(preferences, key=lambda item: item[1], reverse=True)


def _parse_quality(value: str) -> Optional[float]:
    try:
        quality = float(value)
    except ValueError:
        return None
    if not 0 <= quality <= 1:
        return None
    return quality


class LanguageMatcher:
    """Matches requested languages against an ordered list of supported ones.

    Order of the supported languages defines priority: when two supported
    languages match a request equally well, the earlier one wins.
    """

    def __init__(self, supported: Sequence[str]):
        """Initialize the matcher.

        Args:
            supported: Configured language names, in priority order.

        Raises:
            ValueError: If ``supported`` is empty.
            MalformedLanguageTagError: If a supported name is not a valid tag.
        """
        if not supported:
            raise ValueError("LanguageMatcher requires at least one supported language")
        self._names: Tuple[str, ...] = tuple(supported)
        self._tags: Tuple[LanguageTag, ...] = tuple(
            LanguageTag.parse(name) for name in supported
        )

    @property
    def supported(self) -> Tuple[str, ...]:
        return self._names

    def match(self, accept_language: Optional[str]) -> Tuple[str, Confidence]:
        """Negotiate against an Accept-Language header value.

        Returns:
            ``(name, confidence)``. On ``Confidence.NO`` the name is the first
            supported language, which callers must not treat as a choice.
        """
        return self.match_tags(lang for lang, _ in parse_accept_language(accept_language))

    def match_tags(self, requested: Iterable[str]) -> Tuple[str, Confidence]:
        """Negotiate against language ranges already in preference order.

        The first range with an EXACT or HIGH match wins. Failing that, the
        first range with a LOW match wins.
        """
        low_match: Optional[str] = None
        for lang_range in requested:
            name, confidence = self._best_for(lang_range)
            if confidence >= Confidence.HIGH:
                return name, confidence
            if confidence == Confidence.LOW and low_match is None:
                low_match = name

        if low_match is not None:
            return low_match, Confidence.LOW
        return self._names[0], Confidence.NO

    def _best_for(self, lang_range: str) -> Tuple[str, Confidence]:
        if lang_range == WILDCARD:
            return self._names[0], Confidence.LOW
        try:
            requested = LanguageTag.parse(lang_range)
        except MalformedLanguageTagError:
            logger.debug("ignored_malformed_language_range", lang_range=lang_range)
            return self._names[0], Confidence.NO

        best_name, best = self._names[0], Confidence.NO
        for name, tag in zip(self._names, self._tags):
            confidence = compare(requested, tag)
            if confidence > best:
                best_name, best = name, confidence
                if best == Confidence.EXACT:
                    break
        return best_name, best


def compare(requested: LanguageTag, supported: LanguageTag) -> Confidence:
    """Rate how well a supported tag satisfies a requested one."""
    if str(requested).lower() == str(supported).lower():
        return Confidence.EXACT
    if not requested.language or requested.base != supported.base:
        return Confidence.NO
    requested_script = requested.likely_script
    supported_script = supported.likely_script
    if requested_script and supported_script and requested_script != supported_script:
        return Confidence.NO
    if requested.region and supported.region and requested.region != supported.region:
        return Confidence.LOW
    return Confidence.HIGH
