"""BCP 47 language tag parsing.

Covers the subset of RFC 5646 that matters for negotiation: language,
extended language, script, region and variants, plus extension and
private-use sequences which are kept verbatim but ignored by the matcher.
"""

import re
from dataclasses import dataclass
from typing import Tuple

from locale_middleware.i18n.errors import MalformedLanguageTagError

_ALNUM = re.compile(r"^[A-Za-z0-9]+$")
_LANGUAGE = re.compile(r"^[A-Za-z]{2,3}$|^[A-Za-z]{5,8}$")
_EXTLANG = re.compile(r"^[A-Za-z]{3}$")
_SCRIPT = re.compile(r"^[A-Za-z]{4}$")
_REGION = re.compile(r"^[A-Za-z]{2}$|^[0-9]{3}$")
_VARIANT = re.compile(r"^[A-Za-z0-9]{5,8}$|^[0-9][A-Za-z0-9]{3}$")
_SINGLETON = re.compile(r"^[0-9A-WY-Za-wy-z]$")

# Irregular grandfathered tags from the IANA registry.
_GRANDFATHERED = frozenset(
    {
        "en-gb-oed",
        "i-ami",
        "i-bnn",
        "i-default",
        "i-enochian",
        "i-hak",
        "i-klingon",
        "i-lux",
        "i-mingo",
        "i-navajo",
        "i-pwn",
        "i-tao",
        "i-tay",
        "i-tsu",
        "sgn-be-fr",
        "sgn-be-nl",
        "sgn-ch-de",
    }
)


# Default scripts for languages written in more than one script, keyed by
# (language, region); the empty region is the language-wide default.
_LIKELY_SCRIPTS = {
    ("zh", ""): "Hans",
    ("zh", "CN"): "Hans",
    ("zh", "SG"): "Hans",
    ("zh", "MY"): "Hans",
    ("zh", "TW"): "Hant",
    ("zh", "HK"): "Hant",
    ("zh", "MO"): "Hant",
    ("sr", ""): "Cyrl",
    ("sr", "ME"): "Latn",
    ("sr", "XK"): "Cyrl",
    ("uz", ""): "Latn",
    ("uz", "AF"): "Arab",
    ("pa", ""): "Guru",
    ("pa", "PK"): "Arab",
    ("az", ""): "Latn",
    ("az", "IR"): "Arab",
    ("bs", ""): "Latn",
    ("mn", ""): "Cyrl",
    ("mn", "CN"): "Mong",
}


@dataclass(frozen=True)
class LanguageTag:
    """A parsed BCP 47 language tag.

    Attributes:
        language: Primary language subtag, lowercase (e.g. "zh"). Empty for
            private-use only tags.
        extlang: Extended language subtag, lowercase.
        script: Script subtag, title case (e.g. "Hans").
        region: Region subtag, uppercase (e.g. "CN") or UN M.49 digits.
        variants: Variant subtags, lowercase.
        extensions: Extension and private-use subtags, lowercase, verbatim.
    """

    language: str
    extlang: str = ""
    script: str = ""
    region: str = ""
    variants: Tuple[str, ...] = ()
    extensions: Tuple[str, ...] = ()

    @classmethod
    def parse(cls, value: str) -> "LanguageTag":
        """Parse a language tag string.

        Both "-" and "_" are accepted as subtag separators.

        Raises:
            MalformedLanguageTagError: If the value is not a well-formed tag.
        """
        if not isinstance(value, str):
            raise MalformedLanguageTagError(repr(value))
        raw = value.strip().replace("_", "-")
        if not raw:
            raise MalformedLanguageTagError(value, "empty language tag")

        lowered = raw.lower()
        if lowered in _GRANDFATHERED:
            return cls(language=lowered)

        subtags = raw.split("-")
        if any(not part or not _ALNUM.match(part) or len(part) > 8 for part in subtags):
            raise MalformedLanguageTagError(value)

        if subtags[0].lower() == "x":
            if len(subtags) < 2:
                raise MalformedLanguageTagError(value)
            return cls(language="", extensions=tuple(p.lower() for p in subtags))

        if not _LANGUAGE.match(subtags[0]):
            raise MalformedLanguageTagError(value)
        language = subtags[0].lower()
        pos = 1

        extlang = ""
        if pos < len(subtags) and len(language) <= 3 and _EXTLANG.match(subtags[pos]):
            extlang = subtags[pos].lower()
            pos += 1

        script = ""
        if pos < len(subtags) and _SCRIPT.match(subtags[pos]):
            script = subtags[pos].title()
            pos += 1

        region = ""
        if pos < len(subtags) and _REGION.match(subtags[pos]):
            region = subtags[pos].upper()
            pos += 1

        variants = []
        while pos < len(subtags) and _VARIANT.match(subtags[pos]):
            variant = subtags[pos].lower()
            if variant in variants:
                raise MalformedLanguageTagError(value, "duplicate variant")
            variants.append(variant)
            pos += 1

        extensions = []
        while pos < len(subtags):
            singleton = subtags[pos]
            if singleton.lower() == "x":
                rest = subtags[pos + 1 :]
                if not rest:
                    raise MalformedLanguageTagError(value)
                extensions.extend(p.lower() for p in subtags[pos:])
                break
            if not _SINGLETON.match(singleton):
                raise MalformedLanguageTagError(value)
            body = []
            pos += 1
            while pos < len(subtags) and len(subtags[pos]) >= 2:
                body.append(subtags[pos].lower())
                pos += 1
            if not body:
                raise MalformedLanguageTagError(value, "empty extension")
            extensions.append(singleton.lower())
            extensions.extend(body)

        return cls(
            language=language,
            extlang=extlang,
            script=script,
            region=region,
            variants=tuple(variants),
            extensions=tuple(extensions),
        )

    @property
    def base(self) -> str:
        """Language and extended language, e.g. "zh" or "zh-yue"."""
        if self.extlang:
            return f"{self.language}-{self.extlang}"
        return self.language

    @property
    def likely_script(self) -> str:
        """The explicit script, or the usual script for the language and region.

        "zh-TW" -> "Hant", "zh" -> "Hans", "en-US" -> "" (single-script language).
        """
        if self.script:
            return self.script
        return _LIKELY_SCRIPTS.get(
            (self.base, self.region), _LIKELY_SCRIPTS.get((self.base, ""), "")
        )

    def __str__(self) -> str:
        parts = [p for p in (self.language, self.extlang, self.script, self.region) if p]
        parts.extend(self.variants)
        parts.extend(self.extensions)
        return "-".join(parts)


def is_valid_tag(value: str) -> bool:
    """Return True if the value parses as a BCP 47 tag."""
    try:
        LanguageTag.parse(value)
    except MalformedLanguageTagError:
        return False
    return True
