"""Catalog file parsers.

Catalogs are flat key to template mappings. Sectioned formats are flattened
into dotted keys: ``greeting`` under ``[home]`` in an INI file, or under a
``home:`` mapping in a YAML file, is addressed as ``home.greeting``.
"""

import configparser
from typing import Any, Dict

import yaml

from locale_middleware.i18n.errors import CatalogParseError

YAML_SUFFIXES = (".yml", ".yaml")

# Section name used for keys that appear before the first section header.
_ROOT_SECTION = "\x00root"


def parse_catalog(name: str, data: bytes) -> Dict[str, str]:
    """Parse catalog data, choosing the format from the file name.

    Args:
        name: File name, used to pick the format and in error messages.
        data: Raw file contents.

    Returns:
        Flat mapping of key to message template.

    Raises:
        CatalogParseError: If the data is not valid for the format.
    """
    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise CatalogParseError(name, f"invalid UTF-8: {e}") from e

    if name.lower().endswith(YAML_SUFFIXES):
        return parse_yaml(name, text)
    return parse_ini(name, text)


def parse_ini(name: str, text: str) -> Dict[str, str]:
    """Parse an INI catalog.

    Keys are case sensitive, duplicate keys are allowed (last one wins) and
    no interpolation is performed, so ``%s`` placeholders survive intact.
    """
    parser = configparser.ConfigParser(
        interpolation=None,
        strict=False,
        default_section=_ROOT_SECTION + "-defaults",
        comment_prefixes=("#", ";"),
        inline_comment_prefixes=None,
        empty_lines_in_values=False,
    )
    parser.optionxform = str  # type: ignore[assignment,method-assign]

    try:
        parser.read_string(f"[{_ROOT_SECTION}]\n{text}", source=name)
    except configparser.Error as e:
        raise CatalogParseError(name, str(e)) from e

    messages: Dict[str, str] = {}
    for section in parser.sections():
        prefix = "" if section == _ROOT_SECTION else f"{section}."
        for key, value in parser.items(section, raw=True):
            messages[prefix + key] = _unquote(value or "")
    return messages


def parse_yaml(name: str, text: str) -> Dict[str, str]:
    """Parse a YAML catalog, flattening nested mappings into dotted keys."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise CatalogParseError(name, str(e)) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise CatalogParseError(name, "expected a mapping at the top level")

    messages: Dict[str, str] = {}
    _flatten(data, "", messages)
    return messages


def _flatten(data: Dict[Any, Any], prefix: str, out: Dict[str, str]) -> None:
    for key, value in data.items():
        full_key = f"{prefix}{key}"
        if isinstance(value, dict):
            _flatten(value, f"{full_key}.", out)
        elif value is None:
            out[full_key] = ""
        else:
            out[full_key] = str(value)


def _unquote(value: str) -> str:
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "`"):
        return value[1:-1]
    return value
