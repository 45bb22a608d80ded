"""Tests for locale_middleware.i18n.parsers module."""

import pytest

from locale_middleware.i18n import CatalogParseError
from locale_middleware.i18n.parsers import parse_catalog, parse_ini, parse_yaml


@pytest.mark.unit
class TestParseIni:
    """Tests for INI catalogs."""

    def test_top_level_keys(self):
        assert parse_ini("t.ini", "greeting = Hello\n") == {"greeting": "Hello"}

    def test_sections_flatten_to_dotted_keys(self):
        text = "greeting = Hi\n\n[home]\ntitle = Home\n[nav.menu]\nopen = Open\n"
        assert parse_ini("t.ini", text) == {
            "greeting": "Hi",
            "home.title": "Home",
            "nav.menu.open": "Open",
        }

    def test_placeholders_not_interpolated(self):
        messages = parse_ini("t.ini", "welcome = Hello %s, %d%% done\n")
        assert messages["welcome"] == "Hello %s, %d%% done"

    def test_keys_case_sensitive(self):
        assert parse_ini("t.ini", "Title = A\ntitle = b\n") == {"Title": "A", "title": "b"}

    def test_duplicate_keys_last_wins(self):
        assert parse_ini("t.ini", "a = 1\na = 2\n") == {"a": "2"}

    def test_comments(self):
        text = "; comment\n# another\ngreeting = Hi\n"
        assert parse_ini("t.ini", text) == {"greeting": "Hi"}

    def test_quoted_values_unwrapped(self):
        text = 'padded = "  spaced  "\ntick = `raw`\nhalf = "open\n'
        messages = parse_ini("t.ini", text)
        assert messages["padded"] == "  spaced  "
        assert messages["tick"] == "raw"
        assert messages["half"] == '"open'

    def test_default_section_is_ordinary(self):
        messages = parse_ini("t.ini", "[DEFAULT]\nname = x\n[other]\nkey = y\n")
        assert messages == {"DEFAULT.name": "x", "other.key": "y"}

    def test_empty(self):
        assert parse_ini("t.ini", "") == {}

    def test_invalid_line(self):
        with pytest.raises(CatalogParseError):
            parse_ini("t.ini", "this line has no separator\n")


@pytest.mark.unit
class TestParseYaml:
    """Tests for YAML catalogs."""

    def test_nested_mappings_flatten(self):
        text = "greeting: Hi\nhome:\n  title: Home\n  count: 3\n"
        assert parse_yaml("t.yml", text) == {
            "greeting": "Hi",
            "home.title": "Home",
            "home.count": "3",
        }

    def test_empty_document(self):
        assert parse_yaml("t.yml", "") == {}

    def test_null_value(self):
        assert parse_yaml("t.yml", "greeting:\n") == {"greeting": ""}

    def test_non_mapping(self):
        with pytest.raises(CatalogParseError, match="expected a mapping"):
            parse_yaml("t.yml", "- a\n- b\n")

    def test_invalid_yaml(self):
        with pytest.raises(CatalogParseError):
            parse_yaml("t.yml", "key: [unclosed\n")


@pytest.mark.unit
class TestParseCatalog:
    """Tests for format selection."""

    def test_ini_by_default(self):
        assert parse_catalog("locale_en-US.ini", b"a = 1\n") == {"a": "1"}

    @pytest.mark.parametrize("name", ["en-US.yml", "en-US.yaml", "EN.YML"])
    def test_yaml_by_suffix(self, name):
        assert parse_catalog(name, b"a:\n  b: 1\n") == {"a.b": "1"}

    def test_utf8_with_bom(self):
        data = "\ufeffgreeting = 你好\n".encode("utf-8")
        assert parse_catalog("x.ini", data) == {"greeting": "你好"}

    def test_invalid_utf8(self):
        with pytest.raises(CatalogParseError, match="invalid UTF-8"):
            parse_catalog("x.ini", b"\xff\xfe\x00bad")
