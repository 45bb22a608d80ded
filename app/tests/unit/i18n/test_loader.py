"""Tests for locale_middleware.i18n.loader module."""

import pytest

from locale_middleware.i18n import (
    ConfigurationError,
    DirectorySource,
    I18nOptions,
    Language,
    LanguageMatcher,
    MemorySource,
    load_catalogs,
    select_source,
)
from locale_middleware.i18n.loader import load_from_options
from tests.factories import make_language, make_memory_source


@pytest.mark.unit
class TestSelectSource:
    """Tests for select_source()."""

    def test_directory_by_default(self):
        """Without a file system the primary directory is used."""
        source, origin = select_source(I18nOptions(directory="conf/locale"))
        assert isinstance(source, DirectorySource)
        assert str(source.directory) == "conf/locale"
        assert origin == "local"

    def test_file_system_takes_precedence(self):
        """An explicit file system wins over the directory."""
        memory = MemorySource({})
        source, origin = select_source(I18nOptions(file_system=memory, directory="x"))
        assert source is memory
        assert origin == "FileSystem"


@pytest.mark.unit
class TestLoadCatalogs:
    """Tests for load_catalogs()."""

    def test_loads_primary_directory(self, primary_dir, languages):
        """Each configured language gets a catalog from the primary directory."""
        store, matcher = load_catalogs(
            languages, "locale_%s.ini", DirectorySource(primary_dir)
        )
        assert store.get("en-US").get("greeting") == "How are you?"
        assert store.get("zh-CN").get("home.title") == "首页"
        assert "greeting" not in store.get("zh-CN")
        assert isinstance(matcher, LanguageMatcher)
        assert matcher.supported == ("en-US", "zh-CN")

    def test_ini_sections_and_quotes(self, primary_dir, languages):
        store, _ = load_catalogs(languages, "locale_%s.ini", DirectorySource(primary_dir))
        catalog = store.get("en-US")
        assert catalog.get("home.title") == "Home"
        assert catalog.get("quoted") == "  padded  "

    def test_store_is_frozen_with_default(self, primary_dir, languages):
        store, _ = load_catalogs(languages, "locale_%s.ini", DirectorySource(primary_dir))
        assert store.frozen
        assert store.default_name == "en-US"

    def test_explicit_default(self, primary_dir, languages):
        store, _ = load_catalogs(
            languages, "locale_%s.ini", DirectorySource(primary_dir), default="zh-CN"
        )
        assert store.default.lang == "zh-CN"

    def test_override_directory_wins(self, primary_dir, secondary_dir, languages):
        """Keys in an append directory override the primary catalog."""
        store, _ = load_catalogs(
            languages,
            "locale_%s.ini",
            DirectorySource(primary_dir),
            append_directories=[str(secondary_dir)],
        )
        english = store.get("en-US")
        assert english.get("greeting") == "What's up?"
        assert english.get("home.title") == "Home page"
        # Keys only in the primary catalog survive the merge
        assert english.get("farewell") == "Goodbye, %s!"

    def test_missing_override_file_is_skipped(self, primary_dir, secondary_dir, languages):
        """Override directories without a file for a language are ignored."""
        store, _ = load_catalogs(
            languages,
            "locale_%s.ini",
            DirectorySource(primary_dir),
            append_directories=[str(secondary_dir), "/nonexistent/locales"],
        )
        assert store.get("zh-CN").get("farewell") == "再见，%s！"

    def test_later_override_directories_win(self, tmp_path, primary_dir, secondary_dir):
        """Append directories are applied in order."""
        (tmp_path / "locale_en-US.ini").write_text("greeting = Hey!\n", encoding="utf-8")
        store, _ = load_catalogs(
            [make_language("en-US")],
            "locale_%s.ini",
            DirectorySource(primary_dir),
            append_directories=[str(secondary_dir), str(tmp_path)],
        )
        assert store.get("en-US").get("greeting") == "Hey!"
        assert store.get("en-US").get("home.title") == "Home page"

    def test_override_applies_to_file_system_source(self, secondary_dir):
        """Local overrides are merged on top of a non-directory source."""
        store, _ = load_catalogs(
            [make_language("en-US")],
            "locale_%s.ini",
            make_memory_source(),
            append_directories=[str(secondary_dir)],
            origin="FileSystem",
        )
        assert store.get("en-US").get("greeting") == "What's up?"

    def test_missing_primary_directory(self, languages):
        """A missing primary catalog names the source and file."""
        with pytest.raises(ConfigurationError) as exc_info:
            load_catalogs(languages, "locale_%s.ini", DirectorySource("404"))
        assert str(exc_info.value) == (
            "i18n: init locales: open from local: "
            "open 404/locale_en-US.ini: no such file or directory"
        )

    def test_missing_file_in_file_system(self, languages):
        """A missing file in an explicit file system reports FileSystem."""
        with pytest.raises(ConfigurationError) as exc_info:
            load_catalogs(
                languages,
                "locale_%s.ini",
                MemorySource({}),
                origin="FileSystem",
            )
        assert str(exc_info.value).startswith("i18n: init locales: open from FileSystem: ")
        assert "locale_en-US.ini" in str(exc_info.value)

    def test_missing_second_language(self, tmp_path):
        """Every configured language needs a primary catalog."""
        (tmp_path / "locale_en-US.ini").write_text("a = 1\n", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="locale_fr-FR.ini"):
            load_catalogs(
                [make_language("en-US"), make_language("fr-FR")],
                "locale_%s.ini",
                DirectorySource(tmp_path),
            )

    def test_malformed_language_name(self):
        """Language names must be valid tags."""
        with pytest.raises(ConfigurationError) as exc_info:
            load_catalogs([Language("not a tag")], "locale_%s.ini", MemorySource({}))
        assert str(exc_info.value).startswith("i18n: init locales: parse 'not a tag': ")

    def test_unparseable_catalog(self):
        """Parse failures name the language."""
        source = MemorySource({"locale_en-US.ini": "no separator here\n"})
        with pytest.raises(ConfigurationError) as exc_info:
            load_catalogs([Language("en-US")], "locale_%s.ini", source)
        assert str(exc_info.value).startswith(
            "i18n: init locales: add locale for 'en-US': parse locale_en-US.ini: "
        )

    def test_yaml_catalogs(self):
        """YAML catalogs are selected by file name suffix."""
        source = MemorySource({"en-US.yml": "greeting: Hi\nhome:\n  title: Home\n"})
        store, _ = load_catalogs([Language("en-US")], "%s.yml", source)
        assert store.get("en-US").get("home.title") == "Home"

    def test_default_not_loaded(self, primary_dir, languages):
        with pytest.raises(ConfigurationError, match="i18n: get fallback: "):
            load_catalogs(
                languages, "locale_%s.ini", DirectorySource(primary_dir), default="fr-FR"
            )

    def test_no_languages(self):
        with pytest.raises(ConfigurationError, match="no language is specified"):
            load_catalogs([], "locale_%s.ini", MemorySource({}))


@pytest.mark.unit
class TestLoadFromOptions:
    """Tests for load_from_options()."""

    def test_uses_directory(self, primary_dir, languages):
        options = I18nOptions(directory=str(primary_dir), languages=languages, default="zh-CN")
        store, _ = load_from_options(options)
        assert store.default_name == "zh-CN"

    def test_uses_file_system(self, languages):
        options = I18nOptions(file_system=make_memory_source(), languages=languages)
        store, _ = load_from_options(options)
        assert store.get("en-US").get("greeting") == "How are you?"
