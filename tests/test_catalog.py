"""
Syntax and theme catalog tests

Exercises grammar lookup (alias, extension, display name, fallback) and
theme CSS generation against the installed Pygments data.
"""

import pytest
from pygments.lexers import TextLexer

from enerator.lib.catalog import Catalog, SyntaxCatalog, ThemeCatalog, ThemeError
from enerator.config import AppSettings


@pytest.fixture(scope="module")
def syntaxes():
    return SyntaxCatalog()


@pytest.fixture(scope="module")
def themes():
    return ThemeCatalog()


class TestSyntaxFind:
    """Fence token resolution"""

    def test_alias(self, syntaxes):
        assert syntaxes.syntax_find("python").name == "Python"

    def test_alias_case_insensitive(self, syntaxes):
        assert syntaxes.syntax_find("Python").name == "Python"

    def test_short_alias(self, syntaxes):
        assert syntaxes.syntax_find("py").name == "Python"

    def test_file_extension(self, syntaxes):
        assert syntaxes.syntax_find("pyw").name == "Python"

    def test_display_name(self, syntaxes):
        assert syntaxes.syntax_find("Python Traceback").name == "Python Traceback"

    def test_unknown_falls_back_to_plain_text(self, syntaxes):
        assert isinstance(syntaxes.syntax_find("no-such-language-xyz"), TextLexer)

    @pytest.mark.parametrize("token", ["", "   ", None])
    def test_empty_token_is_plain_text(self, syntaxes, token):
        assert isinstance(syntaxes.syntax_find(token), TextLexer)

    def test_lexers_keep_surrounding_newlines(self, syntaxes):
        assert syntaxes.syntax_find("python").stripnl is False


class TestSyntaxesList:
    """Grammar enumeration"""

    def test_python_listed_with_extension(self, syntaxes):
        entries = {e.name: e for e in syntaxes.syntaxes_list()}
        assert "Python" in entries
        assert "py" in entries["Python"].extensions
        assert "python" in entries["Python"].aliases

    def test_sorted_by_name(self, syntaxes):
        names = [e.name.lower() for e in syntaxes.syntaxes_list()]
        assert names == sorted(names)

    def test_extensions_have_no_glob_prefix(self, syntaxes):
        for entry in syntaxes.syntaxes_list():
            assert not any(ext.startswith("*.") for ext in entry.extensions)


class TestThemes:
    """Theme listing and CSS rendering"""

    def test_builtin_themes_listed(self, themes):
        names = themes.themes_list()
        assert "default" in names
        assert "monokai" in names
        assert names == sorted(names)

    def test_css_uses_class_prefix(self, themes):
        css = themes.css_render("monokai")
        assert ".syn-k" in css
        assert "pre " in css

    def test_css_custom_prefix(self):
        css = ThemeCatalog(class_prefix="hl-").css_render("default")
        assert ".hl-k" in css
        assert ".syn-" not in css

    def test_unknown_theme_is_empty(self, themes):
        assert themes.css_render("nonexistent") == ""

    def test_unknown_theme_strict(self):
        with pytest.raises(ThemeError, match="nonexistent"):
            ThemeCatalog(strict=True).css_render("nonexistent")


class TestCatalogLoad:
    """Catalog construction from settings"""

    def test_load_uses_settings(self):
        settings = AppSettings(_env_file=None, class_prefix="x-", css_scope=".code", strict_mode=True)
        catalog = Catalog.load(settings)

        assert catalog.themes.class_prefix == "x-"
        assert catalog.themes.css_scope == ".code"
        assert catalog.themes.strict is True
        assert catalog.syntaxes.syntaxes_list()
