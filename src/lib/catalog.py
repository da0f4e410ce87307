"""
Syntax and theme catalogs backed by Pygments.

Both catalogs are read-only registries built once per process from the
lexers and styles Pygments has installed (including plugins). They are
constructed explicitly and handed to the components that need them:

    catalog = Catalog.load()
    lexer = catalog.syntaxes.syntax_find("python")
    css = catalog.themes.css_render("monokai")
"""

from typing import List, Optional

from pygments.formatters import HtmlFormatter
from pygments.lexer import Lexer
from pygments.lexers import (
    TextLexer,
    find_lexer_class,
    get_all_lexers,
    get_lexer_by_name,
    get_lexer_for_filename,
)
from pygments.styles import get_all_styles
from pygments.util import ClassNotFound

from ..config import appsettings, AppSettings
from ..models import SyntaxEntry
from .log import LOG


class ThemeError(Exception):
    """Raised when CSS is requested for an unknown theme in strict mode"""
    pass


class SyntaxCatalog:
    """
    Registry of language grammars (Pygments lexers).

    Lexers are created with stripnl=False so that leading and trailing
    blank lines of a code block survive highlighting.
    """

    def __init__(self) -> None:
        entries: List[SyntaxEntry] = []
        for name, aliases, filenames, _mimetypes in get_all_lexers():
            extensions = tuple(f[2:] for f in filenames if f.startswith("*."))
            entries.append(SyntaxEntry(name=name, aliases=tuple(aliases), extensions=extensions))
        self.entries: List[SyntaxEntry] = sorted(entries, key=lambda e: e.name.lower())

    def syntaxes_list(self) -> List[SyntaxEntry]:
        """All known grammars, sorted by display name"""
        return list(self.entries)

    def plainText_get(self) -> Lexer:
        """The fallback grammar used when no other matches"""
        return TextLexer(stripnl=False)

    def syntax_find(self, token: Optional[str]) -> Lexer:
        """
        Resolve a fence language token to a lexer.

        Lookup order:
            1. Lexer alias (e.g., "python", "py", "sh")
            2. File extension (e.g., "rs" -> Rust, "tsx" -> TypeScript)
            3. Display name, case-insensitive (e.g., "Python")
            4. Plain text

        Args:
            token: Language token from the fence info string (may be empty)

        Returns:
            A lexer instance; never raises
        """
        token = (token or "").strip()
        if not token:
            return self.plainText_get()

        try:
            return get_lexer_by_name(token.lower(), stripnl=False)
        except ClassNotFound:
            pass

        try:
            return get_lexer_for_filename(f"file.{token}", stripnl=False)
        except ClassNotFound:
            pass

        for entry in self.entries:
            if entry.name.lower() == token.lower():
                lexer_class = find_lexer_class(entry.name)
                if lexer_class is not None:
                    return lexer_class(stripnl=False)

        LOG(f"No grammar for '{token}', using plain text", level=2)
        return self.plainText_get()


class ThemeCatalog:
    """
    Registry of colour themes (Pygments styles) and their CSS.

    Generated stylesheets use the same class prefix as the highlighter,
    scoped under a selector (default "pre") so they do not leak into the
    surrounding page.
    """

    def __init__(
        self,
        class_prefix: str = "syn-",
        css_scope: str = "pre",
        strict: bool = False,
    ) -> None:
        self.class_prefix = class_prefix
        self.css_scope = css_scope
        self.strict = strict
        self.names: List[str] = sorted(get_all_styles())

    def themes_list(self) -> List[str]:
        return list(self.names)

    def theme_has(self, name: str) -> bool:
        return name in self.names

    def css_render(self, name: str) -> str:
        """
        Render the stylesheet for one theme.

        Args:
            name: Theme name as listed by themes_list()

        Returns:
            CSS text, or "" if the theme is unknown

        Raises:
            ThemeError: If the theme is unknown and strict mode is on
        """
        if not self.theme_has(name):
            if self.strict:
                raise ThemeError(
                    f"Theme '{name}' not found. "
                    f"Run the 'themes' command to list available themes"
                )
            LOG(f"Unknown theme '{name}', producing empty CSS", level=2)
            return ""

        formatter = HtmlFormatter(style=name, classprefix=self.class_prefix)
        return formatter.get_style_defs(self.css_scope) + "\n"


class Catalog:
    """Syntax and theme registries shared by one invocation"""

    def __init__(self, syntaxes: SyntaxCatalog, themes: ThemeCatalog) -> None:
        self.syntaxes = syntaxes
        self.themes = themes

    @classmethod
    def load(cls, settings: Optional[AppSettings] = None) -> "Catalog":
        """
        Build both registries from the installed Pygments data.

        Args:
            settings: Source of class prefix, CSS scope and strictness
                      (defaults to the appsettings singleton)
        """
        settings = settings or appsettings
        LOG("Loading syntax and theme catalogs...", level=2)
        catalog = cls(
            syntaxes=SyntaxCatalog(),
            themes=ThemeCatalog(
                class_prefix=settings.class_prefix,
                css_scope=settings.css_scope,
                strict=settings.strict_mode,
            ),
        )
        LOG(
            f"Loaded {len(catalog.syntaxes.entries)} syntaxes, "
            f"{len(catalog.themes.names)} themes",
            level=2,
        )
        return catalog
