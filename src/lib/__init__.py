"""
enerator - Markdown to HTML with highlighted code

Library layer: catalogs, highlighter, code-block interceptor and converter.
"""

__version__ = "0.1.0"

from .catalog import Catalog, SyntaxCatalog, ThemeCatalog, ThemeError
from .highlighter import Highlighter
from .interceptor import CodeBlockInterceptor
from .converter import Converter, events_parse, events_render, markdown_make
from .log import LOG, state_connectToLogger

__all__ = [
    "Catalog",
    "SyntaxCatalog",
    "ThemeCatalog",
    "ThemeError",
    "Highlighter",
    "CodeBlockInterceptor",
    "Converter",
    "events_parse",
    "events_render",
    "markdown_make",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
