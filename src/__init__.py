"""
enerator - Markdown to HTML with highlighted code

Converts Markdown documents to HTML, rendering fenced code blocks through
Pygments with prefixed token classes, and emits matching theme CSS.
"""

__version__ = "0.1.0"

from .lib import Catalog, Converter, CodeBlockInterceptor, Highlighter, LOG, state_connectToLogger

__all__ = [
    "Catalog",
    "Converter",
    "CodeBlockInterceptor",
    "Highlighter",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
