"""
Catalog data models

Entries describing the language grammars known to the highlighter.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class SyntaxEntry:
    """
    A language grammar available for highlighting

    Attributes:
        name: Display name (e.g., "Python")
        aliases: Fence tokens that select this grammar (e.g., ("python", "py"))
        extensions: File extensions without the leading "*." (e.g., ("py", "pyw"))
    """
    name: str
    aliases: Tuple[str, ...]
    extensions: Tuple[str, ...]
