"""
Line-oriented syntax highlighter

Wraps a Pygments HtmlFormatter so that a code block is tokenised once, in
source order, and then emitted one line at a time. Lexer state (open
strings, block comments, heredocs, ...) therefore carries across lines while
each line's markup stays self-contained.

Every token span gets the configured class prefix (default "syn-"), e.g.:

    <span class="syn-nb">print</span><span class="syn-p">(</span>...
"""

from io import StringIO
from typing import Any, Iterable, Iterator, List, Optional, Tuple

from pygments.formatters import HtmlFormatter
from pygments.lexer import Lexer

from ..config import appsettings


TokenRun = List[Tuple[Any, str]]


class Highlighter:
    """Renders code text as class-annotated HTML"""

    def __init__(self, class_prefix: Optional[str] = None) -> None:
        self.class_prefix = appsettings.class_prefix if class_prefix is None else class_prefix
        self.formatter = HtmlFormatter(nowrap=True, classprefix=self.class_prefix)

    def lines_tokenize(self, lexer: Lexer, text: str) -> Iterator[TokenRun]:
        """
        Split a lexer's token stream into per-line runs.

        Tokens spanning a newline (multi-line strings, comments) are cut at
        the newline; each piece keeps the original token type.

        Args:
            lexer: Lexer for the block's language
            text: Full code block text

        Yields:
            One list of (token_type, value) pairs per source line, in order.
            Line endings are kept on the last piece of each line.
        """
        current: TokenRun = []
        for ttype, value in lexer.get_tokens(text):
            for piece in value.splitlines(keepends=True):
                current.append((ttype, piece))
                if piece.endswith("\n"):
                    yield current
                    current = []
        if current:
            yield current

    def line_format(self, tokens: Iterable[Tuple[Any, str]]) -> str:
        """Format one line's tokens as HTML"""
        out = StringIO()
        self.formatter.format(tokens, out)
        return out.getvalue()

    def block_highlight(self, lexer: Lexer, text: str) -> str:
        """
        Highlight a code block line by line.

        Args:
            lexer: Lexer for the block's language
            text: Full code block text

        Returns:
            Concatenated per-line markup (no surrounding <pre>)
        """
        return "".join(self.line_format(line) for line in self.lines_tokenize(lexer, text))

    def codeBlock_render(self, lexer: Lexer, text: str) -> str:
        """Highlight text and wrap it as <pre><code>...</code></pre>"""
        return f"<pre><code>{self.block_highlight(lexer, text)}</code></pre>"
