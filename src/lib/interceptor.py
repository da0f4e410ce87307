"""
Fenced code block interceptor

Rewrites an event sequence so that every fenced code block collapses into a
single HTML event carrying highlighted markup. All other events pass
through untouched and in their original order.

The rewrite is a two-state machine:

    OutsideBlock --START(fence)--> InsideBlock(language, lines)
    InsideBlock  --TEXT----------> InsideBlock (text appended)
    InsideBlock  --END(fence)----> OutsideBlock (emit HTML, or nothing if empty)

Blocks do not nest: a START while already inside a block discards the
unfinished block (logged and counted as dropped) and begins the new one.
"""

from typing import Iterable, Iterator, Optional, Union

from ..models import Event, EventKind, InsideBlock, OutsideBlock
from .catalog import SyntaxCatalog
from .highlighter import Highlighter
from .log import LOG


State = Union[OutsideBlock, InsideBlock]


class CodeBlockInterceptor:
    """
    Replaces fenced code blocks in an event stream with highlighted HTML.

    Args:
        syntaxes: Catalog used to resolve fence language tokens
        highlighter: Renders code text as <pre><code> markup
    """

    def __init__(self, syntaxes: SyntaxCatalog, highlighter: Optional[Highlighter] = None) -> None:
        self.syntaxes = syntaxes
        self.highlighter = highlighter or Highlighter()
        self.blocks_rendered = 0
        self.blocks_dropped = 0

    def events_rewrite(self, events: Iterable[Event]) -> Iterator[Event]:
        """
        Lazily rewrite an event sequence.

        Args:
            events: Single-pass event sequence from the markdown parser

        Yields:
            The input events, with each fenced block replaced by at most
            one HTML event
        """
        state: State = OutsideBlock()

        for event in events:
            if event.is_fenceStart:
                if isinstance(state, InsideBlock):
                    self.block_discard(state)
                state = self.block_enter(event)
            elif event.is_fenceEnd and isinstance(state, InsideBlock):
                html = self.block_exit(state)
                state = OutsideBlock()
                if html is not None:
                    yield html
            elif event.kind is EventKind.TEXT and isinstance(state, InsideBlock):
                state.lines.append(event.text)
            else:
                yield event

    def block_enter(self, event: Event) -> InsideBlock:
        LOG(f"Code block: language '{event.info}'", level=3)
        return InsideBlock(language=event.info)

    def block_discard(self, block: InsideBlock) -> None:
        """Abandon an unfinished block when another fence starts inside it"""
        LOG(
            f"Discarding unterminated code block (language '{block.language}', "
            f"{len(block.lines)} lines): fenced blocks do not nest",
            level=1,
        )
        self.blocks_dropped += 1

    def block_exit(self, block: InsideBlock) -> Optional[Event]:
        """
        Render a finished block.

        An empty block produces no event at all, so it disappears from the
        output rather than rendering as an empty <pre><code></code></pre>.

        Args:
            block: The completed block state

        Returns:
            A single HTML event, or None for an empty block
        """
        text = block.text_get()
        if not text:
            LOG(f"Dropping empty code block (language '{block.language}')", level=2)
            self.blocks_dropped += 1
            return None

        lexer = self.syntaxes.syntax_find(block.language)
        LOG(f"Highlighting '{block.language}' block with {lexer.name}", level=2)
        self.blocks_rendered += 1
        return Event(EventKind.HTML, text=self.highlighter.codeBlock_render(lexer, text))
