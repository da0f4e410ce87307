"""
Markdown to HTML converter

Bridges markdown-it-py and the code-block interceptor:

    source --MarkdownIt.parse--> tokens --events_parse--> events
           --CodeBlockInterceptor--> events --events_render--> HTML

The parser is CommonMark plus strikethrough, tables and smart punctuation
(each switchable through AppSettings).
"""

from typing import Any, Dict, Iterable, Iterator, List, Optional

from markdown_it import MarkdownIt
from markdown_it.token import Token

from ..config import appsettings, AppSettings
from ..models import Event, EventKind, FENCE
from .catalog import SyntaxCatalog
from .highlighter import Highlighter
from .interceptor import CodeBlockInterceptor
from .log import LOG


def markdown_make(settings: Optional[AppSettings] = None) -> MarkdownIt:
    """
    Build the markdown-it parser used for conversion.

    Args:
        settings: Feature switches (defaults to the appsettings singleton)

    Returns:
        Configured MarkdownIt instance
    """
    settings = settings or appsettings
    md = MarkdownIt(
        "commonmark",
        {"html": settings.html_passthrough, "typographer": settings.enable_smart_punctuation},
    )
    rules = settings.markdownRules_get()
    if rules:
        md.enable(rules)
    return md


def fenceLanguage_extract(info: str) -> str:
    """
    Return the language token from a fence info string.

    Only the first word counts: "python {.numberLines}" -> "python".
    """
    words = info.strip().split(maxsplit=1)
    return words[0] if words else ""


def events_parse(md: MarkdownIt, source: str) -> Iterator[Event]:
    """
    Parse markdown into an event sequence.

    Fenced code blocks expand to START, one TEXT per line, END. Raw HTML
    blocks become HTML events. Every other token is wrapped as OTHER.

    Args:
        md: Configured parser
        source: Markdown document text

    Yields:
        Events in document order
    """
    env: Dict[str, Any] = {}
    for token in md.parse(source, env):
        if token.type == FENCE:
            yield Event(
                EventKind.START, tag=FENCE, info=fenceLanguage_extract(token.info), token=token
            )
            for line in token.content.splitlines(keepends=True):
                yield Event(EventKind.TEXT, text=line)
            yield Event(EventKind.END, tag=FENCE, token=token)
        elif token.type == "html_block":
            yield Event(EventKind.HTML, text=token.content, token=token)
        elif token.type == "text":
            yield Event(EventKind.TEXT, text=token.content, token=token)
        else:
            yield Event(EventKind.OTHER, token=token)


def events_toTokens(events: Iterable[Event]) -> List[Token]:
    """
    Turn an event sequence back into markdown-it tokens.

    A fenced block that was not intercepted is restored from its original
    token; its TEXT and END events are then skipped.
    """
    tokens: List[Token] = []
    in_fence = False
    for event in events:
        if in_fence:
            if event.is_fenceEnd:
                in_fence = False
            continue
        if event.is_fenceStart:
            tokens.append(event.token)
            in_fence = True
        elif event.kind is EventKind.HTML:
            html = event.text if event.text.endswith("\n") else event.text + "\n"
            tokens.append(Token("html_block", "", 0, content=html, block=True))
        elif event.kind is EventKind.TEXT:
            tokens.append(event.token or Token("text", "", 0, content=event.text))
        else:
            tokens.append(event.token)
    return tokens


def events_render(md: MarkdownIt, events: Iterable[Event]) -> str:
    """Serialise an event sequence to an HTML string"""
    return md.renderer.render(events_toTokens(events), md.options, {})


class Converter:
    """
    Converts markdown documents to HTML with highlighted code blocks.

    Args:
        syntaxes: Catalog used to resolve fence language tokens
        highlighter: Code renderer (defaults to one using the configured prefix)
        settings: Parser feature switches and class prefix
    """

    def __init__(
        self,
        syntaxes: SyntaxCatalog,
        highlighter: Optional[Highlighter] = None,
        settings: Optional[AppSettings] = None,
    ) -> None:
        settings = settings or appsettings
        self.syntaxes = syntaxes
        self.highlighter = highlighter or Highlighter(class_prefix=settings.class_prefix)
        self.md = markdown_make(settings)

    def convert(self, source: str, highlight: bool = True) -> str:
        """
        Convert a markdown document to an HTML fragment.

        Args:
            source: Markdown text
            highlight: Intercept fenced code blocks (False renders them
                       with markdown-it's default fence renderer)

        Returns:
            HTML fragment
        """
        events: Iterable[Event] = events_parse(self.md, source)
        if highlight:
            interceptor = CodeBlockInterceptor(self.syntaxes, self.highlighter)
            html = events_render(self.md, interceptor.events_rewrite(events))
            LOG(
                f"Highlighted {interceptor.blocks_rendered} code blocks, "
                f"dropped {interceptor.blocks_dropped} empty",
                level=2,
            )
            return html
        return events_render(self.md, events)
