"""
Event model for the markdown pipeline

The markdown parser's token list is adapted into a flat sequence of Events
so the code-block interceptor can rewrite fenced blocks as a small state
machine before the sequence is serialised back to HTML.
"""

from enum import Enum
from dataclasses import dataclass, field
from typing import Any, List, Optional


FENCE = "fence"


class EventKind(Enum):
    """Structural event categories"""
    START = "start"
    END = "end"
    TEXT = "text"
    HTML = "html"
    OTHER = "other"


@dataclass(frozen=True)
class Event:
    """
    One structural event of a parsed markdown document

    Attributes:
        kind: Event category
        tag: Block tag for START/END events ("fence" for fenced code)
        info: Fence language token on a fenced START ("" when undeclared)
        text: Literal text (TEXT) or pre-rendered markup (HTML)
        token: Originating markdown-it token, when there is one

    Example:
        The fence "```python\\nprint(1)\\n```" becomes:
            Event(START, tag="fence", info="python")
            Event(TEXT, text="print(1)\\n")
            Event(END, tag="fence")
    """
    kind: EventKind
    tag: str = ""
    info: str = ""
    text: str = ""
    token: Optional[Any] = field(default=None, compare=False, repr=False)

    @property
    def is_fenceStart(self) -> bool:
        return self.kind is EventKind.START and self.tag == FENCE

    @property
    def is_fenceEnd(self) -> bool:
        return self.kind is EventKind.END and self.tag == FENCE


@dataclass
class OutsideBlock:
    """Interceptor state: not inside a fenced code block"""


@dataclass
class InsideBlock:
    """
    Interceptor state: inside a fenced code block

    Attributes:
        language: Declared fence language token ("" when undeclared)
        lines: Text accumulated since the block started, in source order
    """
    language: str
    lines: List[str] = field(default_factory=list)

    def text_get(self) -> str:
        return "".join(self.lines)
