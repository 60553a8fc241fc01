"""
Transformer-specific data models

Type-safe structures for the markdown event stream and directive matches.
"""

from enum import Enum
from dataclasses import dataclass
from typing import Sequence

from markdown_it.token import Token


class EventKind(Enum):
    """
    Kinds of events the transformer distinguishes

    Everything that is neither text nor a paragraph boundary is OTHER and
    is rendered with the standard markdown rule for its token.
    """
    TEXT = "text"
    PARAGRAPH_START = "paragraph_start"
    PARAGRAPH_END = "paragraph_end"
    OTHER = "other"


@dataclass(frozen=True)
class MarkdownEvent:
    """
    One unit of the flattened markdown token stream

    Block tokens and the children of inline tokens are both surfaced as
    events. The sibling list and index are kept so the renderer rule for
    the token sees the same context it would during a normal render.

    Attributes:
        kind: Event classification
        tokens: The list the token lives in (block list or inline children)
        index: Position of the token within tokens

    Example:
        For "Hello **world**" the stream is
        PARAGRAPH_START, TEXT("Hello "), OTHER(strong_open), TEXT("world"),
        OTHER(strong_close), PARAGRAPH_END
    """
    kind: EventKind
    tokens: Sequence[Token]
    index: int

    @property
    def token(self) -> Token:
        return self.tokens[self.index]


@dataclass
class DirectiveMatch:
    """
    Result of finding an i::[kind(value)] directive in accumulated text

    Attributes:
        kind: Input kind (e.g., "text", "password", "number")
        value: Literal content to display and, for copyable kinds, to copy
        position: Character offset of the directive within the searched text

    Example:
        For text "i::[password(hunter2)]":
        DirectiveMatch(kind="password", value="hunter2", position=0)
    """
    kind: str
    value: str
    position: int
