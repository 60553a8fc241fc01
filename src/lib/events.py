"""
Markdown event producer

Parses markdown with markdown-it-py and flattens the token tree into an
ordered stream of MarkdownEvents. Inline tokens are replaced by their
children, so emphasis, links and text runs inside a paragraph appear as
individual events between PARAGRAPH_START and PARAGRAPH_END.

The producer knows nothing about directives. Rendering every event of a
stream with the standard renderer rules reproduces MarkdownIt.render()
exactly; directive handling lives entirely in the transformer.

Example:
    >>> md = parser_create()
    >>> [e.kind.value for e in events_stream(md.parse("Hi *there*"))]
    ['paragraph_start', 'text', 'other', 'text', 'other', 'paragraph_end']
"""

from typing import Any, Dict, Iterator, Optional, Sequence

from markdown_it import MarkdownIt
from markdown_it.token import Token

from ..config import appsettings, AppSettings
from ..models.events import EventKind, MarkdownEvent
from .highlight import code_highlight

EVENT_KINDS: Dict[str, EventKind] = {
    'text': EventKind.TEXT,
    'paragraph_open': EventKind.PARAGRAPH_START,
    'paragraph_close': EventKind.PARAGRAPH_END,
}


def parser_create(settings: Optional[AppSettings] = None) -> MarkdownIt:
    """
    Build the markdown-it parser used for notes

    CommonMark preset, with strikethrough and code highlighting switched
    on or off by settings.

    Args:
        settings: Settings to read, defaults to the appsettings singleton

    Returns:
        Configured MarkdownIt instance
    """
    if settings is None:
        settings = appsettings

    options: Dict[str, Any] = {"html": settings.allow_html}
    if settings.highlight_code:
        style = settings.pygments_style
        options["highlight"] = lambda code, lang, attrs: code_highlight(code, lang, style)

    md = MarkdownIt("commonmark", options)
    if settings.strikethrough:
        md.enable("strikethrough")
    return md


def event_classify(token: Token) -> EventKind:
    """Map a markdown-it token type to the event kind the transformer cares about"""
    return EVENT_KINDS.get(token.type, EventKind.OTHER)


def events_stream(tokens: Sequence[Token]) -> Iterator[MarkdownEvent]:
    """
    Yield events for a token list in document order

    Args:
        tokens: Block-level tokens from MarkdownIt.parse()

    Yields:
        MarkdownEvent for every block token and every inline child
    """
    for index, token in enumerate(tokens):
        if token.type == 'inline':
            if token.children:
                yield from events_stream(token.children)
            continue
        yield MarkdownEvent(kind=event_classify(token), tokens=tokens, index=index)


def event_render(md: MarkdownIt, event: MarkdownEvent, env: Dict[str, Any]) -> str:
    """
    Render a single event with the standard markdown-it rule for its token

    The rule receives the event's sibling list and index, so context
    dependent output (newlines after block tags, hidden tight-list
    paragraphs) matches a full render.
    """
    renderer = md.renderer
    rule = renderer.rules.get(event.token.type)
    if rule is not None:
        return rule(event.tokens, event.index, md.options, env)
    return renderer.renderToken(event.tokens, event.index, md.options, env)
