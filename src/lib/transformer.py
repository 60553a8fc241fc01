"""
Transformer for ekan markdown notes

Renders a markdown note to an HTML fragment, replacing i::[kind(value)]
directives with input widgets.

The transformer works in two phases:
1. Events: markdown-it parses the note and events_stream() flattens it
2. Flush: text events are accumulated and, whenever a non-text event or
   the end of a paragraph arrives, the pending text is scanned for a
   directive and emitted either as a widget or as escaped text

Key behaviours:
- Only the first directive in a flushed run of text is used
- A matched directive replaces the whole run; surrounding text is dropped
- Code spans and code blocks are never text events, so never scanned
- Without directives the output equals MarkdownIt.render() of the note

Example:
    >>> render("Hello **world**")
    '<p>Hello <strong>world</strong></p>\\n'
    >>> 'type="password"' in render("i::[password(hunter2)]")
    True
"""

import re
from typing import Any, Dict, List, Optional

from markdown_it.common.utils import escapeHtml

from ..config import AppSettings
from ..models.events import DirectiveMatch, EventKind
from .events import events_stream, event_render, parser_create
from .log import LOG
from .widgets import WidgetRegistry

DIRECTIVE_PATTERN = re.compile(r'i::\[(\w+)\((.+?)\)\]')


class MarkupTransformer:
    """
    Renders markdown notes with embedded input directives

    A transformer holds only configuration (parser, widget registry);
    every render() call owns its own accumulator and event stream.
    """

    def __init__(
        self,
        settings: Optional[AppSettings] = None,
        widgets: Optional[WidgetRegistry] = None
    ) -> None:
        """
        Initialize transformer

        Args:
            settings: Parser settings, defaults to the appsettings singleton
            widgets: Widget registry, defaults to the built-in widgets
        """
        self.md = parser_create(settings)
        self.widgets = widgets or WidgetRegistry()

    def directive_find(self, text: str) -> Optional[DirectiveMatch]:
        """
        Find the first i::[kind(value)] directive in text

        The value is matched lazily, so it ends at the first ")]".

        Args:
            text: Accumulated text to scan

        Returns:
            DirectiveMatch, or None if text holds no directive
        """
        match = DIRECTIVE_PATTERN.search(text)
        if not match:
            return None
        return DirectiveMatch(kind=match.group(1), value=match.group(2), position=match.start())

    def text_flush(self, pending: List[str]) -> str:
        """
        Flush accumulated text to HTML and clear the accumulator

        Args:
            pending: Accumulated text runs, emptied in place

        Returns:
            Widget HTML if the text holds a directive, escaped text otherwise
        """
        text = ''.join(pending)
        pending.clear()

        directive = self.directive_find(text)
        if directive is None:
            return escapeHtml(text)

        LOG(f"Directive matched: kind={directive.kind} at offset {directive.position}", level=3)
        return self.widgets.get(directive.kind)(directive.kind, directive.value)

    def render(self, markdown: str) -> str:
        """
        Render a markdown note to HTML

        Args:
            markdown: Complete markdown source of a note

        Returns:
            HTML fragment
        """
        env: Dict[str, Any] = {}
        tokens = self.md.parse(markdown, env)

        html_parts: List[str] = []
        pending: List[str] = []
        event_count = 0

        for event in events_stream(tokens):
            event_count += 1

            if event.kind is EventKind.TEXT:
                pending.append(event.token.content)
            elif event.kind is EventKind.PARAGRAPH_START:
                html_parts.append(event_render(self.md, event, env))
            elif event.kind is EventKind.PARAGRAPH_END:
                html_parts.append(self.text_flush(pending))
                html_parts.append(event_render(self.md, event, env))
            else:
                if pending:
                    html_parts.append(self.text_flush(pending))
                html_parts.append(event_render(self.md, event, env))

        # Text left over when the stream ends outside a paragraph
        if pending:
            html_parts.append(self.text_flush(pending))

        LOG(f"Rendered {event_count} events from {len(markdown)} characters", level=2)
        return ''.join(html_parts)


def render(markdown: str) -> str:
    """
    Render a markdown note with the default settings and widgets

    Builds a fresh transformer per call, so calls share no state.

    Args:
        markdown: Complete markdown source of a note

    Returns:
        HTML fragment
    """
    return MarkupTransformer().render(markdown)
