"""
ekan - Markdown notes with copyable credential widgets

Renders markdown notes to HTML, turning i::[kind(value)] directives into
input widgets with one-click clipboard copy.
"""

__version__ = "1.0.0"

from .lib import (
    MarkupTransformer,
    render,
    WidgetRegistry,
    widget_render,
    CommandError,
    command_invoke,
    process_markdown,
    LOG,
    state_connectToLogger,
)

__all__ = [
    "MarkupTransformer",
    "render",
    "WidgetRegistry",
    "widget_render",
    "CommandError",
    "command_invoke",
    "process_markdown",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
