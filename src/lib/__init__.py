"""
ekan - Markdown notes with copyable credential widgets

Renders markdown notes to HTML, turning i::[kind(value)] directives into
input widgets with one-click clipboard copy.
"""

__version__ = "1.0.0"

from .transformer import MarkupTransformer, render
from .widgets import WidgetRegistry, widget_render
from .commands import CommandError, command_invoke, process_markdown
from .log import LOG, state_connectToLogger

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
