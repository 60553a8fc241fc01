"""
Models package for ekan

Contains data structures and type definitions for the rendering pipeline.
"""

from .state import ProgramState, pipeline
from .events import EventKind, MarkdownEvent, DirectiveMatch
from .widgets import WidgetSpec, WidgetCategory

__all__ = [
    "ProgramState",
    "pipeline",
    "EventKind",
    "MarkdownEvent",
    "DirectiveMatch",
    "WidgetSpec",
    "WidgetCategory",
]
