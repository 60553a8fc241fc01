"""
Widget specification and metadata models

Defines the structure and categories of the widgets a directive can render
to, for registry management and documentation.
"""

from enum import Enum
from dataclasses import dataclass, field
from typing import Callable, List


class WidgetCategory(Enum):
    """
    Categories of rendered widgets
    """
    COPYABLE = "copyable"    # text, password: input plus copy button
    PLAIN = "plain"          # any other kind: disabled input only


@dataclass
class WidgetSpec:
    """
    Specification for a directive widget

    Attributes:
        name: Directive kind handled (e.g., "password")
        category: Category for organization
        description: Human-readable description
        handler: Rendering function (kind, value) -> str
        examples: Example usage strings
        aliases: Alternative kinds rendered by the same handler
    """
    name: str
    category: WidgetCategory
    description: str
    handler: Callable[[str, str], str]
    examples: List[str] = field(default_factory=list)
    aliases: List[str] = field(default_factory=list)
