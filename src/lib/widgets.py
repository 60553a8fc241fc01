"""
Widget implementations for ekan directives

Each widget turns an i::[kind(value)] directive into an HTML fragment.
Uses WidgetSpec for metadata and lookup.

Copyable widgets (text, password) carry an inline onclick handler that
writes the value to the clipboard, swaps the button icon to a check mark
and reverts it after ICON_REVERT_MS. Every other kind renders a plain
disabled input.
"""

from typing import Callable, Dict, List, Optional

from markdown_it.common.utils import escapeHtml

from ..models.widgets import WidgetSpec, WidgetCategory
from .icons import ICON_CHECK, ICON_LIST

ICON_REVERT_MS = 3000


def jsString_escape(raw: str) -> str:
    """Escape text for use inside a single-quoted JavaScript string"""
    return raw.replace('\\', '\\\\').replace("'", "\\'")


def attribute_escape(raw: str) -> str:
    """
    Escape text for use inside a double-quoted HTML attribute

    Only & and " are touched, so markup embedded in the handler (the
    icons) survives literally and is decoded back unchanged by the browser.
    """
    return raw.replace('&', '&amp;').replace('"', '&quot;')


def copyHandler_build(value: str) -> str:
    """
    Build the onclick script for a copy button

    Args:
        value: Literal value written to the clipboard

    Returns:
        Script text, not yet escaped for the surrounding attribute
    """
    return (
        f"navigator.clipboard.writeText('{jsString_escape(value)}');"
        f"this.innerHTML = '{jsString_escape(ICON_CHECK)}';"
        f"setTimeout(() => {{ this.innerHTML = '{jsString_escape(ICON_LIST)}'; }}, {ICON_REVERT_MS});"
    )


def copyable_handler(kind: str, value: str) -> str:
    """Handle text/password - disabled input plus clipboard copy button"""
    safe_value = escapeHtml(value)
    onclick = attribute_escape(copyHandler_build(value))
    return (
        f'<div class="flex flex-row custom-input">'
        f'<input type="{kind}" class="text-xs w-full bg-slate-700 rounded-l py-1" value="{safe_value}" disabled />'
        f'<button class="p-1 border border-slate-500 bg-slate-600 border-l-0 rounded-r hover:bg-slate-700" '
        f'data-value="{safe_value}" onclick="{onclick}">{ICON_LIST}</button>'
        f'</div>'
    )


def plain_handler(kind: str, value: str) -> str:
    """Handle any other kind - disabled input, no copy affordance"""
    return (
        f'<div class="flex flex-row custom-input">'
        f'<input type="{kind}" class="text-xs w-full bg-slate-700 rounded py-1" value="{escapeHtml(value)}" disabled />'
        f'</div>'
    )


class WidgetRegistry:
    """
    Registry of widget specifications and handlers

    Maps directive kinds to WidgetSpec objects. Kinds that are not
    registered fall back to the plain input handler.
    """

    def __init__(self) -> None:
        """Initialize the registry and register the built-in copyable widgets"""
        self.specs: Dict[str, WidgetSpec] = {}
        self.fallback: Callable[[str, str], str] = plain_handler
        self.copyableWidgets_register()

    def register(self, spec: WidgetSpec) -> None:
        """Register a widget specification"""
        self.specs[spec.name] = spec
        for alias in spec.aliases:
            self.specs[alias] = spec

    def get(self, kind: str) -> Callable[[str, str], str]:
        """
        Get widget handler for a directive kind

        Args:
            kind: Directive kind to look up

        Returns:
            Registered handler, or the plain input fallback
        """
        spec = self.spec_get(kind)
        return spec.handler if spec else self.fallback

    def spec_get(self, kind: str) -> Optional[WidgetSpec]:
        """Get full widget specification by kind"""
        return self.specs.get(kind)

    def widgets_listByCategory(self, category: WidgetCategory) -> List[WidgetSpec]:
        """Get all distinct widgets in a category"""
        seen: List[WidgetSpec] = []
        for spec in self.specs.values():
            if spec.category == category and spec not in seen:
                seen.append(spec)
        return seen

    def copyableWidgets_register(self) -> None:
        """Register the text and password copy widgets"""
        copyable_specs = [
            ('text', 'Visible value with a copy button', ['i::[text(api.example.com)]']),
            ('password', 'Masked value with a copy button', ['i::[password(hunter2)]']),
        ]

        for name, desc, examples in copyable_specs:
            self.register(WidgetSpec(
                name=name,
                category=WidgetCategory.COPYABLE,
                description=desc,
                handler=copyable_handler,
                examples=examples
            ))


_registry = WidgetRegistry()


def widget_render(kind: str, value: str) -> str:
    """
    Render the widget for a directive

    Never fails: unknown kinds use the plain input and empty values
    render as an empty input.

    Example:
        >>> 'type="number"' in widget_render('number', '42')
        True
    """
    return _registry.get(kind)(kind, value)
