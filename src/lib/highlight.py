"""
Pygments highlighting for fenced code blocks

Plugged into markdown-it's `highlight` option when highlight_code is on.
Output uses inline styles (noclasses) so rendered notes need no stylesheet,
and no wrapper (nowrap) since markdown-it already emits <pre><code>.
"""

from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexer import Lexer
from pygments.lexers import get_lexer_by_name, TextLexer
from pygments.util import ClassNotFound

from .lexer import EkanLexer


def lexer_get(language: str) -> Lexer:
    """
    Resolve a fence info language to a Pygments lexer

    Args:
        language: Language name from the fence info string, may be empty

    Returns:
        Matching lexer, EkanLexer for 'ekan', TextLexer when unknown
    """
    if not language:
        return TextLexer()
    if language.lower() in EkanLexer.aliases:
        return EkanLexer()
    try:
        return get_lexer_by_name(language)
    except ClassNotFound:
        return TextLexer()


def code_highlight(code: str, language: str, style: str = "monokai") -> str:
    """
    Highlight a code block body

    Args:
        code: Raw code from the fence
        language: Fence language name
        style: Pygments style name

    Returns:
        HTML spans with inline styles
    """
    formatter = HtmlFormatter(style=style, noclasses=True, nowrap=True)
    return highlight(code, lexer_get(language), formatter)
