"""
Custom Pygments lexer for ekan notes

Provides syntax highlighting for markdown notes that embed i::[kind(value)]
directives, used when a note shows another note's source in an ```ekan
fence.

Token types:
- Punctuation: i::[ ( )] around a directive
- Keyword.Type: Directive kind (text, password, ...)
- String: Directive value
- Generic.Heading: ATX headings
- Generic.Strong / Generic.Emph: emphasis runs
- String.Backtick: inline code
"""

from pygments.lexer import RegexLexer, bygroups
from pygments.token import (
    Text,
    Punctuation,
    Keyword,
    String,
    Generic,
)


class EkanLexer(RegexLexer):
    """
    Lexer for markdown with ekan input directives

    Example:
        Wifi: i::[password(hunter2)]

    Tokens:
        i::[ → Punctuation
        password → Keyword.Type
        ( → Punctuation
        hunter2 → String
        )] → Punctuation
    """

    name = 'Ekan'
    aliases = ['ekan']
    filenames = ['*.ekan']

    tokens = {
        'root': [
            # Input directives
            (r'(i::\[)(\w+)(\()(.+?)(\)\])',
             bygroups(Punctuation, Keyword.Type, Punctuation, String, Punctuation)),

            # Fence markers
            (r'^(```|~~~).*\n', String.Backtick),

            # ATX headings
            (r'^#{1,6}[ \t].*\n', Generic.Heading),

            # Inline code
            (r'`[^`\n]+`', String.Backtick),

            # Strong before emphasis so ** is not read as two *
            (r'(\*\*|__)(?=\S)(.+?)(?<=\S)\1', Generic.Strong),
            (r'(\*|_)(?=\S)(.+?)(?<=\S)\1', Generic.Emph),

            # Everything else is text
            (r'[^i`*_#~\n]+', Text),
            (r'\n', Text),
            (r'.', Text),
        ],
    }
