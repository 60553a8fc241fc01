"""
Basic transformer tests - plain markdown passthrough

Notes without directives must render exactly as markdown-it renders them.
"""

import pytest

from ekan.lib.transformer import MarkupTransformer, render
from ekan.lib.events import parser_create
from ekan.config import AppSettings


class TestPassthrough:
    """Test that markdown without directives is untouched"""

    def test_empty_source(self):
        """Empty note renders to empty string"""
        assert render("") == ""

    def test_whitespace_only(self):
        """Only whitespace renders to empty string"""
        assert render("   \n\n  \t  ") == ""

    def test_strong_in_paragraph(self):
        """Inline formatting inside a paragraph"""
        assert render("Hello **world**") == "<p>Hello <strong>world</strong></p>\n"

    def test_plain_paragraph(self):
        """Single paragraph of text"""
        assert render("Just a note") == "<p>Just a note</p>\n"

    def test_text_is_escaped(self):
        """Special HTML characters in text are escaped"""
        assert render("a < b & c > d") == "<p>a &lt; b &amp; c &gt; d</p>\n"

    @pytest.mark.parametrize("source", [
        "# Heading\n\nSome *emphasis* and `code`.",
        "- one\n- two\n- three",
        "1. first\n\n2. second",
        "> quoted **text**\n> over lines",
        "```python\nprint('hi')\n```",
        "    indented code",
        "[link](https://example.com \"title\") and ![alt *text*](img.png)",
        "line one  \nline two\nline three",
        "~~struck~~ and __strong__",
        "<div class=\"raw\">html</div>\n\ninline <b>html</b>",
        "AT&amp;T &copy; &#35;",
        "***\n\nsetext\n===",
        "- [ ] not a task\n  - nested *item*",
        "i::[text(x) broken",
    ])
    def test_matches_markdown_it(self, source):
        """Output equals a plain markdown-it render of the same note"""
        assert render(source) == parser_create().render(source)


class TestStrikethrough:
    """Test strikethrough configuration"""

    def test_strikethrough_enabled_by_default(self):
        """~~text~~ renders as <s>"""
        assert render("~~gone~~") == "<p><s>gone</s></p>\n"

    def test_strikethrough_disabled(self):
        """Strikethrough can be switched off"""
        transformer = MarkupTransformer(settings=AppSettings(strikethrough=False))
        assert transformer.render("~~gone~~") == "<p>~~gone~~</p>\n"


class TestRawHtml:
    """Test raw HTML handling"""

    def test_html_passed_through(self):
        """Inline HTML is kept by default"""
        assert render("a <b>bold</b> move") == "<p>a <b>bold</b> move</p>\n"

    def test_html_escaped_when_disabled(self):
        """Inline HTML is escaped when allow_html is off"""
        transformer = MarkupTransformer(settings=AppSettings(allow_html=False))
        assert transformer.render("<b>x</b>") == "<p>&lt;b&gt;x&lt;/b&gt;</p>\n"


class TestStatelessness:
    """Test that render calls share no state"""

    def test_reused_transformer(self):
        """One transformer gives identical results across calls"""
        transformer = MarkupTransformer()
        first = transformer.render("i::[password(abc)]")
        transformer.render("Some other *note*")
        assert transformer.render("i::[password(abc)]") == first

    def test_concurrent_renders(self):
        """Concurrent renders match sequential ones"""
        from concurrent.futures import ThreadPoolExecutor

        sources = [f"Note {i}\n\ni::[password(pw{i})]\n\n**end {i}**" for i in range(32)]
        expected = [render(source) for source in sources]

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(render, sources))

        assert results == expected
