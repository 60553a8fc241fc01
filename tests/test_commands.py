"""
Host command tests - dispatch and argument validation
"""

import pytest

from ekan.lib.commands import COMMANDS, CommandError, command_invoke, process_markdown
from ekan.lib.transformer import render


class TestProcessMarkdown:
    """Test the process_markdown command"""

    def test_direct_call(self):
        """Direct call renders markdown"""
        assert process_markdown("Hello **world**") == "<p>Hello <strong>world</strong></p>\n"

    def test_invoke(self):
        """Dispatch by name with an args dict"""
        assert command_invoke("process_markdown", {"md": "Hello"}) == "<p>Hello</p>\n"

    def test_invoke_with_directive(self):
        """Dispatch returns the same as render()"""
        source = "i::[password(pw)]"
        assert command_invoke("process_markdown", {"md": source}) == render(source)

    def test_empty_markdown(self):
        """Empty string is valid input"""
        assert command_invoke("process_markdown", {"md": ""}) == ""

    def test_extra_arguments_ignored(self):
        """Unknown arguments are not passed to the handler"""
        assert command_invoke("process_markdown", {"md": "x", "extra": 1}) == "<p>x</p>\n"

    def test_registered(self):
        """process_markdown is in the command table"""
        assert COMMANDS["process_markdown"].required == ["md"]


class TestCommandErrors:
    """Test invocation errors"""

    def test_unknown_command(self):
        """Unknown names raise CommandError"""
        with pytest.raises(CommandError, match="Unknown command: save_page"):
            command_invoke("save_page", {})

    def test_missing_argument(self):
        """Missing required argument raises CommandError"""
        with pytest.raises(CommandError, match="missing required argument 'md'"):
            command_invoke("process_markdown", {})

    def test_non_string_argument(self):
        """Non-string argument raises CommandError"""
        with pytest.raises(CommandError, match="must be a string, got int"):
            command_invoke("process_markdown", {"md": 42})
