"""
End-to-end rendering tests

Tests the full pipeline: markdown note on disk → env_check → source_read
→ html_render → results_report → HTML file on disk.
"""

from argparse import Namespace
from pathlib import Path

import pytest

from ekan.__main__ import env_check, source_read, html_render, results_report
from ekan.lib.transformer import render
from ekan.models import ProgramState, pipeline


NOTE = """# Staging server

Host:

i::[text(staging.internal)]

Root password:

i::[password(hunter2)]

Port: i::[number(2222)]

```
i::[password(not-a-widget)]
```
"""


def state_make(inputdir: Path, outputdir: Path, **overrides) -> ProgramState:
    options = {"inputFile": "note.md", "verbosity": 0}
    options.update(overrides)
    return ProgramState(inputdir=inputdir, outputdir=outputdir, **options)


class TestPipeline:
    """Test the complete CLI pipeline"""

    def test_render_note(self, tmp_path):
        """A note is rendered to <name>.html in the output directory"""
        (tmp_path / "note.md").write_text(NOTE, encoding="utf-8")
        outputdir = tmp_path / "out"

        final = pipeline(
            state_make(tmp_path, outputdir),
            env_check,
            source_read,
            html_render,
            results_report,
        )

        output_file = outputdir / "note.html"
        assert final.envOK is True
        assert final.renderResult["status"] is True
        assert final.renderResult["output_file"] == str(output_file)
        assert final.renderResult["widget_count"] == 3

        html = output_file.read_text(encoding="utf-8")
        assert html == render(NOTE)
        assert html.count("<button") == 2
        assert "i::[password(not-a-widget)]" in html

    def test_explicit_output_file(self, tmp_path):
        """--outputFile names the output, nested dirs are created"""
        (tmp_path / "note.md").write_text("Hello", encoding="utf-8")

        final = pipeline(
            state_make(tmp_path, tmp_path / "out", outputFile="site/vault.html"),
            env_check,
            source_read,
            html_render,
        )

        assert (tmp_path / "out" / "site" / "vault.html").read_text() == "<p>Hello</p>\n"
        assert final.renderResult["widget_count"] == 0

    def test_highlight_flag(self, tmp_path):
        """--highlight turns on Pygments for fences"""
        (tmp_path / "note.md").write_text("```python\nx = 1\n```\n", encoding="utf-8")

        final = pipeline(
            state_make(tmp_path, tmp_path, highlight=True),
            env_check,
            source_read,
            html_render,
        )

        assert "<span" in Path(final.renderResult["output_file"]).read_text()

    def test_stages_do_not_mutate_input(self, tmp_path):
        """Each stage returns a new state"""
        (tmp_path / "note.md").write_text("x", encoding="utf-8")
        initial = state_make(tmp_path, tmp_path)

        checked = env_check(initial)

        assert checked is not initial
        assert initial.envOK is False
        assert checked.envOK is True


class TestErrors:
    """Test pipeline failure exits"""

    def test_missing_input(self, tmp_path):
        """Missing note exits with status 1"""
        with pytest.raises(SystemExit) as excinfo:
            env_check(state_make(tmp_path, tmp_path / "out"))
        assert excinfo.value.code == 1

    def test_undecodable_input(self, tmp_path):
        """Non UTF-8 note exits with status 1"""
        (tmp_path / "note.md").write_bytes(b"\xff\xfe\xfa")
        state = env_check(state_make(tmp_path, tmp_path))

        with pytest.raises(SystemExit) as excinfo:
            source_read(state)
        assert excinfo.value.code == 1

    def test_render_without_source(self, tmp_path):
        """Rendering before reading exits with status 1"""
        with pytest.raises(SystemExit):
            html_render(state_make(tmp_path, tmp_path))

    def test_report_without_result(self, tmp_path):
        """Reporting without a result exits with status 1"""
        with pytest.raises(SystemExit):
            results_report(state_make(tmp_path, tmp_path))


class TestStateFromNamespace:
    """Test ProgramState construction from CLI options"""

    def test_unknown_options_dropped(self, tmp_path):
        """Only ProgramState fields are taken from the namespace"""
        options = Namespace(inputFile="n.md", verbosity=2, highlight=True, json=False)
        state = ProgramState.state_createFromNamespace(options, tmp_path, tmp_path / "o")

        assert state.inputFile == "n.md"
        assert state.verbosity == 2
        assert state.highlight is True
        assert state.inputdir == tmp_path
        assert state.outputdir == tmp_path / "o"
