#!/usr/bin/env python3
"""
ekan - Markdown notes with copyable credential widgets

Renders a markdown note to HTML from the command line, using the same
transformer the desktop application calls for every markdown block.

As an aside, this codebase leverages the ChRIS "plugin" concept/pattern as
general purpose python app development framework.

Directive syntax:
    i::[password(hunter2)]   masked input with a copy button
    i::[text(db.internal)]   visible input with a copy button
    i::[number(8080)]        any other kind: disabled input, no button

Usage:
    ekan inputdir/ outputdir/ --inputFile note.md

Examples:
    # Basic rendering, writes outputdir/note.html
    ekan . output/ --inputFile note.md

    # Explicit output name and highlighted code blocks
    ekan . output/ --inputFile note.md --outputFile vault.html --highlight

    # Verbose output
    ekan . output/ --inputFile note.md -vv
"""

import sys
from pathlib import Path
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter

from chris_plugin import chris_plugin
from .config import appsettings
from .lib import MarkupTransformer, __version__, LOG, state_connectToLogger
from .models import ProgramState, pipeline


DISPLAY_TITLE = r"""
        _
   ___ | | __ __ _  _ __
  / _ \| |/ // _` || '_ \
 |  __/|   <| (_| || | | |
  \___||_|\_\\__,_||_| |_|

  Markdown notes with copyable credentials
"""

# Define CLI arguments
parser = ArgumentParser(
    description="ekan - render markdown notes with copyable credential widgets",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "--inputFile", required=True, type=str, help="Input markdown file (relative to inputdir)"
)

parser.add_argument(
    "--outputFile",
    default=None,
    type=str,
    help="Output HTML file (relative to outputdir). Defaults to the input name with EKAN_OUTPUT_SUFFIX",
)

parser.add_argument(
    "--highlight",
    action="store_true",
    default=False,
    help="Syntax-highlight fenced code blocks with Pygments",
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=1,
    help="Increase output verbosity (can be repeated: -v, -vv, -vvv)",
)

parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")


def env_check(inputstate: ProgramState) -> ProgramState:
    """
    Validate environment and resolve all file paths.

    Args:
        inputstate: Initial program state with CLI options

    Returns:
        ProgramState with added fields:
            - inputSourceFile: Resolved path to the markdown note
            - htmlOutputFile: Resolved path of the HTML to write
            - envOK: True if environment is valid

    Exits:
        1 if the input file is not found
    """

    state = inputstate.copy()

    if state.verbosity >= 2:
        LOG(DISPLAY_TITLE, level=2)

    LOG("Checking environment...", level=2)

    input_file = state.inputdir / state.inputFile

    if not input_file.is_file():
        print(f"Error: Input file not found: {input_file}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)

    state.inputSourceFile = input_file
    LOG(f"Input file: {input_file}", level=2)

    output_name = state.outputFile or appsettings.outputName_make(input_file.name)
    state.htmlOutputFile = state.outputdir / output_name
    state.htmlOutputFile.parent.mkdir(parents=True, exist_ok=True)
    LOG(f"Output file: {state.htmlOutputFile}", level=2)

    state.envOK = True
    return state


def source_read(inputstate: ProgramState) -> ProgramState:
    """
    Read the markdown note from disk.

    Args:
        inputstate: Program state with inputSourceFile path set

    Returns:
        ProgramState with added field:
            - markdownSource: Raw markdown text

    Exits:
        1 if the file cannot be read as UTF-8 text
    """

    state = inputstate.copy()

    LOG("Reading source file...", level=1)

    try:
        state.markdownSource = state.inputSourceFile.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading input file: {e}", file=sys.stderr)
        sys.exit(1)

    LOG(f"Read {len(state.markdownSource)} characters from {state.inputSourceFile.name}", level=2)
    return state


def html_render(inputstate: ProgramState) -> ProgramState:
    """
    Render the markdown note to HTML and write it out.

    Args:
        inputstate: Program state with markdownSource

    Returns:
        ProgramState with added field:
            - renderResult: Dict containing:
                - status: bool (render success)
                - output_file: str (path to the written HTML)
                - widget_count: int (number of input widgets rendered)

    Exits:
        1 if markdownSource is missing or the output cannot be written
    """

    state = inputstate.copy()

    LOG("Rendering markdown to HTML...", level=1)

    if state.markdownSource is None:
        print("Error: No markdown source available", file=sys.stderr)
        sys.exit(1)

    settings = appsettings
    if state.highlight:
        settings = appsettings.model_copy(update={"highlight_code": True})

    html = MarkupTransformer(settings=settings).render(state.markdownSource)

    try:
        state.htmlOutputFile.write_text(html, encoding="utf-8")
    except OSError as e:
        print(f"Error writing output file: {e}", file=sys.stderr)
        sys.exit(1)

    state.renderResult = {
        'status': True,
        'output_file': str(state.htmlOutputFile),
        'widget_count': html.count('<div class="flex flex-row custom-input">'),
    }
    LOG(f"Wrote {state.htmlOutputFile}", level=2)
    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Display render results to the user.

    Args:
        inputstate: Program state with renderResult populated

    Returns:
        ProgramState unchanged (terminal pipeline stage)

    Exits:
        1 if renderResult is None
    """
    state: ProgramState = inputstate.copy()
    if not state.renderResult:
        print("Error: Rendering failed", file=sys.stderr)
        sys.exit(1)

    LOG("\n✓ Rendering successful!", level=1)
    LOG(f"  Output:  {state.renderResult['output_file']}", level=1)
    LOG(f"  Widgets: {state.renderResult['widget_count']}", level=1)
    return state


@chris_plugin(
    parser=parser,
    title="ekan - markdown notes with copyable credentials",
    category="Utility",
    min_memory_limit="100Mi",
    min_cpu_limit="500m",
)
def main(options: Namespace, inputdir: Path, outputdir: Path):
    """
    Main entry point - render a markdown note to HTML.

    Orchestrates the pipeline:
        1. env_check: Validate paths and environment
        2. source_read: Read the markdown note
        3. html_render: Render and write HTML
        4. results_report: Display results to user

    Args:
        options: CLI arguments from argparse
        inputdir: Directory containing the note
        outputdir: Directory where the HTML will be written

    Note:
        This function is wrapped by @chris_plugin which handles CLI
        argument parsing and invokes this function with parsed values.
    """

    state: ProgramState = ProgramState.state_createFromNamespace(
        options=options, inputdir=inputdir, outputdir=outputdir
    )

    # Connect state to logger for entire pipeline
    state_connectToLogger(state)

    pipeline(state, env_check, source_read, html_render, results_report)


if __name__ == "__main__":
    main()  # type: ignore  # @chris_plugin decorator transforms signature
