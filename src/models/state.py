"""
Program state model and pipeline helper

Defines ProgramState dataclass for the functional pipeline pattern and
the pipeline() helper for composing transformation stages.
"""

from pathlib import Path
from argparse import Namespace
from functools import reduce
from typing import Optional, Type, TypeVar, Dict, Callable
from dataclasses import dataclass, field, fields


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Central state container for the rendering pipeline (state bus pattern).

    Pipeline stages and their state additions:
        - Initial: inputdir, outputdir, verbosity, inputFile, outputFile, highlight
        - env_check: inputSourceFile, htmlOutputFile, envOK
        - source_read: markdownSource
        - html_render: renderResult
        - results_report: (no additions, terminal stage)

    Attributes:
        inputdir: Directory containing the markdown note
        outputdir: Directory for the rendered HTML
        verbosity: Logging verbosity level (1-3)
        inputFile: Markdown filename (relative to inputdir)
        outputFile: Optional HTML filename (relative to outputdir)
        highlight: Syntax-highlight fenced code blocks
        envOK: Environment validation passed
        inputSourceFile: Resolved path to the markdown note
        htmlOutputFile: Resolved path of the rendered HTML
        markdownSource: Raw markdown text of the note
        renderResult: Render results (output_file, widget_count, status)
    """

    # CLI arguments
    inputdir: Optional[Path] = field(default=None)
    outputdir: Optional[Path] = field(default=None)
    verbosity: int = field(default=1)
    inputFile: str = field(default="")
    outputFile: Optional[str] = field(default=None)
    highlight: bool = field(default=False)

    # Pipeline state
    envOK: bool = field(default=False)
    inputSourceFile: Path = field(default=Path("/"))
    htmlOutputFile: Path = field(default=Path("/"))
    markdownSource: Optional[str] = field(default=None)
    renderResult: Optional[Dict] = field(default=None)

    @classmethod
    def state_createFromNamespace(
        cls: Type["ProgramState"], options: Namespace, inputdir: Path, outputdir: Path
    ) -> "ProgramState":
        """
        Create ProgramState from argparse Namespace and directory paths.

        Args:
            options: Parsed CLI arguments (inputFile, outputFile, etc.)
            inputdir: Directory containing the note
            outputdir: Directory for rendered output

        Returns:
            ProgramState instance with all CLI options as attributes
        """
        valid_fields = {f.name for f in fields(cls)}

        # Only keep CLI options that are ProgramState fields
        filtered_options = {k: v for k, v in vars(options).items() if k in valid_fields}

        merged_args = {**filtered_options, "inputdir": inputdir, "outputdir": outputdir}
        return cls(**merged_args)

    def copy(self: PS) -> PS:
        """
        Creates a shallow copy of the ProgramState instance.

        Returns:
            A new ProgramState instance.
        """
        return type(self)(**self.__dict__)


def pipeline(
    initial_state: ProgramState, *stages: Callable[[ProgramState], ProgramState]
) -> ProgramState:
    """
    Execute a functional pipeline of state transformations.

    Each stage is a function (ProgramState) -> ProgramState that receives
    the output of the previous stage and returns a new state.

    Example:
        final_state = pipeline(
            initial_state,
            env_check,
            source_read,
            html_render,
            results_report
        )

    This is equivalent to:
        results_report(html_render(source_read(env_check(initial_state))))
    """
    return reduce(lambda state, stage: stage(state), stages, initial_state)
