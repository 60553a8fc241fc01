"""
Host command boundary

The desktop shell talks to ekan through named commands carrying a dict of
arguments. This module keeps the command table and validates arguments
before dispatch.

Example:
    >>> command_invoke("process_markdown", {"md": "Hello"})
    '<p>Hello</p>\\n'
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping

from .log import LOG
from .transformer import render


class CommandError(Exception):
    """Raised when a host command is unknown or invoked with bad arguments"""
    pass


@dataclass
class CommandSpec:
    """
    Specification for a host command

    Attributes:
        name: Command name used by the host
        handler: Callable receiving the validated arguments as keywords
        required: Names of required string arguments
        description: Human-readable description
    """
    name: str
    handler: Callable[..., Any]
    required: List[str] = field(default_factory=list)
    description: str = ""


def process_markdown(md: str) -> str:
    """Render one markdown block for the host; never fails for text input"""
    return render(md)


COMMANDS: Dict[str, CommandSpec] = {
    'process_markdown': CommandSpec(
        name='process_markdown',
        handler=process_markdown,
        required=['md'],
        description='Render a markdown block to HTML with input widgets',
    ),
}


def command_invoke(name: str, args: Mapping[str, Any]) -> Any:
    """
    Dispatch a host command

    Args:
        name: Registered command name
        args: Arguments sent by the host

    Returns:
        Whatever the command handler returns

    Raises:
        CommandError: Unknown command, or a required argument that is
                      missing or not a string
    """
    spec = COMMANDS.get(name)
    if spec is None:
        raise CommandError(f"Unknown command: {name}")

    for arg in spec.required:
        if arg not in args:
            raise CommandError(f"Command '{name}' missing required argument '{arg}'")
        if not isinstance(args[arg], str):
            raise CommandError(
                f"Command '{name}' argument '{arg}' must be a string, "
                f"got {type(args[arg]).__name__}"
            )

    LOG(f"Invoking command {name}", level=2)
    return spec.handler(**{arg: args[arg] for arg in spec.required})
