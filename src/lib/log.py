"""
Centralized logging using Loguru with context-aware verbosity.

This module provides a LOG() function that respects the current ProgramState's
verbosity level without requiring explicit state passing.

Usage:
    from ekan.lib.log import LOG, state_connectToLogger

    # At start of pipeline function:
    state_connectToLogger(state)

    # Anywhere in that context:
    LOG("This message appears if verbosity >= 1", level=1)
    LOG("Debug details appear if verbosity >= 2", level=2)
    LOG("Per-event trace appears if verbosity >= 3", level=3)

Without a connected state nothing is logged, so library callers (the host
application invoking render()) stay silent by default.
"""

from loguru import logger
from typing import Any, Optional
from contextvars import ContextVar
import sys

# Context variable to hold current ProgramState
_program_state: ContextVar[Optional[Any]] = ContextVar('program_state', default=None)

logger_format = (
    "<green>{time:HH:mm:ss}</green> │ "
    "<level>{level: <5}</level> │ "
    "<cyan>{function: <20}</cyan> @ "
    "<cyan>{line: <4}</cyan> ║ "
    "<level>{message}</level>"
)

logger.remove()  # Remove default handler
logger.add(sys.stderr, format=logger_format, level="DEBUG")


def state_connectToLogger(state: Any) -> None:
    """
    Connect a ProgramState to the logging context.

    Call this at the start of a pipeline to make the state's verbosity
    setting available to LOG() calls throughout that context.

    Args:
        state: ProgramState instance with verbosity attribute
    """
    _program_state.set(state)


def LOG(message: str, level: int = 1, **kwargs: Any) -> None:
    """
    Log message if current state's verbosity allows.

    Args:
        message: Log message to display
        level: Minimum verbosity level required (1=normal, 2=verbose, 3=debug)
        **kwargs: Additional loguru metadata
    """
    state = _program_state.get()

    if state and hasattr(state, 'verbosity') and state.verbosity >= level:
        logger.opt(depth=1).debug(message, **kwargs)
