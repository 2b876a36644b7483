"""
Centralized logging using Loguru with context-aware verbosity.

This module provides a LOG() function that respects the current ProgramState's
verbosity level without requiring explicit state passing, an ERROR()
function for failures that must always be reported and a WARN() function
for problems that do not stop the compile.

Features:
- Context-aware logging tied to ProgramState verbosity
- Rich formatting with timestamps, colors, and metadata
- Follows asyncio tasks and worker threads using contextvars
- Works throughout lib modules without passing state

Usage:
    from lib.log import LOG, ERROR, WARN, state_connectToLogger

    # At start of pipeline function:
    state_connectToLogger(state)

    # Anywhere in that context:
    LOG("This message appears if verbosity >= 1", level=1)
    LOG("Debug details appear if verbosity >= 2", level=2)
    ERROR("Compile of index.hot failed", exception=err, debug=True)
    WARN("No files match import './parts/*'")
"""

from loguru import logger
from typing import Any, Optional
from contextvars import ContextVar
import sys

# Context variable to hold current ProgramState
_program_state: ContextVar[Optional[Any]] = ContextVar('program_state', default=None)

# Configure loguru with hot-specific format
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

    Call this at the start of the pipeline to make the state's verbosity
    setting available to LOG() calls throughout that context, including the
    per-file compile tasks spawned from it.

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

    Verbosity levels:
        1 = Normal output (default)
        2 = Verbose (-v)
        3 = Debug (-vv or higher)
    """
    state = _program_state.get()

    if state and hasattr(state, 'verbosity') and state.verbosity >= level:
        logger.opt(depth=1).debug(message, **kwargs)


def ERROR(message: str, exception: Optional[BaseException] = None, debug: bool = False) -> None:
    """
    Log a failure regardless of verbosity.

    Args:
        message: What failed
        exception: The exception behind the failure, if any
        debug: Include the traceback of `exception`
    """
    if exception is not None and debug:
        logger.opt(exception=exception, depth=1).error(message)
    elif exception is not None:
        logger.opt(depth=1).error(f"{message}: {exception}")
    else:
        logger.opt(depth=1).error(message)


def WARN(message: str) -> None:
    """
    Log a warning regardless of verbosity.

    Args:
        message: What looked wrong without stopping the compile
    """
    logger.opt(depth=1).warning(message)
