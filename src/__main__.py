#!/usr/bin/env python3
"""
hot - Indentation-sensitive markup compiler

Compiles .hot source files to HTML.

Usage:
    hot <hotFilePath>
     - compiles a hot file, the file does not need to have the .hot extension

    hot <folderPath>
     - compiles all .hot files in the folder, or uses the folder's
       hotconfig.json to choose which hot files to compile to what locations

    Any additional paths are also compiled in these ways. With no paths the
    current directory is compiled.

Examples:
    # Compile one page next to itself
    hot pages/index.hot

    # Compile a project directory, verbosely, with tracebacks on failure
    hot site/ -vv -debug
"""

import sys
from argparse import ArgumentParser, Namespace, RawDescriptionHelpFormatter
from typing import List, Optional

from .lib import Compiler, HotError, LOG, ERROR, state_connectToLogger, __version__
from .models import ProgramState, pipeline


USAGE = """
Usage:

hot <hotFilePath>
 - compiles a hot file, the file does not need to have the .hot extension

hot <folderPath>
 - compiles all .hot files in the folder, or uses the folder's hotconfig.json to choose which hotfiles to compile to what locations

Note: Any additional paths provided as arguments are also compiled in these ways.
"""

# Define CLI arguments
parser = ArgumentParser(
    prog="hot",
    description="hot - compile indentation-sensitive markup to HTML",
    epilog=USAGE,
    formatter_class=RawDescriptionHelpFormatter,
)

parser.add_argument(
    "paths", nargs="*", help="Hot files or directories to compile (default: current directory)"
)

parser.add_argument(
    "-debug",
    "--debug",
    action="store_true",
    default=False,
    help="Log tracebacks for failed compiles",
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=1,
    help="Increase output verbosity (can be repeated: -v, -vv)",
)

parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")


def env_check(inputstate: ProgramState) -> ProgramState:
    """
    Default the paths to compile and greet argument-less runs.

    Returns:
        ProgramState with paths filled in and envOK set
    """
    state = inputstate.copy()

    if not state.paths:
        if not state.debug:
            print(USAGE)
        state.paths = ["."]

    LOG(f"Compiling: {', '.join(state.paths)}", level=2)
    state.envOK = True
    return state


def sources_compile(inputstate: ProgramState) -> ProgramState:
    """
    Compile every path.

    Failures inside directories are logged by the compiler and recorded in
    the results. A failure of an explicitly named file stops the run.

    Returns:
        ProgramState with compileResults set

    Exits:
        1 if an explicitly named file fails to compile
    """
    state = inputstate.copy()

    try:
        state.compileResults = Compiler(state.paths, debug=state.debug).compile()
    except (OSError, HotError, ValueError) as e:
        ERROR("Compilation failed", exception=e, debug=state.debug)
        sys.exit(1)

    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Summarize the run.

    Exits:
        1 if any file failed to compile
    """
    state = inputstate.copy()
    failed = [result for result in state.compileResults if not result.ok]

    LOG(f"Compiled {len(state.compileResults) - len(failed)} of {len(state.compileResults)} files", level=1)
    if failed:
        for result in failed:
            LOG(f"  failed: {result.source}", level=1)
        sys.exit(1)
    return state


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point - compile hot sources to HTML.

    Orchestrates the pipeline:
        1. env_check: Default paths, print usage for bare runs
        2. sources_compile: Compile files and directories
        3. results_report: Summarize and set the exit status

    Args:
        argv: Command-line arguments (default: sys.argv[1:])
    """
    options: Namespace = parser.parse_args(argv)
    state: ProgramState = ProgramState.state_createFromNamespace(options)

    # Connect state to logger for entire pipeline
    state_connectToLogger(state)

    pipeline(state, env_check, sources_compile, results_report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
