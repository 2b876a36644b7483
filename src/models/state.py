"""
Program state model and pipeline helper

Defines ProgramState dataclass for the functional pipeline pattern and
the pipeline() helper for composing transformation stages.
"""

from argparse import Namespace
from typing import List, Type, TypeVar, Callable
from dataclasses import dataclass, field

from .project import CompileResult


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Central state container for the command-line pipeline (state bus pattern).

    This dataclass carries all program state through the functional pipeline,
    with each stage adding new fields as the run progresses.

    Pipeline stages and their state additions:
        - Initial: paths, debug, verbosity
        - env_check: envOK (and paths defaulted to the current directory)
        - sources_compile: compileResults
        - results_report: (no additions, terminal stage)

    Attributes:
        paths: Files or directories given on the command line
        debug: Debug flag (tracebacks on failure, no usage banner)
        verbosity: Logging verbosity level (1-3)
        envOK: Environment validation passed
        compileResults: One CompileResult per compiled top-level file
    """

    # CLI arguments
    paths: List[str] = field(default_factory=list)
    debug: bool = field(default=False)
    verbosity: int = field(default=1)

    # Pipeline state
    envOK: bool = field(default=False)
    compileResults: List[CompileResult] = field(default_factory=list)

    @classmethod
    def state_createFromNamespace(cls: Type["ProgramState"], options: Namespace) -> "ProgramState":
        """
        Create ProgramState from an argparse Namespace.

        Args:
            options: Parsed CLI arguments (paths, debug, verbosity)

        Returns:
            ProgramState instance with all known CLI options as attributes
        """
        import dataclasses
        valid_fields = {f.name for f in dataclasses.fields(cls)}

        # Filter options to only include fields that exist in ProgramState
        filtered_options = {k: v for k, v in vars(options).items() if k in valid_fields}
        return cls(**filtered_options)

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
        final_state = pipeline(initial_state, env_check, sources_compile, results_report)

    This is equivalent to:
        results_report(sources_compile(env_check(initial_state)))
    """
    from functools import reduce
    return reduce(lambda state, stage: stage(state), stages, initial_state)
