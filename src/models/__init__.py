"""
Models package for hot

Contains data structures and type definitions for the compilation pipeline.
"""

from .state import ProgramState, pipeline
from .directives import DirectiveName, ImportArgs, IMPORT_RESERVED_ARGS
from .parser import LastMatch, ParseOptions
from .project import ProjectConfig, CompileResult, projectConfig_adapter

__all__ = [
    "ProgramState",
    "pipeline",
    "DirectiveName",
    "ImportArgs",
    "IMPORT_RESERVED_ARGS",
    "LastMatch",
    "ParseOptions",
    "ProjectConfig",
    "CompileResult",
    "projectConfig_adapter",
]
