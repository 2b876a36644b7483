"""
Project configuration models

A project configuration file (hotconfig.json / hotconfig.yaml) holds either
one ProjectConfig record or a list of them. Each record is one compile unit:
a set of source files plus the rule for where their output goes.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class ProjectConfig(BaseModel):
    """
    One compile unit of a project configuration.

    Field names follow the camelCase keys used in config files; the python
    attribute names are snake_case.

    Attributes:
        files: Glob of source files, relative to the configured directory
        file: Single source file, relative to the configured directory
        out: Explicit output path (single-file units)
        out_dir: Output directory, mirroring the layout under src_root
        compile_all: Also write every transitively imported hot file
        src_root: Common source directory, derived by the compiler
        debug: Log tracebacks instead of bare messages on failure

    Example:
        >>> ProjectConfig.model_validate({"files": "**/*.hot", "outDir": "site"}).out_dir
        'site'
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    files: Optional[str] = None
    file: Optional[str] = None
    out: Optional[str] = None
    out_dir: Optional[str] = Field(default=None, alias="outDir")
    compile_all: bool = Field(default=False, alias="compileAll")
    src_root: Optional[str] = Field(default=None, alias="srcRoot")
    debug: bool = False


ProjectConfigFile = Union[ProjectConfig, List[ProjectConfig]]

projectConfig_adapter: TypeAdapter[ProjectConfigFile] = TypeAdapter(ProjectConfigFile)


@dataclass
class CompileResult:
    """
    Outcome of compiling one top-level source file

    Attributes:
        source: Source file that was compiled
        output: Destination the HTML was written to
        error: Exception that stopped the compile, None on success
    """
    source: Path
    output: Optional[Path]
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None
