"""
Compile orchestrator for hot projects

Maps command-line paths to source files and destination paths, and runs
one parser per top-level file.

    hot pages/index.hot     compile one file next to itself, errors propagate
    hot site/               compile site/ as configured by site/hotconfig.json
                            (or every site/*.hot when there is no config)

A project configuration holds one record or a list of records:

    {"files": "**/*.hot", "outDir": "public"}
    [{"file": "index.hot", "out": "index.html"}, {"files": "docs/*.hot"}]

Files of a directory compile concurrently, one asyncio task each running
the synchronous parser in a worker thread. A failing file is logged and
recorded; it never stops its siblings.
"""

import asyncio
import glob
import os
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

import yaml
from pydantic import ValidationError

from ..config import appsettings
from ..models.project import CompileResult, ProjectConfig, projectConfig_adapter
from .errors import ConfigError
from .log import ERROR, LOG
from .parser import Parser
from .paths import commondir, extension_replace

CompilePlan = List[Tuple[str, Optional[str]]]


class Compiler:
    """
    Compiles files and project directories to HTML

    Responsibilities:
    - Find and validate project configuration
    - Resolve each configuration record to source files and output paths
    - Compile files concurrently, isolating failures per file
    """

    def __init__(self, paths: Optional[Iterable[str]] = None, debug: bool = False) -> None:
        """
        Initialize compiler

        Args:
            paths: Files or directories to compile; the current directory if empty
            debug: Log tracebacks for failures instead of bare messages
        """
        self.paths = [str(path) for path in paths or []] or ["."]
        self.debug = debug or appsettings.debug_mode

    def compile(self) -> List[CompileResult]:
        """
        Compile every path

        Returns:
            One CompileResult per top-level source file

        Raises:
            OSError, HotError: When an explicitly named file fails
        """
        return asyncio.run(self.compile_async())

    async def compile_async(self) -> List[CompileResult]:
        """Async form of compile(), for callers already inside an event loop"""
        results: List[CompileResult] = []
        for path in self.paths:
            if os.path.isdir(path):
                results.extend(await self.directory_compile(path))
            else:
                results.append(await asyncio.to_thread(self.file_compile, path))
        return results

    def file_compile(self, path: str) -> CompileResult:
        """
        Compile one explicitly named file next to itself

        The source root is the file's own directory.
        """
        config = ProjectConfig(src_root=os.path.dirname(os.path.abspath(path)), debug=self.debug)
        parser = Parser(config=config).file_load(path)
        parser.compile()
        LOG(f"{path} => {parser.out_file}", level=1)
        return CompileResult(source=Path(parser.file), output=Path(parser.out_file))

    def config_load(self, directory: str) -> List[ProjectConfig]:
        """
        Read the project configuration of `directory`

        Returns:
            The configured records, or one record compiling every source
            file directly inside `directory` when there is no configuration

        Raises:
            ConfigError: If the configuration cannot be read or validated
        """
        for filename in appsettings.config_filenames:
            config_path = Path(directory) / filename
            if config_path.is_file():
                break
        else:
            return [ProjectConfig(files=appsettings.default_files)]

        LOG(f"Using project configuration {config_path}", level=2)
        try:
            text = config_path.read_text(encoding="utf-8")
            if config_path.suffix == ".json":
                configs = projectConfig_adapter.validate_json(text)
            else:
                configs = projectConfig_adapter.validate_python(yaml.safe_load(text) or {})
        except (OSError, yaml.YAMLError, ValidationError) as e:
            raise ConfigError(f"Failed to load {config_path}: {e}")

        if isinstance(configs, ProjectConfig):
            return [configs]
        return list(configs)

    def entry_plan(self, directory: str, config: ProjectConfig) -> Tuple[ProjectConfig, CompilePlan]:
        """
        Resolve one configuration record to (source, output) pairs

        The source root is the common directory of all matched files when
        several files go to an outDir, otherwise the first file's directory.
        Outputs are `out`, else the file's path under the source root
        re-rooted at `outDir`, else None (next to the source).

        Returns:
            The record with src_root and debug filled in, and the plan
        """
        directory = os.path.abspath(directory)
        if config.files:
            matches = glob.glob(config.files, root_dir=directory, recursive=True)
            files = sorted(
                os.path.abspath(os.path.join(directory, match)) for match in matches
            )
            files = [file for file in files if os.path.isfile(file)]
        elif config.file:
            files = [os.path.abspath(os.path.join(directory, config.file))]
        else:
            raise ConfigError(f"Configuration in {directory} names neither 'files' nor 'file'")

        if not files:
            return config, []

        if config.out_dir and len(files) > 1:
            src_root = commondir(files)
        else:
            src_root = os.path.dirname(files[0])
        config = config.model_copy(update={"src_root": src_root, "debug": self.debug or config.debug})

        plan: CompilePlan = []
        for file in files:
            out: Optional[str] = None
            if config.out:
                out = os.path.abspath(os.path.join(directory, config.out))
            elif config.out_dir:
                relative = extension_replace(os.path.relpath(file, src_root), appsettings.output_extension)
                out = os.path.abspath(os.path.join(directory, config.out_dir, relative))
            plan.append((file, out))
        return config, plan

    async def directory_compile(self, directory: str) -> List[CompileResult]:
        """
        Compile a directory according to its project configuration

        Every file of every record runs as its own task; failures are
        logged and returned as results rather than raised.
        """
        try:
            configs = self.config_load(directory)
        except ConfigError as e:
            ERROR(f"Skipping {directory}", exception=e, debug=self.debug)
            return [CompileResult(source=Path(directory), output=None, error=e)]

        skipped: List[CompileResult] = []
        tasks = []
        for config in configs:
            try:
                config, plan = self.entry_plan(directory, config)
            except ConfigError as e:
                ERROR("Skipping configuration entry", exception=e, debug=self.debug)
                skipped.append(CompileResult(source=Path(directory), output=None, error=e))
                continue

            if not plan:
                LOG("Found no files to compile.", level=1)
            for file, out in plan:
                LOG(f"{file} => {out or 'default output'}", level=2)
                tasks.append(self.task_compile(file, out, config))

        return skipped + list(await asyncio.gather(*tasks))

    async def task_compile(self, file: str, out: Optional[str], config: ProjectConfig) -> CompileResult:
        """Compile one file of a batch in a worker thread, capturing any failure"""

        def compile_blocking() -> str:
            parser = Parser(config=config).file_load(file)
            parser.compile(out)
            return parser.out_file

        try:
            written = await asyncio.to_thread(compile_blocking)
        except Exception as e:
            ERROR(f"Failed to compile {file}", exception=e, debug=config.debug)
            return CompileResult(source=Path(file), output=Path(out) if out else None, error=e)

        LOG(f"{file} => {written}", level=1)
        return CompileResult(source=Path(file), output=Path(written))


def compile_paths(*paths: str, debug: bool = False) -> List[CompileResult]:
    """
    Compile files and directories the way the command line does

    Example:
        >>> compile_paths("site")
        [CompileResult(source=PosixPath('/.../site/index.hot'), ...)]
    """
    return Compiler(paths, debug=debug).compile()
