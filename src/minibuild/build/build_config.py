"""Build Config - fixed project layout and toolchain settings.

This module defines:
- ModuleConfig: one project unit, pairing a source root with an output root
- BuildConfig: everything the orchestrator needs, created once at startup

Design:
    BuildConfig flows from CLI -> orchestrator -> scanner/compiler. The
    project layout itself is fixed; only the directory it is resolved
    against and the toolchain can be overridden.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

DEFAULT_COMPILER = "javac"
DEFAULT_SOURCE_SUFFIX = ".java"
DEFAULT_OUTPUT_FLAG = "-d"

# (name, source root, output root), relative to the project directory
DEFAULT_LAYOUT: Tuple[Tuple[str, str, str], ...] = (
    ("framework", "framework/src", "dist/framework"),
    ("app", "app/src", "dist/app"),
)


@dataclass(frozen=True)
class ModuleConfig:
    """A module of the project.

    Attributes:
        name: Module name (e.g., "framework", "app")
        source_dir: Directory tree scanned for the module's source files
        output_dir: Directory compiled artifacts are written to
    """

    name: str
    source_dir: Path
    output_dir: Path


@dataclass(frozen=True)
class BuildConfig:
    """Complete build configuration.

    Attributes:
        modules: Modules to build, in build order
        compiler: Compiler executable, looked up on PATH
        source_suffix: File name suffix identifying source files
        output_flag: Compiler flag taking the destination directory
    """

    modules: Tuple[ModuleConfig, ...]
    compiler: str = DEFAULT_COMPILER
    source_suffix: str = DEFAULT_SOURCE_SUFFIX
    output_flag: str = DEFAULT_OUTPUT_FLAG

    @property
    def output_dirs(self) -> Tuple[Path, ...]:
        return tuple(module.output_dir for module in self.modules)

    @classmethod
    def default(
        cls,
        project_dir: Path = Path("."),
        compiler: str = DEFAULT_COMPILER,
        source_suffix: str = DEFAULT_SOURCE_SUFFIX,
        output_flag: str = DEFAULT_OUTPUT_FLAG,
    ) -> "BuildConfig":
        """Create a BuildConfig for the fixed framework/app layout.

        Args:
            project_dir: Directory the layout is resolved against
            compiler: Compiler executable
            source_suffix: Source file suffix
            output_flag: Compiler output directory flag

        Returns:
            BuildConfig with the "framework" and "app" modules
        """
        modules = tuple(
            ModuleConfig(name=name, source_dir=project_dir / src, output_dir=project_dir / dist)
            for name, src, dist in DEFAULT_LAYOUT
        )
        return cls(
            modules=modules,
            compiler=compiler,
            source_suffix=source_suffix,
            output_flag=output_flag,
        )
