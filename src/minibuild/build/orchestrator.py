"""
Build orchestration for minibuild projects.

Runs the whole build strictly in order: clean every output directory, then
discover and compile each module in turn. The first error ends the build.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List

from ..output import log, log_detail, timing
from .build_config import BuildConfig
from .build_utils import prepare_clean_dirs
from .compiler import Compiler
from .source_scanner import find_sources

# Module-level logger
logger = logging.getLogger(__name__)


@dataclass
class BuildResult:
    """Result of a completed build.

    Only successful builds produce a result; failures raise BuildError.

    Attributes:
        modules: Names of the built modules, in build order
        source_counts: Number of source files compiled per module
        message: Summary message
    """

    modules: List[str] = field(default_factory=list)
    source_counts: Dict[str, int] = field(default_factory=dict)
    message: str = ""


class BuildOrchestrator:
    """
    Orchestrates the complete build process.

    Cleans output directories, discovers sources and compiles every
    configured module with the external compiler.
    """

    def build(self, config: BuildConfig) -> BuildResult:
        """Execute complete build process.

        Args:
            config: Build configuration

        Returns:
            BuildResult for the successful build

        Raises:
            BuildError: If any phase fails; nothing after the failure runs
        """
        result = BuildResult()
        compiler = Compiler(config.compiler, config.output_flag)

        with timing("Build SUCCESS"):
            log("Building...")
            prepare_clean_dirs(config.output_dirs)

            for module in config.modules:
                logger.info(f"Compiling module {module.name}")
                sources = find_sources(module.source_dir, config.source_suffix)
                log_detail(f"Found {len(sources)} source file(s) in {module.source_dir}", verbose_only=True)
                compiler.compile(sources, module.output_dir)
                result.modules.append(module.name)
                result.source_counts[module.name] = len(sources)

        result.message = f"Built {len(result.modules)} module(s)"
        return result
