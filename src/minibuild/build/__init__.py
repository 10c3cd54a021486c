"""
Build system components for minibuild.

This module provides the build system implementation including:
- Source file discovery
- Output directory cleaning
- Compilation with an external compiler
- Build orchestration
"""

from .build_config import BuildConfig, ModuleConfig
from .errors import BuildError, CleanError, CompilationError, ConfigurationError, ProcessError
from .orchestrator import BuildOrchestrator, BuildResult

__all__ = [
    "BuildConfig",
    "ModuleConfig",
    "BuildError",
    "CleanError",
    "CompilationError",
    "ConfigurationError",
    "ProcessError",
    "BuildOrchestrator",
    "BuildResult",
]
