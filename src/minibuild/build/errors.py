"""Build errors.

Every failure during a build is fatal. Helpers raise one of these errors and
the CLI turns it into a single "Build FAILED" line and exit status 1.
"""

from pathlib import Path
from typing import Sequence


class BuildError(Exception):
    """Base class for fatal build errors. ``str(error)`` is the user-facing message."""

    pass


class ConfigurationError(BuildError):
    """Raised when a configured source root is missing or not a directory."""

    def __init__(self, path: Path):
        super().__init__(f"Not a directory: {path}")
        self.path = path


class CleanError(BuildError):
    """Raised when an output directory cannot be deleted."""

    def __init__(self, directory: Path, error: OSError):
        super().__init__(f"Unable to delete dir {directory} due to {error}")
        self.directory = directory
        self.error = error


class ProcessError(BuildError):
    """Raised when an external process cannot be started or waiting for it is interrupted."""

    def __init__(self, command: Sequence[str], error: BaseException):
        reason = f"{type(error).__name__}: {error}" if str(error) else type(error).__name__
        super().__init__(f"Cannot run command {command[0]}: {reason}")
        self.command = list(command)
        self.error = error


class CompilationError(BuildError):
    """Raised when the external compiler exits with a non-zero status."""

    def __init__(self, command: Sequence[str], exit_code: int):
        super().__init__(f"Command failed (exitCode={exit_code}): {' '.join(command)}")
        self.command = list(command)
        self.exit_code = exit_code
