"""
External compiler invocation for minibuild.

This module handles:
- Command line assembly (sources, then the output directory flag)
- Running the compiler with inherited standard streams
- Translating launch failures and non-zero exits into build errors
"""

import logging
from pathlib import Path
from typing import List, Sequence

from ..output import timing
from ..subprocess_utils import format_command, format_command_for_shell, run_inherited
from .build_config import DEFAULT_COMPILER, DEFAULT_OUTPUT_FLAG
from .errors import CompilationError, ProcessError

logger = logging.getLogger(__name__)


class Compiler:
    """Builds and runs compiler command lines."""

    def __init__(self, executable: str = DEFAULT_COMPILER, output_flag: str = DEFAULT_OUTPUT_FLAG):
        """
        Initialize compiler.

        Args:
            executable: Compiler executable, looked up on PATH
            output_flag: Flag taking the destination directory as its value
        """
        self.executable = executable
        self.output_flag = output_flag

    def build_command(self, sources: Sequence[Path], destination_dir: Path) -> List[str]:
        """Assemble the compiler command line.

        Args:
            sources: Source files, passed in the order received
            destination_dir: Directory the compiler writes its output to

        Returns:
            [executable, *sources, output_flag, destination_dir]
        """
        cmd = [self.executable]
        cmd.extend(str(path) for path in sources)
        cmd.extend([self.output_flag, str(destination_dir)])
        return cmd

    def compile(self, sources: Sequence[Path], destination_dir: Path) -> None:
        """Compile sources into destination_dir.

        The destination directory is created first, since not every
        compiler creates it on its own.

        Raises:
            ProcessError: If the destination cannot be created or the compiler cannot be started
            CompilationError: If the compiler exits with a non-zero status
        """
        cmd = self.build_command(sources, destination_dir)
        try:
            destination_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ProcessError(cmd, e) from e
        run_command(cmd)


def run_command(cmd: Sequence[str]) -> None:
    """Run an external command and wait for it, printing its timing line.

    Args:
        cmd: Executable followed by its arguments

    Raises:
        ProcessError: If the process cannot be started or the wait is interrupted
        CompilationError: If the process exits with a non-zero status
    """
    with timing(f"Command '{format_command(cmd)}' executed"):
        logger.debug(f"Running: {format_command_for_shell(cmd)}")
        try:
            code = run_inherited(cmd)
        except (OSError, KeyboardInterrupt) as e:
            raise ProcessError(cmd, e) from e
        if code != 0:
            raise CompilationError(cmd, code)
