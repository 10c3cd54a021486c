"""Subprocess utilities for running external tools.

Compilers run with the parent's standard streams so that their diagnostics
reach the terminal live, unlike tools whose output is captured and parsed.
"""

import shlex
import subprocess
import sys
from typing import Sequence


def format_command(cmd: Sequence[str]) -> str:
    """Join a command into the single-line form used in messages.

    Arguments are space-joined without quoting so that messages show the
    command exactly as it was assembled.
    """
    return " ".join(cmd)


def format_command_for_shell(cmd: Sequence[str]) -> str:
    """Join a command with shell quoting, for copy-pasting from verbose logs."""
    if sys.platform == "win32":
        return subprocess.list2cmdline(list(cmd))
    return shlex.join(cmd)


def run_inherited(cmd: Sequence[str]) -> int:
    """Execute a command with inherited stdin/stdout/stderr and wait for it.

    Args:
        cmd: Executable followed by its arguments

    Returns:
        Exit status of the finished process

    Raises:
        OSError: If the process cannot be started (e.g. executable not found)
        KeyboardInterrupt: If the wait is interrupted; the child is killed
            by subprocess.run before the interrupt propagates
    """
    result = subprocess.run(list(cmd), check=False)
    return result.returncode
