"""
User-facing output module for minibuild.

All progress lines a build prints to standard output go through this module,
so that tests and embedding code can redirect them in one place. Diagnostics
belong to the ``logging`` module instead.

Example output:
    Building...
    Command 'javac framework/src/Lib.java -d dist/framework' executed in 0.84 seconds
    Command 'javac app/src/Main.java -d dist/app' executed in 0.61 seconds
    Build SUCCESS in 1.47 seconds

Usage:
    from minibuild.output import log, timing

    log("Building...")

    with timing("Build SUCCESS"):
        # Do the work; the completion line is printed only if no error escapes
        ...
"""

import sys
import time
from contextlib import contextmanager
from typing import Iterator, Optional, TextIO

# Global output state
_output_stream: Optional[TextIO] = None
_verbose: bool = False


def set_output_stream(output_stream: Optional[TextIO]) -> None:
    """
    Redirect user-facing output.

    Args:
        output_stream: Stream to write to, or None to follow the current sys.stdout
    """
    global _output_stream
    _output_stream = output_stream


def set_verbose(verbose: bool) -> None:
    """
    Set verbose mode for output.

    Args:
        verbose: If True, verbose_only messages are printed as well.
    """
    global _verbose
    _verbose = verbose


def _print(message: str) -> None:
    stream = _output_stream if _output_stream is not None else sys.stdout
    stream.write(f"{message}\n")
    stream.flush()


def log(message: str, verbose_only: bool = False) -> None:
    """
    Print a message to the output stream.

    Args:
        message: Message to print
        verbose_only: If True, only print if verbose mode is enabled
    """
    if verbose_only and not _verbose:
        return
    _print(message)


def log_detail(message: str, indent: int = 6, verbose_only: bool = False) -> None:
    """
    Print an indented detail message.

    Args:
        message: Detail message
        indent: Number of spaces to indent (default 6)
        verbose_only: If True, only print if verbose mode is enabled
    """
    log(f"{' ' * indent}{message}", verbose_only=verbose_only)


def format_elapsed(label: str, elapsed: float) -> str:
    """
    Format a completion line.

    Args:
        label: Description of the finished work
        elapsed: Elapsed time in seconds

    Returns:
        "<label> in <elapsed> seconds" with two decimals
    """
    return f"{label} in {elapsed:.2f} seconds"


@contextmanager
def timing(label: str) -> Iterator[None]:
    """
    Time the enclosed block and print its completion line.

    Nothing is printed when the block raises; the error propagates unchanged.

    Args:
        label: Description of the work, e.g. "Build SUCCESS"
    """
    start_time = time.time()
    yield
    _print(format_elapsed(label, time.time() - start_time))
