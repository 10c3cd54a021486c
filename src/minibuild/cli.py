"""
Command-line interface for minibuild.

This module provides the `minibuild` CLI tool. Run without arguments it
builds the "framework" and "app" modules of the project in the current
directory with javac.
"""

import argparse
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.text import Text

from minibuild import __version__, output
from minibuild.build import BuildConfig, BuildError, BuildOrchestrator
from minibuild.build.build_config import DEFAULT_COMPILER, DEFAULT_OUTPUT_FLAG, DEFAULT_SOURCE_SUFFIX

FAILURE_PREFIX = "Build FAILED: "

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


@dataclass
class BuildArgs:
    """Arguments for the build."""

    project_dir: Path
    compiler: str = DEFAULT_COMPILER
    suffix: str = DEFAULT_SOURCE_SUFFIX
    output_flag: str = DEFAULT_OUTPUT_FLAG
    verbose: bool = False


def setup_logging(verbose: bool = False) -> None:
    """Send diagnostics to stderr; DEBUG when verbose, warnings only otherwise."""
    logger = logging.getLogger("minibuild")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT))
    logger.addHandler(console_handler)


def report_failure(error: BuildError) -> None:
    """Print the single failure line to stderr."""
    console = Console(stderr=True, highlight=False)
    console.print(Text(f"{FAILURE_PREFIX}{error}", style="bold red"), soft_wrap=True)


def build_command(args: BuildArgs) -> int:
    """Run the build and return the process exit status.

    This is the only place a build error becomes an exit status.

    Examples:
        minibuild                       # Build the project in the current directory
        minibuild path/to/project       # Build another project
        minibuild --compiler ecj        # Use a different compiler
        minibuild --verbose             # Verbose output
    """
    output.set_verbose(args.verbose)
    config = BuildConfig.default(
        project_dir=args.project_dir,
        compiler=args.compiler,
        source_suffix=args.suffix,
        output_flag=args.output_flag,
    )

    try:
        result = BuildOrchestrator().build(config)
    except BuildError as e:
        logging.getLogger(__name__).debug("Build failed", exc_info=True)
        report_failure(e)
        return 1

    output.log_detail(result.message, verbose_only=True)
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    """minibuild CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="minibuild",
        description="Compile the framework and app modules of a project",
    )
    parser.add_argument(
        "project_dir",
        nargs="?",
        type=Path,
        default=Path("."),
        help="Project directory (default: current directory)",
    )
    parser.add_argument(
        "--compiler",
        default=DEFAULT_COMPILER,
        help=f"Compiler executable (default: {DEFAULT_COMPILER})",
    )
    parser.add_argument(
        "--suffix",
        default=DEFAULT_SOURCE_SUFFIX,
        help=f"Source file suffix (default: {DEFAULT_SOURCE_SUFFIX})",
    )
    parser.add_argument(
        "--output-flag",
        default=DEFAULT_OUTPUT_FLAG,
        help=f"Compiler flag taking the output directory (default: {DEFAULT_OUTPUT_FLAG})",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show verbose build output",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parsed_args = parser.parse_args(argv)

    if not parsed_args.project_dir.is_dir():
        parser.error(f"Path is not a directory: {parsed_args.project_dir}")

    setup_logging(parsed_args.verbose)

    args = BuildArgs(
        project_dir=parsed_args.project_dir,
        compiler=parsed_args.compiler,
        suffix=parsed_args.suffix,
        output_flag=parsed_args.output_flag,
        verbose=parsed_args.verbose,
    )
    sys.exit(build_command(args))


if __name__ == "__main__":
    main()
