"""
Source file discovery for minibuild.

Walks a module's source root depth-first and collects every file carrying
the configured source suffix.
"""

import logging
from pathlib import Path
from typing import List

from .errors import ConfigurationError

logger = logging.getLogger(__name__)


def find_sources(root_dir: Path, suffix: str) -> List[Path]:
    """Find all source files under a directory tree.

    Args:
        root_dir: Module source root
        suffix: File name suffix of source files (e.g., ".java")

    Returns:
        Source file paths in depth-first visit order (possibly empty)

    Raises:
        ConfigurationError: If root_dir does not exist or is not a directory
    """
    if not _is_dir(root_dir):
        raise ConfigurationError(root_dir)

    files: List[Path] = []
    _add_sources_to(files, root_dir, suffix)
    return files


def _is_dir(path: Path) -> bool:
    """Like Path.is_dir(), but an entry that cannot be examined is not a directory."""
    try:
        return path.is_dir()
    except OSError as e:
        logger.debug(f"Cannot examine {path}: {e}")
        return False


def _add_sources_to(files: List[Path], directory: Path, suffix: str) -> None:
    try:
        children = list(directory.iterdir())
    except OSError as e:
        # Unlistable directories contribute nothing
        logger.debug(f"Skipping unlistable directory {directory}: {e}")
        return

    for child in children:
        if _is_dir(child):
            _add_sources_to(files, child, suffix)
        elif child.name.endswith(suffix):
            files.append(child)
