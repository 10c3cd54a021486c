"""Build directory utilities.

Output directories are removed completely before every build so that no
stale artifacts from an earlier build survive.
"""

import logging
import os
from pathlib import Path
from typing import Iterable

from .errors import CleanError

logger = logging.getLogger(__name__)


def prepare_clean_dirs(dirs: Iterable[Path]) -> None:
    """Remove output directories and everything beneath them.

    Directories that do not exist are skipped, so a first build (or a second
    call in a row) has nothing to do. A symlinked output directory is removed
    as a link; its target is left alone.

    Args:
        dirs: Output directories to remove

    Raises:
        CleanError: On the first entry that cannot be examined or deleted.
            Remaining directories are left untouched.
    """
    for directory in dirs:
        try:
            if directory.is_symlink():
                directory.unlink()
            elif directory.is_dir():
                remove_tree(directory)
            else:
                logger.debug(f"Nothing to clean at {directory}")
                continue
        except OSError as e:
            raise CleanError(directory, e) from e
        logger.debug(f"Removed {directory}")


def remove_tree(directory: Path) -> None:
    """Delete a directory tree, deepest entries first.

    Symlinks are unlinked and never followed.

    Raises:
        OSError: If any entry cannot be listed or deleted
    """

    def _raise(error: OSError) -> None:
        raise error

    for dirpath, dirnames, filenames in os.walk(directory, topdown=False, onerror=_raise):
        for name in filenames:
            os.unlink(os.path.join(dirpath, name))
        for name in dirnames:
            path = os.path.join(dirpath, name)
            if os.path.islink(path):
                os.unlink(path)
            else:
                os.rmdir(path)
    os.rmdir(directory)
