"""Path resolution utilities."""

import logging
import os
import shutil
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)


def resolve_path(input_path: Optional[Union[str, Path]]) -> Optional[Path]:
    """Expand ~ and environment variables in paths.

    Args:
        input_path: A path string or Path object that may contain ~ or env vars.

    Returns:
        Resolved absolute Path, or None if input is None/empty.
    """
    if not input_path:
        return None

    path_str = str(input_path).strip()
    if not path_str:
        return None

    # Expand environment variables
    path_str = os.path.expandvars(path_str)

    # Expand ~ and resolve to absolute path
    path = Path(path_str).expanduser()

    return path.resolve()


def contains(directory: Union[str, Path], path: Union[str, Path]) -> bool:
    """Check whether path is the directory itself or lies somewhere beneath it.

    Comparison is by path components, so "/sdcard" does not contain
    "/sdcard.txt". Neither path is touched on disk.
    """
    dir_parts = Path(os.path.normpath(directory)).parts
    path_parts = Path(os.path.normpath(path)).parts
    return path_parts[: len(dir_parts)] == dir_parts


def delete_contents(directory: Path) -> bool:
    """Delete everything inside a directory, keeping the directory itself.

    Args:
        directory: Directory to empty.

    Returns:
        True if every entry was removed.
    """
    success = True
    for entry in directory.iterdir():
        try:
            if entry.is_dir() and not entry.is_symlink():
                shutil.rmtree(entry)
            else:
                entry.unlink()
        except OSError as e:
            logger.warning(f"Failed to delete {entry}: {e}")
            success = False
    return success
