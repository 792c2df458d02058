"""Directory probes used to detect name collisions."""

import os
from pathlib import Path
from typing import Protocol, Union


class DirectoryProbe(Protocol):
    """Answers whether a name is already taken inside a directory.

    Implementations must reflect the current state of the directory on
    every call. Case sensitivity is whatever the backing store uses.
    """

    def exists(self, directory: Path, name: str) -> bool:
        ...


class LocalDirectory:
    """Probe backed by the local filesystem.

    Dangling symlinks count as taken. Errors other than a missing entry
    (permission denied, I/O failure) are raised to the caller.
    """

    def exists(self, directory: Union[str, Path], name: str) -> bool:
        try:
            os.lstat(Path(directory) / name)
        except (FileNotFoundError, NotADirectoryError):
            return False
        return True
