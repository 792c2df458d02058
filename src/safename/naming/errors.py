"""Errors raised while resolving names."""

from pathlib import Path


class NameResolutionError(Exception):
    """Raised when a unique name cannot be produced."""

    pass


class DisambiguationExhausted(NameResolutionError):
    """Raised when every disambiguated candidate up to the limit is taken.

    This is not expected in normal operation; it points to a corrupted
    directory or writers filling it faster than it can be probed.
    """

    def __init__(self, directory: Path, base: str, extension: str, attempts: int):
        self.directory = directory
        self.base = base
        self.extension = extension
        self.attempts = attempts
        name = f"{base}.{extension}" if extension else base
        super().__init__(
            f"Failed to create unique name for {name!r} in {directory} after {attempts} attempts"
        )
