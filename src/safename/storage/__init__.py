"""Storage collaborators."""

from safename.storage.directory import DirectoryProbe, LocalDirectory

__all__ = ["DirectoryProbe", "LocalDirectory"]
