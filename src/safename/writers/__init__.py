"""File writers for safename."""

from safename.writers.file_writer import create_unique_file

__all__ = ["create_unique_file"]
