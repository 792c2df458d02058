"""Utility functions for safename."""

from safename.utils.paths import contains, delete_contents, resolve_path
from safename.utils.filename import (
    build_valid_filename,
    is_valid_filename,
    sanitize_filename,
    split_extension,
    trim_filename,
)

__all__ = [
    "resolve_path",
    "contains",
    "delete_contents",
    "build_valid_filename",
    "is_valid_filename",
    "sanitize_filename",
    "split_extension",
    "trim_filename",
]
