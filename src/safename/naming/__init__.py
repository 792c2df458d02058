"""Unique name resolution."""

from safename.naming.errors import DisambiguationExhausted, NameResolutionError
from safename.naming.resolver import (
    Resolution,
    UniqueNameResolver,
    build_unique_file,
    format_name,
    resolve_unique,
    split_display_name,
)

__all__ = [
    "DisambiguationExhausted",
    "NameResolutionError",
    "Resolution",
    "UniqueNameResolver",
    "build_unique_file",
    "format_name",
    "resolve_unique",
    "split_display_name",
]
