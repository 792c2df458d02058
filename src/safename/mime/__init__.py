"""MIME type to extension tables."""

from safename.mime.models import MimeTableFile
from safename.mime.table import (
    DEFAULT_EXTENSIONS,
    MimeTable,
    MimeTableError,
    StaticMimeTable,
    SystemMimeTable,
    load_mime_table,
)

__all__ = [
    "DEFAULT_EXTENSIONS",
    "MimeTable",
    "MimeTableError",
    "MimeTableFile",
    "StaticMimeTable",
    "SystemMimeTable",
    "load_mime_table",
]
