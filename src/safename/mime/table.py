"""MIME type to file extension lookup."""

import logging
import mimetypes
from pathlib import Path
from typing import Mapping, Optional, Protocol

import yaml
from pydantic import ValidationError

from safename.mime.models import MimeTableFile

logger = logging.getLogger(__name__)

# First entry is the canonical extension for the type
DEFAULT_EXTENSIONS: dict[str, list[str]] = {
    "application/octet-stream": [],
    "application/json": ["json"],
    "application/ogg": ["ogx", "ogg"],
    "application/pdf": ["pdf"],
    "application/rtf": ["rtf"],
    "application/vnd.android.package-archive": ["apk"],
    "application/x-7z-compressed": ["7z"],
    "application/x-flac": ["flac"],
    "application/x-mpegurl": ["m3u8", "m3u"],
    "application/x-tar": ["tar"],
    "application/xml": ["xml"],
    "application/zip": ["zip"],
    "audio/aac": ["aac"],
    "audio/amr": ["amr"],
    "audio/flac": ["flac"],
    "audio/midi": ["mid", "midi"],
    "audio/mp4": ["m4a"],
    "audio/mpeg": ["mp3", "mpga"],
    "audio/ogg": ["ogg", "oga"],
    "audio/wav": ["wav"],
    "audio/webm": ["weba"],
    "audio/x-mpegurl": ["m3u"],
    "audio/x-ms-wma": ["wma"],
    "audio/x-scpls": ["pls"],
    "audio/x-wav": ["wav"],
    "image/bmp": ["bmp"],
    "image/gif": ["gif"],
    "image/heic": ["heic"],
    "image/heif": ["heif"],
    "image/jpeg": ["jpg", "jpeg", "jpe"],
    "image/png": ["png"],
    "image/svg+xml": ["svg"],
    "image/tiff": ["tif", "tiff"],
    "image/webp": ["webp"],
    "image/x-adobe-dng": ["dng"],
    "text/csv": ["csv"],
    "text/html": ["html", "htm"],
    "text/markdown": ["md", "markdown"],
    "text/plain": ["txt", "text"],
    "video/3gpp": ["3gp"],
    "video/mp2t": ["ts"],
    "video/mp4": ["mp4", "m4v"],
    "video/mpeg": ["mpeg", "mpg"],
    "video/quicktime": ["mov"],
    "video/webm": ["webm"],
    "video/x-matroska": ["mkv"],
    "video/x-msvideo": ["avi"],
}


class MimeTableError(Exception):
    """Raised when a MIME table file cannot be loaded."""

    pass


class MimeTable(Protocol):
    """Anything that can list the extensions registered for a MIME type."""

    def extensions_for(self, mime_type: str) -> list[str]:
        """Return lowercase extensions without dots, canonical first."""
        ...


class StaticMimeTable:
    """MIME table backed by an in-memory mapping."""

    def __init__(
        self,
        mapping: Optional[Mapping[str, list[str]]] = None,
        overrides: Optional[Mapping[str, list[str]]] = None,
    ):
        """Initialize the table.

        Args:
            mapping: Base mapping (default: DEFAULT_EXTENSIONS).
            overrides: Entries replacing the base entry for the same type.

        Raises:
            MimeTableError: If an entry is not a MIME type or lists an
                unusable extension.
        """
        base = DEFAULT_EXTENSIONS if mapping is None else mapping
        self._types = _validate_types(base)
        self._types.update(_validate_types(overrides or {}))

    def extensions_for(self, mime_type: str) -> list[str]:
        return list(self._types.get(mime_type.strip().lower(), []))


def _validate_types(mapping: Mapping[str, list[str]]) -> dict[str, list[str]]:
    try:
        return MimeTableFile.model_validate({"types": dict(mapping)}).types
    except ValidationError as e:
        raise MimeTableError(f"Invalid MIME table entries: {e}") from e


class SystemMimeTable:
    """MIME table backed by the platform's mimetypes registry."""

    def extensions_for(self, mime_type: str) -> list[str]:
        mime_type = mime_type.strip().lower()
        extensions: list[str] = []

        canonical = mimetypes.guess_extension(mime_type, strict=False)
        candidates = mimetypes.guess_all_extensions(mime_type, strict=False)
        if canonical:
            candidates.insert(0, canonical)

        for ext in candidates:
            ext = ext.lstrip(".").lower()
            if ext and ext not in extensions:
                extensions.append(ext)
        return extensions


def load_mime_table(path: Path, base: Optional[Mapping[str, list[str]]] = None) -> StaticMimeTable:
    """Load MIME overrides from a YAML file on top of the built-in table.

    Args:
        path: YAML file with a top-level "types" mapping.
        base: Base mapping to override (default: DEFAULT_EXTENSIONS).

    Returns:
        Table containing the base entries plus the file's entries.

    Raises:
        MimeTableError: If the file cannot be read or is invalid.
    """
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise MimeTableError(f"Failed to read MIME table {path}: {e}") from e
    except yaml.YAMLError as e:
        raise MimeTableError(f"Failed to parse MIME table {path}: {e}") from e

    try:
        table_file = MimeTableFile.model_validate(data or {})
    except ValidationError as e:
        raise MimeTableError(f"Invalid MIME table {path}: {e}") from e

    logger.debug(f"Loaded {len(table_file.types)} MIME overrides from {path}")
    return StaticMimeTable(base, overrides=table_file.types)
