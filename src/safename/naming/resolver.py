"""Collision-free filename resolution.

A resolved name is only known to be free at the moment of the last probe.
Creating the file is left to the caller, which must use exclusive-create
semantics and resolve again if it loses a race (see writers.file_writer).
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from safename.config.settings import Settings, get_settings
from safename.mime.table import MimeTable, StaticMimeTable, SystemMimeTable, load_mime_table
from safename.naming.errors import DisambiguationExhausted
from safename.storage.directory import DirectoryProbe, LocalDirectory
from safename.utils.filename import (
    INVALID_CHARS,
    MAX_EXTENSION_LENGTH,
    MAX_FILENAME_LENGTH,
    REPLACEMENT_CHAR,
    sanitize_filename,
    split_extension,
)

logger = logging.getLogger(__name__)

DEFAULT_PLACEHOLDER = "untitled"
DEFAULT_DISAMBIGUATION_LIMIT = 32


@dataclass(frozen=True)
class Resolution:
    """Outcome of resolving a name inside a directory."""

    directory: Path
    name: str
    base: str
    extension: str  # without the dot, empty if none
    counter: int = 0  # 0 means no disambiguator was needed

    @property
    def path(self) -> Path:
        """Return the full path of the resolved name."""
        return self.directory / self.name


def split_display_name(
    display_name: str, mime_type: Optional[str], table: MimeTable
) -> tuple[str, str]:
    """Split a display name into base and extension for a MIME type.

    Without a MIME type the trailing extension of the name is used as-is.
    With one, an extension already registered for the type is kept with its
    original casing; otherwise the canonical extension is appended to the
    whole display name. Types with no registered extensions leave the name
    untouched. Table entries longer than MAX_EXTENSION_LENGTH are ignored.

    Args:
        display_name: Name requested by the caller.
        mime_type: MIME type of the content, or None.
        table: Table listing extensions per MIME type.

    Returns:
        Tuple of (base, extension without dot).
    """
    if mime_type is None:
        base, ext = split_extension(display_name)
        return base, ext[1:]

    extensions = [
        ext for ext in table.extensions_for(mime_type) if len(ext) <= MAX_EXTENSION_LENGTH
    ]
    if not extensions:
        return display_name, ""

    base, ext = split_extension(display_name)
    if ext and ext[1:].lower() in extensions:
        return base, ext[1:]

    return display_name, extensions[0]


def format_name(base: str, extension: str, counter: int = 0) -> str:
    """Build "<base>[ (<counter>)][.<extension>]"."""
    if counter > 0:
        base = f"{base} ({counter})"
    return f"{base}.{extension}" if extension else base


class UniqueNameResolver:
    """Picks a sanitized name that does not exist yet in a directory."""

    def __init__(
        self,
        probe: Optional[DirectoryProbe] = None,
        mime_table: Optional[MimeTable] = None,
        max_length: int = MAX_FILENAME_LENGTH,
        limit: int = DEFAULT_DISAMBIGUATION_LIMIT,
        placeholder: str = DEFAULT_PLACEHOLDER,
    ):
        """Initialize the resolver.

        Args:
            probe: Directory probe (default: the local filesystem).
            mime_table: MIME extension table (default: built-in table).
            max_length: Maximum length of a resolved name in codepoints.
            limit: Highest disambiguation counter tried before giving up.
            placeholder: Base used when the requested base is empty.
        """
        if limit < 1:
            raise ValueError(f"limit must be at least 1, got {limit}")

        self.probe = probe or LocalDirectory()
        self.mime_table = mime_table or StaticMimeTable()
        self.limit = limit
        self.placeholder = sanitize_filename(placeholder or DEFAULT_PLACEHOLDER)

        # Worst case: one base codepoint, the largest counter and the longest extension
        self._suffix_room = len(f" ({limit})")
        minimum = 1 + self._suffix_room + 1 + MAX_EXTENSION_LENGTH
        if max_length < minimum:
            raise ValueError(f"max_length must be at least {minimum}, got {max_length}")
        self.max_length = max_length

    @classmethod
    def from_settings(
        cls, settings: Optional[Settings] = None, probe: Optional[DirectoryProbe] = None
    ) -> "UniqueNameResolver":
        """Create a resolver configured from application settings."""
        settings = settings or get_settings()

        if settings.mime_table:
            mime_table: MimeTable = load_mime_table(settings.mime_table)
        elif settings.use_system_mime_types:
            mime_table = SystemMimeTable()
        else:
            mime_table = StaticMimeTable()

        return cls(
            probe=probe,
            mime_table=mime_table,
            max_length=settings.max_filename_length,
            limit=settings.disambiguation_limit,
            placeholder=settings.placeholder,
        )

    def prepare(self, display_name: Optional[str], mime_type: Optional[str] = None) -> tuple[str, str]:
        """Derive the sanitized base and extension for a display name.

        The base is trimmed so that the extension and the largest
        disambiguator still fit within max_length.
        """
        base, ext = split_display_name(display_name or "", mime_type, self.mime_table)

        ext = INVALID_CHARS.sub(REPLACEMENT_CHAR, ext)

        if base in ("", ".", ".."):
            base = self.placeholder

        budget = self.max_length - self._suffix_room
        if ext:
            budget -= len(ext) + 1

        return sanitize_filename(base, budget), ext

    def resolve(
        self,
        directory: Union[str, Path],
        display_name: Optional[str],
        mime_type: Optional[str] = None,
    ) -> Resolution:
        """Find a name for display_name that is not taken in directory.

        Args:
            directory: Target directory.
            display_name: Name requested by the caller.
            mime_type: MIME type of the content, or None to trust the name.

        Returns:
            The resolution, with counter > 0 if a disambiguator was needed.

        Raises:
            DisambiguationExhausted: If every candidate up to the limit is taken.
        """
        directory = Path(directory)
        base, ext = self.prepare(display_name, mime_type)

        for counter in range(self.limit + 1):
            name = format_name(base, ext, counter)
            if not self.probe.exists(directory, name):
                logger.debug(f"Resolved {display_name!r} to {name!r} in {directory}")
                return Resolution(
                    directory=directory,
                    name=name,
                    base=base,
                    extension=ext,
                    counter=counter,
                )
            logger.debug(f"Name taken: {name!r} in {directory}")

        raise DisambiguationExhausted(directory, base, ext, self.limit + 1)

    def resolve_unique(
        self,
        directory: Union[str, Path],
        display_name: Optional[str],
        mime_type: Optional[str] = None,
    ) -> str:
        """Return just the resolved name."""
        return self.resolve(directory, display_name, mime_type).name

    def build_unique_file(
        self,
        directory: Union[str, Path],
        display_name: Optional[str],
        mime_type: Optional[str] = None,
    ) -> Path:
        """Return the full path of the resolved name."""
        return self.resolve(directory, display_name, mime_type).path


def resolve_unique(
    directory: Union[str, Path],
    display_name: Optional[str],
    mime_type: Optional[str] = None,
) -> str:
    """Resolve a name with a resolver configured from the global settings."""
    return UniqueNameResolver.from_settings().resolve_unique(directory, display_name, mime_type)


def build_unique_file(
    directory: Union[str, Path],
    display_name: Optional[str],
    mime_type: Optional[str] = None,
) -> Path:
    """Resolve a path with a resolver configured from the global settings."""
    return UniqueNameResolver.from_settings().build_unique_file(directory, display_name, mime_type)
