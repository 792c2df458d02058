"""Filename sanitization utilities.

Names are checked against a FAT-compatible character policy, which is the
strictest set any common filesystem enforces. All lengths are counted in
Unicode codepoints.
"""

import re
import unicodedata
from typing import Optional

# Characters invalid in filenames on Windows/macOS/Linux (plus DEL)
INVALID_CHARS = re.compile(r'[<>:"/\\|?*\x00-\x1f\x7f]')

# Legacy DOS device names, matched against the part before the first dot
RESERVED_NAMES = re.compile(r"^(CON|PRN|AUX|NUL|COM[0-9]|LPT[0-9])$", re.IGNORECASE)

REPLACEMENT_CHAR = "_"
INVALID_PLACEHOLDER = "(invalid)"
ELLIPSIS = "..."

MAX_FILENAME_LENGTH = 255
MAX_EXTENSION_LENGTH = 16


def is_valid_filename_char(char: str) -> bool:
    """Return True if a single codepoint may appear in a filename."""
    return INVALID_CHARS.match(char) is None


def is_reserved_name(name: str) -> bool:
    """Check whether a name is a device alias, with or without extension."""
    stem = name.split(".", 1)[0]
    return RESERVED_NAMES.match(stem) is not None


def is_valid_filename(name: Optional[str]) -> bool:
    """Check whether a name can be used on disk as-is.

    A name is valid exactly when repairing it would not change it.
    """
    return name is not None and name == build_valid_filename(name)


def build_valid_filename(name: Optional[str]) -> str:
    """Repair a name so that it satisfies `is_valid_filename`.

    Each invalid codepoint is replaced with an underscore. Names that remain
    structurally unusable are rewritten: empty names and the bare "." / ".."
    entries become a placeholder. Device aliases are prefixed, and other
    names made only of dots get their first dot replaced.

    Args:
        name: Any candidate name, possibly None.

    Returns:
        A valid filename of at most MAX_FILENAME_LENGTH codepoints.
    """
    if not name or name in (".", ".."):
        return INVALID_PLACEHOLDER

    name = INVALID_CHARS.sub(REPLACEMENT_CHAR, name)

    if is_reserved_name(name):
        name = REPLACEMENT_CHAR + name

    return _rewrite_reserved(trim_filename(name, MAX_FILENAME_LENGTH))


def _rewrite_reserved(name: str) -> str:
    # Trimming can expose an alias or a dots-only name; keep the length
    if not name.strip(".") or is_reserved_name(name):
        return REPLACEMENT_CHAR + name[1:]
    return name


def split_extension(name: str) -> tuple[str, str]:
    """Split a name into stem and extension (extension keeps its dot).

    Dotfiles such as ".bashrc" have no extension, and neither do names whose
    trailing segment is too long to plausibly be one.
    """
    dot = name.rfind(".")
    if dot <= 0 or dot == len(name) - 1:
        return name, ""
    if len(name) - dot - 1 > MAX_EXTENSION_LENGTH:
        return name, ""
    return name[:dot], name[dot:]


def _prefix_end(text: str, end: int) -> int:
    # Never leave combining marks behind their base character
    while 0 < end < len(text) and unicodedata.combining(text[end]):
        end -= 1
    return end


def _suffix_start(text: str, start: int) -> int:
    while start < len(text) and unicodedata.combining(text[start]):
        start += 1
    return start


def trim_filename(name: str, max_length: int) -> str:
    """Shorten a name to max_length codepoints by eliding its middle.

    The extension is kept intact as long as at least one stem codepoint can
    stay on either side of the ellipsis; below that it is trimmed like the
    rest of the name. Combining marks are never split from their base: when
    a cut would fall inside a sequence, the whole sequence goes, or only the
    bare base codepoint stays if nothing else would be left.

    Args:
        name: The name to shorten.
        max_length: Maximum length in codepoints.

    Returns:
        The name itself if it fits, else "<prefix>...<suffix><extension>".

    Raises:
        ValueError: If max_length is not positive.
    """
    if max_length < 1:
        raise ValueError(f"max_length must be positive, got {max_length}")

    if len(name) <= max_length:
        return name

    budget = max_length - len(ELLIPSIS)
    if budget < 2:
        end = _prefix_end(name, max_length)
        if end == 0 and not unicodedata.combining(name[0]):
            # The first character and its marks do not fit; keep the bare base
            end = 1
        return name[: end or max_length]

    head, ext = split_extension(name)
    keep = budget - len(ext)
    if not ext or keep < 2:
        head, ext, keep = name, "", budget

    prefix = min(budget // 2, keep - 1)
    suffix = keep - prefix

    end = _prefix_end(head, prefix)
    start = _suffix_start(head, len(head) - suffix)

    return head[:end] + ELLIPSIS + head[start:] + ext


def sanitize_filename(name: Optional[str], max_length: int = MAX_FILENAME_LENGTH) -> str:
    """Map any candidate name to the nearest valid, length-bounded name.

    Args:
        name: The filename to sanitize.
        max_length: Maximum length in codepoints.

    Returns:
        A name for which `is_valid_filename` holds.
    """
    return _rewrite_reserved(trim_filename(build_valid_filename(name), max_length))
