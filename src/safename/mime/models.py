"""Pydantic models for MIME table override files."""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from safename.utils.filename import INVALID_CHARS, MAX_EXTENSION_LENGTH


class MimeTableFile(BaseModel):
    """Contents of a YAML MIME table file.

    Example:
        types:
          image/x-custom: [cst, custom]
    """

    types: dict[str, list[str]] = Field(default_factory=dict)

    @field_validator("types", mode="before")
    @classmethod
    def normalize_types(cls, v: Any) -> Any:
        """Lowercase MIME types and extensions, dropping leading dots."""
        if v is None:
            return {}
        if not isinstance(v, dict):
            return v

        normalized: dict[str, list[str]] = {}
        for mime_type, extensions in v.items():
            key = str(mime_type).strip().lower()
            if "/" not in key:
                raise ValueError(f"not a MIME type: {mime_type!r}")

            # Allow a single extension written as a plain string
            if isinstance(extensions, str):
                extensions = [extensions]
            if not isinstance(extensions, list):
                raise ValueError(f"extensions for {key} must be a list")

            normalized[key] = [_normalize_extension(ext) for ext in extensions]
        return normalized


def _normalize_extension(ext: Any) -> str:
    ext = str(ext).strip().lower().lstrip(".")
    if not ext:
        raise ValueError("empty extension")
    if len(ext) > MAX_EXTENSION_LENGTH:
        raise ValueError(f"extension too long: {ext!r}")
    if "." in ext or INVALID_CHARS.search(ext):
        raise ValueError(f"invalid extension: {ext!r}")
    return ext
