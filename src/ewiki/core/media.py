"""Media type detection and document/resource classification."""

import mimetypes
from enum import Enum
from fnmatch import fnmatchcase
from pathlib import Path

DEFAULT_MEDIA_TYPE = "application/octet-stream"
MARKDOWN_MEDIA_TYPE = "text/markdown"
MARKDOWN_SUFFIXES = (".md", ".markdown")

# Streamed as-is instead of being rendered as a wiki page
PASS_THROUGH_MEDIA_TYPES: tuple[str, ...] = (
    "image/*",
    "video/*",
    "*/json",
    "*/css",
    "*/javascript",
    "*/html",
    DEFAULT_MEDIA_TYPE,
)

# Resources shown by the browser; everything else is sent as a download
INLINE_MEDIA_TYPES: tuple[str, ...] = (
    "text/*",
    "image/*",
    "video/*",
    "*/json",
)


class Classification(Enum):
    """How a request is answered."""

    DOCUMENT = "document"
    RESOURCE = "resource"
    NOT_FOUND = "not_found"


def guess_media_type(path: Path) -> str | None:
    """Guess the media type of a file from its extension.

    Returns:
        Media type, or None when the extension is not recognized
    """
    if path.suffix.lower() in MARKDOWN_SUFFIXES:
        return MARKDOWN_MEDIA_TYPE
    media_type, _ = mimetypes.guess_type(path.name, strict=False)
    return media_type


def matches_any(media_type: str, patterns: tuple[str, ...]) -> bool:
    """Check a media type against glob patterns such as "image/*"."""
    media_type = media_type.lower()
    return any(fnmatchcase(media_type, pattern.lower()) for pattern in patterns)


def classify(
    media_type: str | None,
    pass_through: tuple[str, ...] = PASS_THROUGH_MEDIA_TYPES,
) -> Classification:
    """Classify a resolved file by its media type.

    Markdown is always a document. Files with unrecognized extensions are
    documents too, as are all types missing from the pass-through list.
    """
    if media_type is None or media_type.lower() == MARKDOWN_MEDIA_TYPE:
        return Classification.DOCUMENT
    if matches_any(media_type, pass_through):
        return Classification.RESOURCE
    return Classification.DOCUMENT


def needs_attachment(media_type: str) -> bool:
    """Check whether a resource should be downloaded instead of displayed."""
    return not matches_any(media_type, INLINE_MEDIA_TYPES)


def content_disposition(filename: str) -> str:
    """Build an attachment Content-Disposition header value."""
    escaped = filename.replace("\\", "\\\\").replace('"', '\\"')
    return f'attachment; filename="{escaped}"'
