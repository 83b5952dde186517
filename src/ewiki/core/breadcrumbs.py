"""Breadcrumb trail for wiki pages."""

from dataclasses import dataclass
from pathlib import PurePosixPath
from urllib.parse import quote

HOME_LABEL = "Home"

# Characters encodeURIComponent leaves untouched besides quote()'s defaults
_SEGMENT_SAFE = "!*'()"


@dataclass(frozen=True)
class BreadcrumbItem:
    """Breadcrumb navigation item.

    Labels are raw text; they are HTML-escaped when the page is rendered.
    """

    label: str
    href: str | None
    active: bool = False
    home: bool = False

    def to_dict(self) -> dict[str, str | bool | None]:
        """Convert to dictionary for JSON serialization."""
        return {
            "label": self.label,
            "href": self.href,
            "active": self.active,
            "home": self.home,
        }


def encode_segment(segment: str) -> str:
    """Percent-encode a single path segment."""
    return quote(segment, safe=_SEGMENT_SAFE)


def build_breadcrumbs(base_path: str, relative_path: str) -> list[BreadcrumbItem]:
    """Build breadcrumbs for a file relative to the wiki root.

    For "a/b/c.md" this returns Home, "a" and "b" linking to base_path,
    base_path + "a/" and base_path + "a/b/", followed by the inert label "c".

    Args:
        base_path: Link prefix, starting and ending with "/"
        relative_path: POSIX path relative to the wiki root

    Returns:
        Breadcrumb items, home first
    """
    # Links keep the segments verbatim; only labels are trimmed
    parts = [part for part in relative_path.split("/") if part.strip()]
    if not parts:
        return [BreadcrumbItem(label=HOME_LABEL, href=None, active=True, home=True)]

    items = [BreadcrumbItem(label=HOME_LABEL, href=base_path, home=True)]
    for i, part in enumerate(parts[:-1]):
        link = base_path + "/".join(encode_segment(p) for p in parts[: i + 1])
        if link != "/" and not link.endswith("/"):
            link += "/"
        items.append(BreadcrumbItem(label=part.strip(), href=link))

    last = PurePosixPath(parts[-1].strip())
    label = last.stem if last.suffix else last.name
    items.append(BreadcrumbItem(label=label, href=None, active=True))
    return items
