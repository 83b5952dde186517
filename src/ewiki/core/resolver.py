"""Request path resolution inside the wiki root.

Maps an untrusted request path onto a file below the wiki root. Anything
that escapes the root, touches a hidden segment, or does not exist resolves
to None so callers can answer with a plain 404.
"""

import asyncio
import stat
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

DEFAULT_FILENAME = "index.md"


class TargetKind(Enum):
    """How a resolved target was selected."""

    DIRECTORY = "directory"
    FILE = "file"


@dataclass(frozen=True)
class ResolvedTarget:
    """A file inside the wiki root that answers a request."""

    kind: TargetKind
    path: Path
    relative_path: str


def normalize_request_path(request_path: str) -> str:
    """Normalize a request path to a root-relative POSIX path."""
    normalized = request_path.strip().replace("\\", "/")
    if normalized.startswith("/"):
        normalized = normalized[1:].strip()
    return normalized


def is_contained(root: Path, candidate: Path) -> bool:
    """Check that candidate is root itself or below it."""
    return candidate == root or root in candidate.parents


def has_hidden_segment(path: Path) -> bool:
    """Check whether any segment of path starts with a dot."""
    return any(part.strip().startswith(".") for part in path.parts)


def _is_allowed(root: Path, candidate: Path) -> bool:
    return is_contained(root, candidate) and not has_hidden_segment(candidate)


def _stat_mode(path: Path) -> int | None:
    """Return the file mode of path, or None if it does not exist."""
    try:
        return path.stat().st_mode
    except (FileNotFoundError, NotADirectoryError):
        return None


def resolve(root: Path, request_path: str) -> ResolvedTarget | None:
    """Resolve a request path to a file inside root.

    Args:
        root: Canonical absolute wiki root
        request_path: Decoded request path, e.g. "guide/setup.md"

    Returns:
        ResolvedTarget, or None if the path is outside root, hidden or missing

    Raises:
        OSError: For stat failures other than a missing path
    """
    relative = normalize_request_path(request_path)
    if "\x00" in relative:
        return None

    candidate = (root / relative).resolve()
    if not _is_allowed(root, candidate):
        return None

    mode = _stat_mode(candidate)
    if mode is None:
        return None

    if stat.S_ISDIR(mode):
        # index.md may itself be a symlink, so it is checked again
        index = (candidate / DEFAULT_FILENAME).resolve()
        if not _is_allowed(root, index):
            return None
        index_mode = _stat_mode(index)
        if index_mode is None or not stat.S_ISREG(index_mode):
            return None
        return ResolvedTarget(
            kind=TargetKind.DIRECTORY,
            path=index,
            relative_path=index.relative_to(root).as_posix(),
        )

    if not stat.S_ISREG(mode):
        return None

    return ResolvedTarget(
        kind=TargetKind.FILE,
        path=candidate,
        relative_path=candidate.relative_to(root).as_posix(),
    )


async def resolve_target(root: Path, request_path: str) -> ResolvedTarget | None:
    """Resolve a request path without blocking the event loop."""
    return await asyncio.to_thread(resolve, root, request_path)
