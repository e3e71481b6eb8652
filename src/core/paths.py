from __future__ import annotations

from typing import Tuple

"""
Path utilities used across the project.

Provides consistent POSIX-style normalization and joining for paths
inside the remote transcripts repository.
"""


def normalize_posix_relpath(p: str) -> str:
    """Normalize a user path to a clean POSIX relative path.

    Converts backslashes to '/', trims whitespace, removes leading and
    trailing '/' and repeated './' markers.
    """
    s = (p or "").strip()
    s = s.replace("\\", "/")        # Unify path separators across OSes.
    s = s.lstrip("/")               # Prevent accidental absolute paths.
    while s.startswith("./"):       # Drop repeated "./" prefixes.
        s = s[2:]
    return s.rstrip("/")


def split_posix(p: str) -> Tuple[str, ...]:
    """Split a POSIX path into non-empty segments."""
    s = (p or "").strip().replace("\\", "/").strip("/")
    if not s:
        return tuple()
    return tuple(seg for seg in s.split("/") if seg)


def join_posix(*parts: str) -> str:
    """Join path fragments with '/', dropping empty segments."""
    segments: list[str] = []
    for part in parts:
        segments.extend(split_posix(part))
    return "/".join(segments)
