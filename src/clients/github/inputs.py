from __future__ import annotations

import re
from typing import Tuple

from core.errors import ValidationError
from core.paths import normalize_posix_relpath


_REPO_URL_RE = re.compile(r"^https?://github\.com/([^/]+)/([^/]+?)(?:\.git)?/?$")
_REPO_ID_RE = re.compile(r"^([A-Za-z0-9_.-]+)/([A-Za-z0-9_.-]+?)(?:\.git)?$")


def parse_repo(repo: str) -> Tuple[str, str]:
    # Accept "owner/name" as stored in the config, or a full GitHub URL
    raw = (repo or "").strip()
    m = _REPO_ID_RE.match(raw) or _REPO_URL_RE.match(raw)
    if not m:
        raise ValidationError("Invalid GitHub repository, expected 'owner/repo'")
    return m.group(1), m.group(2)


def is_absolute_url(path_or_url: str) -> bool:
    return (path_or_url or "").strip().lower().startswith(("http://", "https://"))


def normalize_path(path: str) -> str:
    # Keep GitHub paths stable and OS-independent:
    # - Convert "\" to "/"
    # - Drop leading "/" and repeated "./"
    # - Require a non-empty relative path
    path_clean = normalize_posix_relpath(path)
    if not path_clean:
        raise ValidationError("path must be non-empty")
    return path_clean
