"""Dataclasses shared by the store, clients and tools.

Includes the persisted logger configuration (LoggerConfig), the
per-call conversation entry sent to the webhook (ChatLogEntry) and a
single item from the GitHub Contents API (RemoteEntry).
"""

from __future__ import annotations

import secrets
import string
import time
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import Any, List, Mapping, Optional


_BASE36 = string.digits + string.ascii_lowercase
_TRUTHY = {"1", "true", "yes", "y", "on"}


def generate_session_id() -> str:
    """Return a new opaque session id: claude-<epoch millis>-<9 base36 chars>."""
    suffix = "".join(secrets.choice(_BASE36) for _ in range(9))
    return f"claude-{int(time.time() * 1000)}-{suffix}"


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def _opt_str(value: Any) -> Optional[str]:
    # Only a missing key or JSON null is "unset"; values are kept as written
    if value is None:
        return None
    return str(value)


def _coerce_bool(value: Any, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY
    return bool(value)


@dataclass(frozen=True)
class LoggerConfig:
    """Persisted logger configuration.

    Field groups:
    - Relay: webhook_url
    - GitHub: github_repo ("owner/name"), github_token
    - Session: session_id, auto_log, project
    """

    webhook_url: str
    github_repo: str
    session_id: str
    auto_log: bool = True
    project: Optional[str] = None
    github_token: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        # Optional fields that are unset are left out of the file
        return {k: v for k, v in asdict(self).items() if v is not None}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Optional["LoggerConfig"]:
        """Build a config from decoded JSON, or None when required fields are missing."""
        webhook_url = _opt_str(data.get("webhook_url"))
        github_repo = _opt_str(data.get("github_repo"))
        if not (webhook_url or "").strip() or not (github_repo or "").strip():
            return None

        session_id = _opt_str(data.get("session_id"))
        return cls(
            webhook_url=webhook_url,
            github_repo=github_repo,
            session_id=session_id if session_id is not None else generate_session_id(),
            auto_log=_coerce_bool(data.get("auto_log"), True),
            project=_opt_str(data.get("project")),
            github_token=_opt_str(data.get("github_token")),
        )


@dataclass(frozen=True)
class ChatLogEntry:
    """One conversation turn, built per log call and never stored locally."""

    session_id: str
    user_msg: str
    assistant_msg: str
    model: str
    tools_used: List[str] = field(default_factory=list)
    project: Optional[str] = None
    timestamp: str = field(default_factory=utc_timestamp)

    def to_payload(self, *, default_project: Optional[str] = None) -> dict[str, Any]:
        """Webhook wire shape; project falls back to default_project, then ''."""
        return {
            "session_id": self.session_id,
            "model": self.model,
            "tools_used": list(self.tools_used),
            "user_message": self.user_msg,
            "assistant_message": self.assistant_msg,
            "project": self.project or default_project or "",
        }


@dataclass(frozen=True, slots=True)
class RemoteEntry:
    # One item of a GitHub Contents API listing
    name: str
    type: str
    url: str
    path: str = ""
    download_url: Optional[str] = None

    @property
    def is_file(self) -> bool:
        return self.type == "file"

    @property
    def is_dir(self) -> bool:
        return self.type == "dir"

    @classmethod
    def from_api(cls, item: Any) -> Optional["RemoteEntry"]:
        if not isinstance(item, Mapping):
            return None
        name = item.get("name")
        if not isinstance(name, str) or not name:
            return None

        download_url = item.get("download_url")
        return cls(
            name=name,
            type=str(item.get("type") or ""),
            url=str(item.get("url") or ""),
            path=str(item.get("path") or ""),
            download_url=download_url if isinstance(download_url, str) and download_url else None,
        )
