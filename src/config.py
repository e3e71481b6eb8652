"""Configuration and environment helpers for the project.

Provides small helpers to read typed environment variables and exposes
project-level configuration constants used across the codebase (e.g.
CONFIG_PATH, HTTP_VERIFY, GITHUB_API_BASE_URL, timeouts and limits).
"""

from __future__ import annotations

import os
from pathlib import Path


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return float(raw.strip())
    except ValueError:
        return default


# Local logger configuration file (one per user)
CONFIG_PATH = Path(
    os.environ.get("GITHUB_LOGGER_CONFIG_PATH", str(Path.home() / ".claude-github-logger.json"))
).expanduser()

# Network / HTTP
HTTP_VERIFY = _env_bool("HTTP_VERIFY", True)
HTTP_TIMEOUT = _env_float("HTTP_TIMEOUT", 20.0)

# GitHub Contents API
GITHUB_API_BASE_URL = os.environ.get("GITHUB_API_BASE_URL", "https://api.github.com").strip()
TRANSCRIPTS_ROOT = os.environ.get("TRANSCRIPTS_ROOT", "transcripts").strip() or "transcripts"
TRANSCRIPT_SUFFIX = ".md"

# Logged entries / retrieval
MODEL_LABEL = "claude-sonnet-4"
DEFAULT_HISTORY_LIMIT = _env_int("DEFAULT_HISTORY_LIMIT", 10)

# Logging (stderr only; stdout carries the stdio transport)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").strip() or "INFO"
