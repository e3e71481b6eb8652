"""Local JSON store for the logger configuration.

One file per user, fully overwritten by each setup call. A missing or
unreadable file means "not configured" and is never an error.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from core.models import LoggerConfig

logger = logging.getLogger(__name__)


class ConfigStore:
    def __init__(self, *, path: Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Optional[LoggerConfig]:
        try:
            raw = self._path.read_text(encoding="utf-8")
        except OSError:
            return None

        try:
            data = json.loads(raw)
        except ValueError:
            logger.warning("Ignoring malformed config file: %s", self._path)
            return None

        if not isinstance(data, dict):
            logger.warning("Ignoring config file without a JSON object: %s", self._path)
            return None

        return LoggerConfig.from_dict(data)

    def save(self, config: LoggerConfig) -> None:
        # Direct overwrite; last write wins
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(config.to_dict(), indent=2), encoding="utf-8")
        logger.info("Saved logger config to %s", self._path)
