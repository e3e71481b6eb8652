from __future__ import annotations

from typing import Optional


class SessionContext:
    # Process-local scratch state; nothing here is persisted
    def __init__(self) -> None:
        self._current_user_message: Optional[str] = None

    @property
    def current_user_message(self) -> Optional[str]:
        return self._current_user_message

    def update(self, user_message: str) -> None:
        self._current_user_message = user_message
