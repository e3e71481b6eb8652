"""MCP tool that logs one conversation turn through the webhook relay.

Registers 'log_conversation' which builds a ChatLogEntry from the stored
session and hands it to LogRelay; the reply's GitHub URLs are echoed.
"""

from __future__ import annotations

from typing import Any, List, Optional

from mcp.server.fastmcp import FastMCP

from config import MODEL_LABEL
from core.config_store import ConfigStore
from core.errors import NOT_CONFIGURED_MESSAGE, ConfigurationError, ValidationError
from core.models import ChatLogEntry
from services.log_relay import LogRelay


def _reply_field(result: Any, key: str) -> str:
    if isinstance(result, dict) and result.get(key):
        return str(result[key])
    return "N/A"


def register(mcp: FastMCP, *, store: ConfigStore, relay: LogRelay) -> None:
    @mcp.tool(name="log_conversation")
    async def log_conversation(
        user_message: str,
        assistant_message: str,
        tools_used: Optional[List[str]] = None,
        project: Optional[str] = None,
    ) -> str:
        """Manually log the current conversation to GitHub via n8n.

        Params:
          - user_message: the user's message in this conversation (required).
          - assistant_message: the assistant's response message (required).
          - tools_used: tools used in this conversation (default: []).
          - project: optional project override for this specific log.

        Raises:
          ValidationError for blank messages; ConfigurationError when logging
          is not set up; ExternalServiceError when the webhook call fails.
        """
        if not user_message or not user_message.strip():
            raise ValidationError("Missing user_message")
        if not assistant_message or not assistant_message.strip():
            raise ValidationError("Missing assistant_message")

        config = store.load()
        if config is None:
            raise ConfigurationError(NOT_CONFIGURED_MESSAGE)

        entry = ChatLogEntry(
            session_id=config.session_id,
            user_msg=user_message,
            assistant_msg=assistant_message,
            model=MODEL_LABEL,
            tools_used=[str(t) for t in (tools_used or [])],
            project=(project or "").strip() or config.project,
        )

        result = await relay.send(entry)

        return (
            "Conversation logged successfully!\n\n"
            f"- Session: {entry.session_id}\n"
            f"- Tools used: {', '.join(entry.tools_used) or 'none'}\n"
            f"- Project: {entry.project or 'default'}\n\n"
            "GitHub URLs:\n"
            f"- Latest: {_reply_field(result, 'latest_url')}\n"
            f"- Dated: {_reply_field(result, 'dated_url')}\n"
            f"- Project Latest: {_reply_field(result, 'project_latest_url')}"
        )
