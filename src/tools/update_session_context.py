from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from core.errors import ValidationError
from core.session import SessionContext


def register(mcp: FastMCP, *, session: SessionContext) -> None:
    @mcp.tool(name="update_session_context")
    async def update_session_context(user_message: str) -> str:
        """Update the current session with the user message for auto-logging."""
        if not user_message or not user_message.strip():
            raise ValidationError("Missing user_message")

        # Held in process memory only
        session.update(user_message)
        return "Session context updated. User message prepared for logging."
