"""MCP tool that configures GitHub logging.

Registers the 'setup_github_logging' tool which replaces the stored
logger configuration (new session id every time) and echoes it back
with the token value masked.
"""

from __future__ import annotations

from typing import Optional

from mcp.server.fastmcp import FastMCP

from core.config_store import ConfigStore
from core.errors import ValidationError
from core.models import LoggerConfig, generate_session_id


def _required(value: Optional[str], name: str) -> str:
    v = (value or "").strip()
    if not v:
        raise ValidationError(f"Missing {name}")
    return v


def register(mcp: FastMCP, *, store: ConfigStore) -> None:
    @mcp.tool(name="setup_github_logging")
    async def setup_github_logging(
        webhook_url: str,
        github_repo: str,
        github_token: str,
        project: Optional[str] = None,
        auto_log: bool = True,
    ) -> str:
        """Configure the GitHub logging integration with your n8n webhook.

        Params:
          - webhook_url: webhook URL that receives conversation turns (required).
          - github_repo: repository as 'owner/repo', e.g. 'john/chat-transcripts' (required).
          - github_token: GitHub personal access token for private repositories (required).
          - project: optional project name for organizing transcripts.
          - auto_log: enable automatic logging of all conversations (default: True).

        Returns:
          Confirmation text; the token value is never echoed.

        Raises:
          ValidationError when a required argument is blank.
        """
        config = LoggerConfig(
            webhook_url=_required(webhook_url, "webhook_url"),
            github_repo=_required(github_repo, "github_repo"),
            github_token=_required(github_token, "github_token"),
            session_id=generate_session_id(),
            auto_log=auto_log is not False,
            project=(project or "").strip() or None,
        )

        store.save(config)

        return (
            "GitHub logging configured successfully!\n\n"
            f"- Webhook: {config.webhook_url}\n"
            f"- Repository: {config.github_repo}\n"
            f"- GitHub Token: {'Configured (hidden for security)' if config.github_token else 'Not provided'}\n"
            f"- Session ID: {config.session_id}\n"
            f"- Auto-logging: {'Enabled' if config.auto_log else 'Disabled'}\n"
            f"- Project: {config.project or 'None'}\n\n"
            "Your conversations will now be logged to GitHub via n8n with authenticated access."
        )
