from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from core.config_store import ConfigStore


def register(mcp: FastMCP, *, store: ConfigStore) -> None:
    @mcp.tool(name="get_logger_status")
    async def get_logger_status() -> str:
        """Check the current configuration and status of GitHub logging.

        Reports token presence only, never its value.
        """
        config = store.load()
        if config is None:
            return "GitHub logging is not configured. Run 'setup_github_logging' to get started."

        return (
            "GitHub Logger Status:\n\n"
            "✅ Configured: Yes\n"
            f"🔗 Webhook: {config.webhook_url}\n"
            f"📁 Repository: {config.github_repo}\n"
            f"🔐 GitHub Token: {'Configured' if config.github_token else 'Missing'}\n"
            f"🆔 Session: {config.session_id}\n"
            f"🤖 Auto-logging: {'Enabled' if config.auto_log else 'Disabled'}\n"
            f"📂 Project: {config.project or 'None'}\n\n"
            "Ready to log conversations to GitHub with authenticated access!"
        )
