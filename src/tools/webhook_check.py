"""MCP tool that sends a fixed test payload to a webhook.

Registers 'test_webhook' to check that the n8n workflow is reachable
and answering before real conversations are logged.
"""

from __future__ import annotations

import time
from typing import Any, Optional

from mcp.server.fastmcp import FastMCP

from clients.webhook_client import WebhookClient
from config import MODEL_LABEL
from core.config_store import ConfigStore
from core.errors import NOT_CONFIGURED_MESSAGE, ConfigurationError
from services.log_relay import REPLY_URL_FIELDS

_URL_LABELS = {
    "latest_url": "Latest",
    "dated_url": "Dated",
    "project_latest_url": "Project Latest",
}


def build_test_payload() -> dict[str, Any]:
    return {
        "session_id": f"test-{int(time.time() * 1000)}",
        "model": MODEL_LABEL,
        "tools_used": ["test"],
        "user_message": "This is a test message to verify the webhook integration.",
        "assistant_message": "This is a test response to verify the GitHub logging is working correctly.",
        "project": "webhook-test",
    }


def register(mcp: FastMCP, *, store: ConfigStore, webhook_client: WebhookClient) -> None:
    @mcp.tool(name="test_webhook")
    async def test_webhook(webhook_url: Optional[str] = None) -> str:
        """Send a test payload to the webhook and report what it answered.

        Params:
          - webhook_url: webhook to test; defaults to the configured one.

        Raises:
          ConfigurationError when no URL is given and logging is not set up;
          ExternalServiceError when the webhook fails or is unreachable.
        """
        url = (webhook_url or "").strip()
        if not url:
            config = store.load()
            if config is None:
                raise ConfigurationError(NOT_CONFIGURED_MESSAGE)
            url = config.webhook_url

        result = await webhook_client.post_json(url, build_test_payload())

        ok = isinstance(result, dict) and bool(result.get("ok"))
        lines = [
            f"Webhook test {'successful' if ok else 'completed, but the webhook did not report ok'}: {url}",
        ]
        if isinstance(result, dict):
            urls = [f"- {_URL_LABELS[k]}: {result[k]}" for k in REPLY_URL_FIELDS if result.get(k)]
            if urls:
                lines.append("")
                lines.append("GitHub URLs generated:")
                lines.extend(urls)
        return "\n".join(lines)
