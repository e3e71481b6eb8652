"""Relay of one conversation turn to the configured webhook.

The webhook (an external workflow) performs the actual write into the
GitHub repository; this side only shapes the payload and POSTs it.
"""

from __future__ import annotations

import logging
from typing import Any

from clients.webhook_client import WebhookClient
from core.config_store import ConfigStore
from core.errors import NOT_CONFIGURED_MESSAGE, ConfigurationError
from core.models import ChatLogEntry

logger = logging.getLogger(__name__)

# Optional reply fields echoed back to the user
REPLY_URL_FIELDS = ("latest_url", "dated_url", "project_latest_url")


class LogRelay:
    def __init__(self, *, store: ConfigStore, client: WebhookClient) -> None:
        self._store = store
        self._client = client

    async def send(self, entry: ChatLogEntry) -> Any:
        """POST the entry to the webhook and return its JSON reply verbatim.

        Raises ConfigurationError when logging is not set up and
        ExternalServiceError for non-success statuses or network failures.
        """
        config = self._store.load()
        if config is None:
            raise ConfigurationError(NOT_CONFIGURED_MESSAGE)

        payload = entry.to_payload(default_project=config.project)
        logger.info(
            "Relaying session %s (project=%r, tools=%d)",
            payload["session_id"],
            payload["project"],
            len(payload["tools_used"]),
        )
        return await self._client.post_json(config.webhook_url, payload)
