"""MCP tool that reads previous chat transcripts back from GitHub.

Registers 'retrieve_chat_history' which builds a TranscriptCollector for
the configured repository and returns up to `limit` transcripts.
"""

from __future__ import annotations

from typing import Callable, List, Optional

from mcp.server.fastmcp import FastMCP

from clients.github.client import GitHubContentsClient
from config import (
    DEFAULT_HISTORY_LIMIT,
    GITHUB_API_BASE_URL,
    HTTP_TIMEOUT,
    HTTP_VERIFY,
    TRANSCRIPT_SUFFIX,
    TRANSCRIPTS_ROOT,
)
from core.config_store import ConfigStore
from core.errors import NOT_CONFIGURED_MESSAGE, ConfigurationError, ValidationError
from core.models import LoggerConfig
from services.transcript_collector import TranscriptCollector

CollectorFactory = Callable[[LoggerConfig], TranscriptCollector]


def build_collector(config: LoggerConfig) -> TranscriptCollector:
    client = GitHubContentsClient(
        repo=config.github_repo,
        token=config.github_token,
        timeout=HTTP_TIMEOUT,
        verify=HTTP_VERIFY,
        base_url=GITHUB_API_BASE_URL,
    )
    return TranscriptCollector(lister=client, root=TRANSCRIPTS_ROOT, suffix=TRANSCRIPT_SUFFIX)


def format_transcripts(transcripts: List[str], limit: int) -> str:
    limited = transcripts[:limit]
    if not limited:
        return "No chat transcripts found in the repository."

    summary = "\n".join(
        f"**Transcript {idx}:**\n{transcript}\n\n---\n"
        for idx, transcript in enumerate(limited, start=1)
    )
    return f"Found {len(transcripts)} transcripts (showing {len(limited)}):\n\n{summary}"


def register(
    mcp: FastMCP,
    *,
    store: ConfigStore,
    collector_factory: Optional[CollectorFactory] = None,
) -> None:
    make_collector = collector_factory or build_collector

    @mcp.tool(name="retrieve_chat_history")
    async def retrieve_chat_history(
        project: Optional[str] = None,
        limit: int = DEFAULT_HISTORY_LIMIT,
    ) -> str:
        """Retrieve previous chat transcripts from GitHub.

        Reads transcripts/latest.md, then (with a project) the project's
        latest.md and its archived transcripts/<project>/<year>/<date>/*.md.

        Params:
          - project: optional project name to filter transcripts.
          - limit: maximum number of transcripts to return (default: 10).

        Returns:
          The transcripts, numbered and separated, with the total count found.
          Missing folders or unreadable files are skipped, never reported as errors.
        """
        if int(limit) < 1:
            raise ValidationError("limit must be positive")

        config = store.load()
        if config is None:
            raise ConfigurationError(NOT_CONFIGURED_MESSAGE)

        collector = make_collector(config)
        transcripts = await collector.retrieve(project)
        return format_transcripts(transcripts, int(limit))
