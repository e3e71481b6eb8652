"""Server bootstrap for the GitHub chat logger MCP service.

Creates the FastMCP instance, builds the shared store and clients,
injects them into each tool and starts the MCP server (stdio transport).
"""

import logging
import sys

from mcp.server.fastmcp import FastMCP

from clients.webhook_client import WebhookClient
from config import CONFIG_PATH, HTTP_TIMEOUT, HTTP_VERIFY, LOG_LEVEL
from core.config_store import ConfigStore
from core.session import SessionContext
from services.log_relay import LogRelay

from tools.get_logger_status import register as register_get_logger_status
from tools.log_conversation import register as register_log_conversation
from tools.retrieve_chat_history import register as register_retrieve_chat_history
from tools.setup_github_logging import register as register_setup_github_logging
from tools.update_session_context import register as register_update_session_context
from tools.webhook_check import register as register_test_webhook

logger = logging.getLogger(__name__)

mcp = FastMCP("github-chat-logger")


def register_tools() -> None:
    store = ConfigStore(path=CONFIG_PATH)
    webhook_client = WebhookClient(timeout=HTTP_TIMEOUT, verify=HTTP_VERIFY)
    relay = LogRelay(store=store, client=webhook_client)
    session = SessionContext()

    register_setup_github_logging(mcp, store=store)
    register_log_conversation(mcp, store=store, relay=relay)
    register_retrieve_chat_history(mcp, store=store)
    register_get_logger_status(mcp, store=store)
    register_update_session_context(mcp, session=session)
    register_test_webhook(mcp, store=store, webhook_client=webhook_client)


register_tools()


def _setup_logging(level: str) -> None:
    # stdout belongs to the stdio transport
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main() -> None:
    _setup_logging(LOG_LEVEL)
    logger.info("GitHub chat logger MCP server running on stdio (config: %s)", CONFIG_PATH)
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
