import pytest

from core.errors import ConfigurationError, ExternalServiceError, ValidationError
from tools import log_conversation as log_tool
from tools import webhook_check as webhook_tool


class FakeRelay:
    def __init__(self, reply=None, error=None):
        self._reply = reply if reply is not None else {"ok": True}
        self._error = error
        self.entries = []

    async def send(self, entry):
        self.entries.append(entry)
        if self._error:
            raise self._error
        return self._reply


class FakeWebhookClient:
    def __init__(self, reply=None, error=None):
        self._reply = reply if reply is not None else {"ok": True}
        self._error = error
        self.calls = []

    async def post_json(self, url, payload):
        self.calls.append((url, dict(payload)))
        if self._error:
            raise self._error
        return self._reply


@pytest.mark.asyncio
async def test_log_conversation_builds_entry_and_echoes_urls(dummy_mcp, configured_store, sample_config):
    relay = FakeRelay(reply={"ok": True, "latest_url": "L", "dated_url": "D"})
    log_tool.register(dummy_mcp, store=configured_store, relay=relay)
    fn = dummy_mcp.tools["log_conversation"]

    out = await fn(user_message="hi", assistant_message="hello", tools_used=["read_file", "grep"])

    entry = relay.entries[0]
    assert entry.session_id == sample_config.session_id
    assert entry.model == "claude-sonnet-4"
    assert entry.tools_used == ["read_file", "grep"]
    assert entry.project == "alpha"

    assert "Tools used: read_file, grep" in out
    assert "- Latest: L" in out
    assert "- Dated: D" in out
    assert "- Project Latest: N/A" in out


@pytest.mark.asyncio
async def test_log_conversation_project_override_and_defaults(dummy_mcp, configured_store):
    relay = FakeRelay()
    log_tool.register(dummy_mcp, store=configured_store, relay=relay)
    fn = dummy_mcp.tools["log_conversation"]

    out = await fn(user_message="hi", assistant_message="hello", project="beta")

    assert relay.entries[0].project == "beta"
    assert relay.entries[0].tools_used == []
    assert "Tools used: none" in out
    assert "Project: beta" in out


@pytest.mark.asyncio
async def test_log_conversation_requires_config(dummy_mcp, store):
    relay = FakeRelay()
    log_tool.register(dummy_mcp, store=store, relay=relay)

    with pytest.raises(ConfigurationError, match="setup_github_logging"):
        await dummy_mcp.tools["log_conversation"](user_message="hi", assistant_message="hello")
    assert relay.entries == []


@pytest.mark.asyncio
async def test_log_conversation_validates_before_network(dummy_mcp, configured_store):
    relay = FakeRelay()
    log_tool.register(dummy_mcp, store=configured_store, relay=relay)

    with pytest.raises(ValidationError):
        await dummy_mcp.tools["log_conversation"](user_message="", assistant_message="hello")
    assert relay.entries == []


@pytest.mark.asyncio
async def test_log_conversation_surfaces_relay_error(dummy_mcp, configured_store):
    relay = FakeRelay(error=ExternalServiceError("HTTP 500: Internal Server Error"))
    log_tool.register(dummy_mcp, store=configured_store, relay=relay)

    with pytest.raises(ExternalServiceError, match="HTTP 500"):
        await dummy_mcp.tools["log_conversation"](user_message="hi", assistant_message="hello")


# ---------------------------
# test_webhook
# ---------------------------

@pytest.mark.asyncio
async def test_webhook_check_uses_configured_url(dummy_mcp, configured_store, sample_config):
    client = FakeWebhookClient(reply={"ok": True, "latest_url": "L"})
    webhook_tool.register(dummy_mcp, store=configured_store, webhook_client=client)

    out = await dummy_mcp.tools["test_webhook"]()

    url, payload = client.calls[0]
    assert url == sample_config.webhook_url
    assert payload["project"] == "webhook-test"
    assert payload["tools_used"] == ["test"]
    assert payload["session_id"].startswith("test-")
    assert "successful" in out
    assert "- Latest: L" in out


@pytest.mark.asyncio
async def test_webhook_check_explicit_url_without_config(dummy_mcp, store):
    client = FakeWebhookClient(reply={"ok": False})
    webhook_tool.register(dummy_mcp, store=store, webhook_client=client)

    out = await dummy_mcp.tools["test_webhook"](webhook_url="https://n8n.example/test")

    assert client.calls[0][0] == "https://n8n.example/test"
    assert "did not report ok" in out


@pytest.mark.asyncio
async def test_webhook_check_without_url_or_config_raises(dummy_mcp, store):
    webhook_tool.register(dummy_mcp, store=store, webhook_client=FakeWebhookClient())

    with pytest.raises(ConfigurationError):
        await dummy_mcp.tools["test_webhook"]()
