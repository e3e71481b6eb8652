import pytest

from core.config_store import ConfigStore
from core.models import LoggerConfig


class DummyMCP:
    """Minimal FastMCP stand-in to capture tool registration."""

    def __init__(self) -> None:
        self.tools = {}

    def tool(self, *, name: str):
        def _decorator(fn):
            self.tools[name] = fn
            return fn
        return _decorator


@pytest.fixture
def dummy_mcp():
    return DummyMCP()


@pytest.fixture
def store(tmp_path):
    return ConfigStore(path=tmp_path / "logger.json")


@pytest.fixture
def sample_config():
    return LoggerConfig(
        webhook_url="https://n8n.example/webhook/chat",
        github_repo="octocat/transcripts",
        session_id="claude-1700000000000-abc123xyz",
        auto_log=True,
        project="alpha",
        github_token="ghp_secret",
    )


@pytest.fixture
def configured_store(store, sample_config):
    store.save(sample_config)
    return store
