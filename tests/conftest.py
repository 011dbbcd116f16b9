"""Shared test fixtures and configuration."""
import pytest
from typing import Any

from relay.models import CommentEvent, CommentMeta


@pytest.fixture
def mock_settings() -> dict[str, Any]:
    """Mock settings for testing."""
    return {
        "DISCORD_WEBHOOK_URL": "https://discord.com/api/webhooks/123/abc",
        "LINEAR_API_KEY": "lin_api_test_key",
        "LINEAR_API_URL": "https://api.linear.app/graphql",
        "LOG_LEVEL": "DEBUG",
    }


@pytest.fixture
def relay_env(monkeypatch: pytest.MonkeyPatch, mock_settings: dict[str, Any]) -> dict[str, Any]:
    """Export mock settings as environment variables."""
    monkeypatch.delenv("SECRETS_DIR", raising=False)
    for key, value in mock_settings.items():
        monkeypatch.setenv(key, value)
    return mock_settings


@pytest.fixture
def sample_comment() -> CommentEvent:
    """Sample comment event."""
    return CommentEvent(id="c1", body="Looks good", user_id="u1", issue_id="i1")


@pytest.fixture
def sample_meta() -> CommentMeta:
    """Sample enrichment result."""
    return CommentMeta(
        author_display_name="Ada", issue_title="Fix bug", issue_identifier="LIN-1778"
    )
