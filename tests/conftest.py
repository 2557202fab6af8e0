"""Shared fixtures for the Slack OAuth callback tests.

The Slack HTTP call and the Supabase client are always mocked; nothing here
talks to the network.
"""

from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from slackconnect.context import SlackConnectContext
from slackconnect.models.config import SlackConnectConfig

@pytest.fixture
def config():
    """Fully configured service."""
    return SlackConnectConfig(
        slack_client_id="1234.5678",
        slack_client_secret="shh-secret",
        supabase_url="https://project.supabase.co",
        supabase_service_role_key="service-role-key",
        app_url="https://app.example.com",
    )

@pytest.fixture
def dbh():
    """Database handle whose update chain succeeds by default."""
    dbh = MagicMock()
    dbh.table.return_value.update.return_value.eq.return_value.execute.return_value = MagicMock(data=[{"id": "user-1"}])
    return dbh

@pytest.fixture
def context(config, dbh):
    return SlackConnectContext(config=config, dbh=dbh)

@pytest.fixture
def slack_post():
    """Patch the outbound token exchange and return the mock."""
    with patch("slackconnect.slack_authorization.requests.post") as mock_post:
        yield mock_post

@pytest.fixture
def slack_response(slack_post):
    """Set the JSON body Slack will answer the token exchange with."""

    def _respond(payload):
        slack_post.return_value.json.return_value = payload
        return slack_post

    return _respond

@pytest.fixture
def client(context, monkeypatch):
    """TestClient bound to the app with the test context injected."""
    import slack_oauth_callback

    monkeypatch.setattr(slack_oauth_callback, "context", context)
    return TestClient(slack_oauth_callback.app)
