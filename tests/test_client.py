"""
Unit tests for the Better Stack API client with mocked HTTP responses.
"""

import pytest
import requests
from unittest.mock import Mock

from statusbot.betterstack.client import BetterStackClient
from statusbot.core.config import BetterStackConfig
from statusbot.core.exceptions import (
    BetterStackAPIError,
    BetterStackAuthenticationError,
    BetterStackResponseError,
)
from tests.factories import BetterStackTestFactory, create_response


@pytest.fixture
def session():
    """Mock requests.Session."""
    session = Mock()
    session.headers = {}
    return session


@pytest.fixture
def client(session):
    config = BetterStackConfig(api_key="secret-token", base_url="https://uptime.example.com/api/v2/")
    return BetterStackClient(config, session=session)


class TestRequests:
    """Test request construction."""

    def test_session_carries_bearer_token(self, client, session):
        assert session.headers["Authorization"] == "Bearer secret-token"
        assert session.headers["Content-Type"] == "application/json"

    def test_get_builds_url_and_uses_timeout(self, client, session):
        session.get.return_value = create_response(json_data={"data": []})

        client.get("/monitors")

        session.get.assert_called_once_with(
            "https://uptime.example.com/api/v2/monitors", timeout=30
        )

    def test_list_monitors_parses_page(self, client, session):
        payload = BetterStackTestFactory.create_page([
            BetterStackTestFactory.create_monitor("1", "api-server", "up"),
            BetterStackTestFactory.create_monitor("2", "web", "down"),
        ])
        session.get.return_value = create_response(json_data=payload)

        page = client.list_monitors()

        assert [m.name for m in page.items] == ["api-server", "web"]
        assert page.items[0].is_up
        assert not page.items[1].is_up
        assert not page.has_more

    def test_next_page_is_not_followed(self, client, session):
        payload = BetterStackTestFactory.create_page(
            [BetterStackTestFactory.create_heartbeat()],
            next_url="https://uptime.example.com/api/v2/heartbeats?page=2",
        )
        session.get.return_value = create_response(json_data=payload)

        page = client.list_heartbeats()

        assert page.has_more
        assert session.get.call_count == 1

    def test_test_connection_returns_monitor_count(self, client, session):
        payload = BetterStackTestFactory.create_page([BetterStackTestFactory.create_monitor()])
        session.get.return_value = create_response(json_data=payload)

        assert client.test_connection() == 1


class TestErrors:
    """Test mapping of failures onto BetterStackAPIError."""

    def test_transport_error(self, client, session):
        session.get.side_effect = requests.ConnectionError("connection refused")

        with pytest.raises(BetterStackAPIError, match="connection refused"):
            client.list_incidents()

    @pytest.mark.parametrize("status_code", [401, 403])
    def test_rejected_token(self, client, session, status_code):
        session.get.return_value = create_response(status_code, json_data={"errors": "Invalid Team API token"})

        with pytest.raises(BetterStackAuthenticationError) as exc_info:
            client.list_monitors()

        assert exc_info.value.status_code == status_code

    def test_server_error_is_not_retried(self, client, session):
        session.get.return_value = create_response(500, json_data=ValueError("no json"), text="Internal Server Error")

        with pytest.raises(BetterStackAPIError) as exc_info:
            client.list_heartbeats()

        assert exc_info.value.status_code == 500
        assert "Internal Server Error" in str(exc_info.value)
        assert session.get.call_count == 1

    def test_error_detail_from_body(self, client, session):
        session.get.return_value = create_response(404, json_data={"errors": "Resource not found"})

        with pytest.raises(BetterStackAPIError, match="Resource not found"):
            client.get("/monitors/999")

    def test_non_json_body(self, client, session):
        session.get.return_value = create_response(200, json_data=ValueError("Expecting value"), text="<html>")

        with pytest.raises(BetterStackResponseError):
            client.list_monitors()

    def test_malformed_envelope(self, client, session):
        session.get.return_value = create_response(200, json_data={"monitors": []})

        with pytest.raises(BetterStackResponseError):
            client.list_monitors()
