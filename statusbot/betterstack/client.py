"""
Better Stack Uptime API Client

Read-only access to the Better Stack Uptime REST API (v2) using a bearer token.
One client is built at startup and shared by every command handler; it holds no
per-request state.
"""

import logging
from typing import Any, Dict, Optional
import requests

from ..core.config import BetterStackConfig
from ..core.exceptions import (
    BetterStackAPIError,
    BetterStackAuthenticationError,
    BetterStackResponseError,
)
from .models import Heartbeat, Incident, Monitor, Page


logger = logging.getLogger(__name__)


class BetterStackClient:
    """
    Better Stack Uptime API client.

    Supports:
    - Bearer token authentication
    - Listing monitors, incidents and heartbeats (first page only)
    - Mapping transport, HTTP and decoding failures onto BetterStackAPIError

    No retries are attempted; a failed call fails the command that made it.

    Usage:
        config = BetterStackConfig(api_key='...')
        client = BetterStackClient(config)
        page = client.list_monitors()
    """

    def __init__(self, config: BetterStackConfig, session: Optional[requests.Session] = None):
        """
        Initialize Better Stack client.

        Args:
            config: BetterStackConfig with API key and base URL
            session: Optional pre-built requests session (tests)
        """
        self.config = config
        self.base_url = config.base_url
        self.timeout = config.timeout_seconds

        self.session = session or requests.Session()
        self.session.headers.update({
            "Authorization": f"Bearer {config.api_key}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        })

        logger.info(f"BetterStackClient initialized (base URL: {self.base_url})")

    def get(self, endpoint: str) -> Dict[str, Any]:
        """
        GET request to the Better Stack API.

        Args:
            endpoint: API endpoint (e.g., '/monitors')

        Returns:
            Decoded JSON body

        Raises:
            BetterStackAuthenticationError: On 401/403
            BetterStackAPIError: On transport errors or any other non-2xx status
            BetterStackResponseError: If the body is not JSON
        """
        url = f"{self.base_url}{endpoint}" if endpoint.startswith("/") else f"{self.base_url}/{endpoint}"

        try:
            logger.debug(f"GET {url}")
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"GET {url} failed: {e}")
            raise BetterStackAPIError(f"Request to {endpoint} failed: {e}") from e

        if response.status_code in (401, 403):
            logger.error(f"GET {url} rejected: {response.status_code}")
            raise BetterStackAuthenticationError(
                f"Better Stack rejected the API token ({response.status_code})",
                status_code=response.status_code,
            )

        if not 200 <= response.status_code < 300:
            error_msg = f"Better Stack API request failed: {response.status_code} - {self._error_detail(response)}"
            logger.error(f"GET {url} failed: {error_msg}")
            raise BetterStackAPIError(error_msg, status_code=response.status_code)

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"GET {url} returned a non-JSON body: {e}")
            raise BetterStackResponseError(
                f"Invalid JSON from {endpoint}: {e}",
                status_code=response.status_code,
            ) from e

    @staticmethod
    def _error_detail(response: requests.Response) -> str:
        """Best-effort error text from an error response."""
        try:
            error_data = response.json()
        except ValueError:
            return response.text

        if isinstance(error_data, dict) and error_data.get("errors"):
            return str(error_data["errors"])
        return response.text

    def _list(self, endpoint: str, parse_item) -> Page:
        page = Page.from_api(self.get(endpoint), parse_item)

        logger.debug(f"Fetched {len(page.items)} items from {endpoint}")
        if page.has_more:
            logger.warning(f"{endpoint} has more pages; only the first page is used")

        return page

    def list_monitors(self) -> Page[Monitor]:
        """List monitors (GET /monitors, first page)."""
        return self._list("/monitors", Monitor.from_api)

    def list_incidents(self) -> Page[Incident]:
        """List incidents (GET /incidents, first page)."""
        return self._list("/incidents", Incident.from_api)

    def list_heartbeats(self) -> Page[Heartbeat]:
        """List heartbeats (GET /heartbeats, first page)."""
        return self._list("/heartbeats", Heartbeat.from_api)

    def test_connection(self) -> int:
        """
        Test API access by listing monitors.

        Returns:
            Number of monitors on the first page

        Raises:
            BetterStackAPIError: If the request fails
        """
        logger.info("Testing Better Stack API connection...")
        page = self.list_monitors()
        logger.info(f"✓ Better Stack API connection successful ({len(page.items)} monitors)")
        return len(page.items)

    def close(self):
        """Close the underlying HTTP session."""
        self.session.close()
