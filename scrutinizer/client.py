"""
Scrutinizer SDK main client.

Provides the primary interface for interacting with the Scrutinizer API.
"""

from typing import Any

import httpx

from scrutinizer.auth import Auth
from scrutinizer.clients import ReportsClient, ReposClient
from scrutinizer.providers import Provider
from scrutinizer.transport import DEFAULT_ENDPOINT, DEFAULT_TIMEOUT, HTTPTransport
from scrutinizer.types.reports import ReportDetails
from scrutinizer.types.repos import RepositorySummary


class ScrutinizerClient:
    """
    Main client for interacting with the Scrutinizer API.

    Aggregates the resource clients and holds the credential.

    Example:
        ```python
        from scrutinizer import Provider, ScrutinizerClient

        with ScrutinizerClient(access_token="my-token") as client:
            repo = client.get_repo(Provider.GITHUB, "acme", "widget")
            if repo is None:
                client.add_repo(Provider.GITHUB, "acme", "widget")
        ```
    """

    DEFAULT_ENDPOINT = DEFAULT_ENDPOINT
    DEFAULT_TIMEOUT = DEFAULT_TIMEOUT

    def __init__(
        self,
        access_token: str,
        endpoint: str = DEFAULT_ENDPOINT,
        timeout: float = DEFAULT_TIMEOUT,
        http_transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize the Scrutinizer client.

        The token is checked when an operation runs, not here.

        Args:
            access_token: API access token
            endpoint: Base URL for API requests (default: https://scrutinizer-ci.com/api/)
            timeout: Request timeout in seconds (default: 5.0)
            http_transport: Optional httpx transport, mainly for tests
        """
        self.auth = Auth(access_token)

        self._transport = HTTPTransport(
            auth=self.auth,
            endpoint=endpoint,
            timeout=timeout,
            http_transport=http_transport,
        )
        self.endpoint = self._transport.endpoint
        self.timeout = timeout

        self.repos = ReposClient(self._transport)
        self.reports = ReportsClient(self._transport)

    def get_repo(
        self, provider: Provider | str, owner: str, name: str
    ) -> RepositorySummary | None:
        """Shortcut for ``client.repos.get``."""
        return self.repos.get(provider, owner, name)

    def add_repo(
        self,
        provider: Provider | str,
        owner: str,
        name: str,
        config: str = "",
        global_config: str = "",
    ) -> None:
        """Shortcut for ``client.repos.add``."""
        self.repos.add(provider, owner, name, config, global_config)

    def get_report_details(
        self, provider: Provider | str, owner: str, name: str
    ) -> ReportDetails | None:
        """Shortcut for ``client.reports.get_details``."""
        return self.reports.get_details(provider, owner, name)

    @property
    def transport(self) -> HTTPTransport:
        """Get the underlying HTTP transport (for advanced use cases)."""
        return self._transport

    def close(self) -> None:
        """Close the client and release resources."""
        self._transport.close()

    def __enter__(self) -> "ScrutinizerClient":
        """Context manager entry."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit - closes the client."""
        self.close()
