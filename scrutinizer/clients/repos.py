"""Repositories resource client."""

from typing import TYPE_CHECKING, Any

from scrutinizer.clients._fields import get_bool, get_str, require_object
from scrutinizer.envelope import raise_for_error, read_envelope
from scrutinizer.providers import Provider
from scrutinizer.types.repos import AddRepositoryRequest, RepositorySummary

if TYPE_CHECKING:
    from scrutinizer.transport import HTTPTransport


def _parse_repository_summary(data: dict[str, Any]) -> RepositorySummary:
    return RepositorySummary(
        kind=get_str(data, "type"),
        created_at=get_str(data, "created_at"),
        private=get_bool(data, "private"),
        default_branch=get_str(data, "default_branch"),
        login=get_str(data, "your-login"),
        name=get_str(data, "name"),
    )


class ReposClient:
    """Client for repository-related operations."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the repos client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def get(
        self,
        provider: Provider | str,
        owner: str,
        name: str,
    ) -> RepositorySummary | None:
        """
        Get information about a monitored repository.

        Args:
            provider: Hosting provider (Provider.GITHUB or Provider.BITBUCKET)
            owner: Repository owner login
            name: Repository name

        Returns:
            RepositorySummary, or None if the service does not know the repository

        Raises:
            MissingCredentialError: If no access token is set
            TransportError: On network failure or timeout
            DecodeError: If the body is not valid JSON for a repository
            ServiceError: If the service returns an error payload
        """
        self.transport.auth.validate()
        tag = Provider.parse(provider).tag

        url = self.transport.url_for(tag, "repositories", owner, name)
        response = self.transport.send_authenticated_request("GET", url)

        envelope = read_envelope(response)
        if raise_for_error(envelope):
            return None

        return _parse_repository_summary(require_object(envelope.payload, "repository"))

    def add(
        self,
        provider: Provider | str,
        owner: str,
        name: str,
        config: str = "",
        global_config: str = "",
    ) -> None:
        """
        Register a repository for monitoring.

        Args:
            provider: Hosting provider (Provider.GITHUB or Provider.BITBUCKET)
            owner: Organization or user owning the repository
            name: Repository name
            config: Repository build configuration
            global_config: Name of a global configuration to apply

        Raises:
            MissingCredentialError: If no access token is set
            TransportError: On network failure or timeout
            DecodeError: If the response body is not valid JSON
            ServiceError: If the service returns an error payload
        """
        self.transport.auth.validate()
        tag = Provider.parse(provider).tag

        body = AddRepositoryRequest(
            name=name,
            organization=owner,
            config=config,
            global_config=global_config,
        )

        url = self.transport.url_for(tag)
        response = self.transport.send_authenticated_request("POST", url, body.to_json())

        # a "Not Found" envelope is not an error here either
        raise_for_error(read_envelope(response, allow_empty=True))
