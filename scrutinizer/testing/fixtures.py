"""
Pytest fixtures for Scrutinizer SDK testing.

Provides common fixtures for testing applications that use the Scrutinizer SDK.
"""

from typing import Any, Generator

import pytest

from scrutinizer.testing.factories import (
    create_mock_report_details,
    create_mock_repository_summary,
    sample_report_details_payload,
    sample_repository_payload,
)
from scrutinizer.testing.mock import MockScrutinizerClient
from scrutinizer.types.reports import ReportDetails
from scrutinizer.types.repos import RepositorySummary


# ============================================================================
# Mock Client Fixtures
# ============================================================================


@pytest.fixture
def mock_client() -> Generator[MockScrutinizerClient, None, None]:
    """
    Provide a MockScrutinizerClient for testing.

    Example:
        ```python
        def test_my_feature(mock_client):
            mock_client.repos.configure_get(not_found=True)
            result = my_function(mock_client)
            assert mock_client.was_called("repos.get")
        ```
    """
    client = MockScrutinizerClient(access_token="test-token")
    yield client
    client.reset()


@pytest.fixture
def mock_access_token() -> str:
    """Provide a test access token."""
    return "test-token"


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def sample_repository_summary() -> RepositorySummary:
    """Provide a sample RepositorySummary object."""
    return create_mock_repository_summary(login="sample-owner", name="sample-repo")


@pytest.fixture
def sample_report_details() -> ReportDetails:
    """Provide a sample ReportDetails object."""
    return create_mock_report_details(login="sample-owner", name="sample-repo")


@pytest.fixture
def repository_payload() -> dict[str, Any]:
    """Provide a repository response body."""
    return sample_repository_payload()


@pytest.fixture
def report_details_payload() -> dict[str, Any]:
    """Provide a fully populated report-details response body."""
    return sample_report_details_payload()


# ============================================================================
# Pre-configured Mock Client Fixtures
# ============================================================================


@pytest.fixture
def mock_client_with_repo(
    mock_client: MockScrutinizerClient,
    sample_repository_summary: RepositorySummary,
    sample_report_details: ReportDetails,
) -> MockScrutinizerClient:
    """
    Provide a mock client that knows one repository and its report.

    Example:
        ```python
        def test_repo_operations(mock_client_with_repo):
            repo = mock_client_with_repo.get_repo("g", "sample-owner", "sample-repo")
            assert repo.name == "sample-repo"
        ```
    """
    mock_client.repos.configure_get(response=sample_repository_summary)
    mock_client.reports.configure_get_details(response=sample_report_details)
    return mock_client


@pytest.fixture
def mock_client_without_repo(mock_client: MockScrutinizerClient) -> MockScrutinizerClient:
    """Provide a mock client for which every lookup is "Not Found"."""
    mock_client.repos.configure_get(not_found=True)
    mock_client.reports.configure_get_details(not_found=True)
    return mock_client
