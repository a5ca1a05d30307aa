"""
Pytest plugin for Scrutinizer SDK testing fixtures.

This module re-exports all fixtures from fixtures.py so they can be
loaded as a pytest plugin.

To use these fixtures in your tests, add this to your conftest.py:

    pytest_plugins = ["scrutinizer.testing.conftest"]
"""

# Re-export all fixtures for pytest auto-discovery
from scrutinizer.testing.fixtures import (
    mock_access_token,
    mock_client,
    mock_client_with_repo,
    mock_client_without_repo,
    report_details_payload,
    repository_payload,
    sample_report_details,
    sample_repository_summary,
)

__all__ = [
    "mock_client",
    "mock_access_token",
    "sample_repository_summary",
    "sample_report_details",
    "repository_payload",
    "report_details_payload",
    "mock_client_with_repo",
    "mock_client_without_repo",
]
