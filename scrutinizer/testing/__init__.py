"""Scrutinizer SDK testing utilities.

Provides mock clients, sample payloads and fixtures for testing applications
that use the Scrutinizer SDK.
"""

from scrutinizer.testing.factories import (
    create_mock_report_details,
    create_mock_repository_summary,
    sample_report_details_payload,
    sample_repository_payload,
)
from scrutinizer.testing.mock import MockCall, MockResponse, MockScrutinizerClient

__all__ = [
    # Mock client
    "MockScrutinizerClient",
    "MockCall",
    "MockResponse",
    # Helper functions
    "create_mock_repository_summary",
    "create_mock_report_details",
    "sample_repository_payload",
    "sample_report_details_payload",
]
