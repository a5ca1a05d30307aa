"""Shared fixtures for the Scrutinizer SDK test suite."""

from collections.abc import Callable, Generator
from typing import Any

import httpx
import pytest

from scrutinizer.client import ScrutinizerClient
from scrutinizer.testing.fixtures import (  # noqa: F401
    mock_access_token,
    mock_client,
    mock_client_with_repo,
    mock_client_without_repo,
    report_details_payload,
    repository_payload,
    sample_report_details,
    sample_repository_summary,
)

TEST_ENDPOINT = "https://scrutinizer.test/api/"
TEST_TOKEN = "test-token"


class RecordingHandler:
    """httpx.MockTransport handler that records requests and serves one canned response."""

    def __init__(
        self,
        status_code: int = 200,
        json_body: Any = None,
        text: str | None = None,
        exc: Exception | None = None,
    ) -> None:
        self.status_code = status_code
        self.json_body = json_body
        self.text = text
        self.exc = exc
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.json_body)

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "No request was sent"
        return self.requests[-1]


@pytest.fixture
def make_client() -> Generator[Callable[..., ScrutinizerClient], None, None]:
    """Build ScrutinizerClients wired to a RecordingHandler."""
    clients: list[ScrutinizerClient] = []

    def factory(
        handler: RecordingHandler,
        access_token: str = TEST_TOKEN,
        endpoint: str = TEST_ENDPOINT,
    ) -> ScrutinizerClient:
        client = ScrutinizerClient(
            access_token=access_token,
            endpoint=endpoint,
            http_transport=httpx.MockTransport(handler),
        )
        clients.append(client)
        return client

    yield factory

    for client in clients:
        client.close()
