"""
HTTP Transport for Scrutinizer SDK.

Handles HTTP communication: appends the access token to every request URL,
applies the client timeout and maps network failures onto SDK exceptions.
Status codes and bodies are left to the caller.
"""

import time
from typing import Any

import httpx

from scrutinizer.auth import Auth
from scrutinizer.exceptions import RequestTimeoutError, TransportError
from scrutinizer.logging import log_http_request, log_http_response

DEFAULT_ENDPOINT = "https://scrutinizer-ci.com/api/"
DEFAULT_TIMEOUT = 5.0

_FRAMING_HEADERS = {"content-encoding", "content-length", "transfer-encoding"}


def with_access_token(url: str, token: str) -> str:
    """Append the access_token query parameter to a URL."""
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}access_token={token}"


class HTTPTransport:
    """
    HTTP transport layer with access-token authentication.

    Each call performs exactly one round trip. Nothing is retried.
    """

    def __init__(
        self,
        auth: Auth,
        endpoint: str = DEFAULT_ENDPOINT,
        timeout: float = DEFAULT_TIMEOUT,
        http_transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize HTTP transport.

        Args:
            auth: Credential holder providing the access token
            endpoint: Base URL of the API (e.g., "https://scrutinizer-ci.com/api/")
            timeout: Request timeout in seconds, covering the whole round trip
            http_transport: Optional httpx transport (e.g. httpx.MockTransport)
        """
        self.auth = auth
        self.endpoint = endpoint if endpoint.endswith("/") else endpoint + "/"
        self.timeout = timeout

        # httpx timeouts apply per phase; the overall deadline is checked
        # in send_authenticated_request
        self._client = httpx.Client(
            timeout=timeout,
            headers={"Content-Type": "application/json"},
            follow_redirects=True,
            transport=http_transport,
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def url_for(self, *segments: str) -> str:
        """Build an absolute URL from path segments below the endpoint."""
        return self.endpoint + "/".join(segments)

    def send_authenticated_request(
        self,
        method: str,
        url: str,
        body: str = "",
    ) -> httpx.Response:
        """
        Send a request carrying the access token.

        The timeout bounds the whole round trip, redirects and body
        included. Every stalled network wait is also capped at the timeout.

        Args:
            method: HTTP method (GET, POST, etc.)
            url: Absolute request URL, with or without a query string
            body: Literal request body; nothing is sent when empty

        Returns:
            The response with its body fully read, uninterpreted

        Raises:
            RequestTimeoutError: If the round trip exceeds the timeout
            TransportError: On any other network or request-construction failure
        """
        request_url = with_access_token(url, self.auth.access_token)
        content = body.encode("utf-8") if body else None

        log_http_request(method, request_url, body or None)
        started = time.perf_counter()
        deadline = started + self.timeout

        def check_deadline() -> None:
            if time.perf_counter() > deadline:
                raise RequestTimeoutError(
                    f"{method} {url} timed out after {self.timeout}s"
                )

        try:
            request = self._client.build_request(method, request_url, content=content)
            streamed = self._client.send(request, stream=True)
            try:
                check_deadline()
                chunks: list[bytes] = []
                for chunk in streamed.iter_bytes():
                    chunks.append(chunk)
                    check_deadline()
            finally:
                streamed.close()
        except httpx.TimeoutException as e:
            raise RequestTimeoutError(
                f"{method} {url} timed out after {self.timeout}s"
            ) from e
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise TransportError(f"{method} {url} failed: {e}") from e

        # the body is already decoded, so drop the framing and encoding headers
        headers = [
            (name, value)
            for name, value in streamed.headers.multi_items()
            if name.lower() not in _FRAMING_HEADERS
        ]
        response = httpx.Response(
            status_code=streamed.status_code,
            headers=headers,
            content=b"".join(chunks),
            request=streamed.request,
        )
        response.history = streamed.history

        elapsed_ms = (time.perf_counter() - started) * 1000
        log_http_response(response.status_code, request_url, elapsed_ms=elapsed_ms)

        return response
