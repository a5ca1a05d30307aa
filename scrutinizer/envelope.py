"""
Response envelope decoding.

Every response body is decoded exactly once and tagged as either a success
payload or an error envelope ({"message": ..., "description": ...}).
"""

from dataclasses import dataclass
from typing import Any

import httpx

from scrutinizer.exceptions import DecodeError, ServiceError

NOT_FOUND_MESSAGE = "Not Found"


@dataclass(frozen=True)
class ErrorEnvelope:
    """Error payload returned by the service."""

    message: str
    description: str

    @classmethod
    def from_payload(cls, data: Any) -> "ErrorEnvelope | None":
        """Return an envelope if data has a non-empty message and description."""
        if not isinstance(data, dict):
            return None
        message = data.get("message")
        description = data.get("description")
        if isinstance(message, str) and isinstance(description, str) and message and description:
            return cls(message=message, description=description)
        return None

    @property
    def is_not_found(self) -> bool:
        return self.message == NOT_FOUND_MESSAGE


@dataclass(frozen=True)
class ResponseEnvelope:
    """Decoded response: exactly one of payload or error is set."""

    status_code: int
    payload: Any = None
    error: ErrorEnvelope | None = None

    @property
    def is_error(self) -> bool:
        return self.error is not None


def read_envelope(response: httpx.Response, allow_empty: bool = False) -> ResponseEnvelope:
    """
    Decode a response body into a ResponseEnvelope.

    Args:
        response: Response returned by the transport
        allow_empty: Treat an empty body as an empty JSON object

    Raises:
        DecodeError: If the body is not valid JSON
    """
    text = response.text
    if not text.strip():
        if not allow_empty:
            raise DecodeError(
                f"Empty response body (HTTP {response.status_code})", body=text
            )
        data: Any = {}
    else:
        try:
            data = response.json()
        except ValueError as e:
            raise DecodeError(f"Invalid JSON in response body: {e}", body=text) from e

    error = ErrorEnvelope.from_payload(data)
    if error is None and response.status_code >= 400:
        error = ErrorEnvelope(
            message=f"HTTP {response.status_code}",
            description=response.reason_phrase or "request failed",
        )

    if error is not None:
        return ResponseEnvelope(status_code=response.status_code, error=error)
    return ResponseEnvelope(status_code=response.status_code, payload=data)


def raise_for_error(envelope: ResponseEnvelope) -> bool:
    """
    Raise ServiceError for error envelopes other than "Not Found".

    Returns:
        True if the service reported the resource as not found, False on success
    """
    if envelope.error is None:
        return False
    if envelope.error.is_not_found:
        return True
    raise ServiceError(
        envelope.error.message,
        envelope.error.description,
        status_code=envelope.status_code,
    )
