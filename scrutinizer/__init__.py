"""Scrutinizer SDK - Python client for the Scrutinizer code-quality API."""

from scrutinizer.auth import Auth
from scrutinizer.client import ScrutinizerClient
from scrutinizer.envelope import ErrorEnvelope, ResponseEnvelope
from scrutinizer.exceptions import (
    ConfigurationError,
    DecodeError,
    MissingCredentialError,
    RequestTimeoutError,
    ScrutinizerError,
    ServiceError,
    TransportError,
    ValidationError,
)
from scrutinizer.logging import configure_logging, get_logger
from scrutinizer.providers import Provider
from scrutinizer.transport import HTTPTransport
from scrutinizer.types import AddRepositoryRequest, ReportDetails, RepositorySummary

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Main client
    "ScrutinizerClient",
    "Auth",
    "Provider",
    # Exceptions
    "ScrutinizerError",
    "ConfigurationError",
    "MissingCredentialError",
    "ValidationError",
    "TransportError",
    "RequestTimeoutError",
    "DecodeError",
    "ServiceError",
    # Envelope
    "ErrorEnvelope",
    "ResponseEnvelope",
    # Types
    "RepositorySummary",
    "AddRepositoryRequest",
    "ReportDetails",
    # Transport
    "HTTPTransport",
    # Logging
    "configure_logging",
    "get_logger",
]
