"""Scrutinizer SDK exception classes."""


class ScrutinizerError(Exception):
    """Base exception for all Scrutinizer SDK errors."""

    def __init__(self, message: str, code: str = "SCRUTINIZER_ERROR") -> None:
        self.code = code
        self.message = message
        super().__init__(message)


class ConfigurationError(ScrutinizerError):
    """Raised when SDK configuration is invalid or missing."""

    def __init__(self, message: str, code: str = "CONFIGURATION_ERROR") -> None:
        super().__init__(message, code)


class MissingCredentialError(ConfigurationError):
    """Raised when an operation is attempted without an access token."""

    def __init__(self, message: str = "access token needs to be set") -> None:
        super().__init__(message, "MISSING_CREDENTIAL")


class ValidationError(ScrutinizerError):
    """Raised on invalid caller arguments."""

    def __init__(self, message: str) -> None:
        super().__init__(message, "VALIDATION_ERROR")


class TransportError(ScrutinizerError):
    """Raised when the HTTP round trip itself fails."""

    def __init__(self, message: str, code: str = "TRANSPORT_ERROR") -> None:
        super().__init__(message, code)


class RequestTimeoutError(TransportError):
    """Raised when the round trip exceeds the client timeout."""

    def __init__(self, message: str) -> None:
        super().__init__(message, "TIMEOUT")


class DecodeError(ScrutinizerError):
    """Raised when a response body does not decode into the expected shape."""

    def __init__(self, message: str, body: str | None = None) -> None:
        super().__init__(message, "DECODE_ERROR")
        self.body = body


class ServiceError(ScrutinizerError):
    """Raised when the service answers with an error payload."""

    def __init__(
        self,
        message: str,
        description: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(f"{message}, {description}", "SERVICE_ERROR")
        self.message = message
        self.description = description
        self.status_code = status_code
