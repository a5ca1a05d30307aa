"""
Scrutinizer SDK logging utilities.

Provides configurable logging for HTTP requests/responses.
Ensures access tokens never reach log output.
"""

import logging
import re

# Create SDK-specific loggers
_sdk_logger = logging.getLogger("scrutinizer")
_http_logger = logging.getLogger("scrutinizer.http")

# Patterns for sensitive data that should be masked
_ACCESS_TOKEN_PATTERN = re.compile(r"([?&]access_token=)[^&#\s]*")

_SENSITIVE_PATTERNS = [
    # Query-string token, as appended to every request URL
    (_ACCESS_TOKEN_PATTERN, r"\1[REDACTED]"),
    # Secret/token patterns in serialized payloads
    (re.compile(r"(secret|token|password|api_key)['\"]?\s*[:=]\s*['\"][^'\"]+['\"]", re.IGNORECASE), r"\1: [REDACTED]"),
]


def configure_logging(
    level: int = logging.INFO,
    http_level: int | None = None,
    handler: logging.Handler | None = None,
    format_string: str | None = None,
) -> None:
    """
    Configure Scrutinizer SDK logging.

    Args:
        level: Default log level for all SDK loggers (default: INFO)
        http_level: Log level for HTTP request/response logging (default: same as level)
        handler: Custom handler to use (default: StreamHandler to stderr)
        format_string: Custom format string (default: includes timestamp, level, logger name)

    Example:
        ```python
        import logging
        from scrutinizer.logging import configure_logging

        # Enable debug logging for HTTP requests
        configure_logging(level=logging.INFO, http_level=logging.DEBUG)
        ```
    """
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    formatter = logging.Formatter(format_string)

    if handler is None:
        handler = logging.StreamHandler()

    handler.setFormatter(formatter)

    _sdk_logger.setLevel(level)
    _sdk_logger.addHandler(handler)

    _http_logger.setLevel(http_level if http_level is not None else level)


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Get a Scrutinizer SDK logger.

    Args:
        name: Logger name suffix (e.g., "http"). If None, returns main SDK logger.
    """
    if name is None:
        return _sdk_logger
    return logging.getLogger(f"scrutinizer.{name}")


def mask_access_token(url: str) -> str:
    """Replace the access_token query value of a URL with a placeholder."""
    return _ACCESS_TOKEN_PATTERN.sub(r"\1[REDACTED]", url)


def mask_sensitive_data(text: str) -> str:
    """
    Mask sensitive data in a string.

    Replaces access tokens and other secret-looking values with
    redacted placeholders.
    """
    result = text
    for pattern, replacement in _SENSITIVE_PATTERNS:
        result = pattern.sub(replacement, result)
    return result


def log_http_request(
    method: str,
    url: str,
    body: str | None = None,
) -> None:
    """
    Log an HTTP request at DEBUG level with sensitive data masked.

    Args:
        method: HTTP method (GET, POST, etc.)
        url: Request URL, including the access_token parameter
        body: Raw request body (optional)
    """
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    log_parts = [f"{method} {mask_access_token(url)}"]

    if body:
        log_parts.append(f"body={mask_sensitive_data(body)}")

    _http_logger.debug(" | ".join(log_parts))


def log_http_response(
    status_code: int,
    url: str,
    elapsed_ms: float | None = None,
) -> None:
    """
    Log an HTTP response at DEBUG level with sensitive data masked.

    Args:
        status_code: HTTP status code
        url: Request URL
        elapsed_ms: Request duration in milliseconds (optional)
    """
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    log_parts = [f"Response {status_code} from {mask_access_token(url)}"]

    if elapsed_ms is not None:
        log_parts.append(f"elapsed={elapsed_ms:.2f}ms")

    _http_logger.debug(" | ".join(log_parts))


# Export public API
__all__ = [
    "configure_logging",
    "get_logger",
    "mask_access_token",
    "mask_sensitive_data",
    "log_http_request",
    "log_http_response",
]
