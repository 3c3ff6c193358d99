"""Dispatch-time failure kinds for outbound test requests."""

from enum import Enum


class FailureKind(str, Enum):
    """Why an outbound call produced no HTTP response.

    An HTTP error status (4xx/5xx) is NOT a failure; it is a successful
    execution that carries that status.
    """

    TIMEOUT = "timeout"
    """No response within the requested timeout."""

    NETWORK = "network"
    """DNS resolution or connection failure."""

    HTTP_CLIENT_ERROR = "http_client_error"
    """Any other error raised by the HTTP client."""

    UNKNOWN = "unknown"
    """Anything that is not an HTTP client error."""
