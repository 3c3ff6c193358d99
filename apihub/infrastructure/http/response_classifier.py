"""Response classifier.

Maps what httpx hands back (a response, or the exception it raised) into
the ExecutionResult variants. Pure functions, no logging.

Order matters when classifying exceptions: httpx.ConnectTimeout is both a
TimeoutException and a TransportError, and it must come out as a timeout.
"""

import httpx

from apihub.core.constants import (
    NETWORK_ERROR_MESSAGE,
    TIMEOUT_ERROR_MESSAGE,
    UNKNOWN_ERROR_MESSAGE,
)
from apihub.domain.enums import FailureKind
from apihub.domain.value_objects import ExecutionFailure, ExecutionSuccess


def classify_response(response: httpx.Response, elapsed_ms: int) -> ExecutionSuccess:
    """Wrap a received response.

    Any status code counts: a 404 or a 503 is still a response.

    The body is decoded with the response charset (UTF-8 when none is
    declared). Decoding is lossy: undecodable bytes become U+FFFD, while
    size_bytes still counts the raw bytes received.

    Args:
        response: Fully read httpx response.
        elapsed_ms: Milliseconds from dispatch to completion.

    Returns:
        ExecutionSuccess with the raw text body and its byte size.
    """
    return ExecutionSuccess(
        status=response.status_code,
        status_text=response.reason_phrase,
        headers=dict(response.headers.items()),
        raw_body=response.text,
        elapsed_ms=elapsed_ms,
        size_bytes=len(response.content),
    )


def classify_exception(exc: BaseException, elapsed_ms: int) -> ExecutionFailure:
    """Classify a dispatch exception.

    Args:
        exc: Exception raised while sending or reading.
        elapsed_ms: Milliseconds from dispatch to the failure.

    Returns:
        ExecutionFailure of kind timeout, network, http_client_error or
        unknown.
    """
    if isinstance(exc, (httpx.TimeoutException, TimeoutError)):
        return ExecutionFailure(
            kind=FailureKind.TIMEOUT,
            message=TIMEOUT_ERROR_MESSAGE,
            elapsed_ms=elapsed_ms,
        )

    if isinstance(exc, httpx.NetworkError):
        return ExecutionFailure(
            kind=FailureKind.NETWORK,
            message=NETWORK_ERROR_MESSAGE,
            elapsed_ms=elapsed_ms,
        )

    if isinstance(exc, httpx.HTTPError):
        status = 0
        if isinstance(exc, httpx.HTTPStatusError):
            status = exc.response.status_code
        return ExecutionFailure(
            kind=FailureKind.HTTP_CLIENT_ERROR,
            message=str(exc) or type(exc).__name__,
            elapsed_ms=elapsed_ms,
            status=status,
        )

    return ExecutionFailure(
        kind=FailureKind.UNKNOWN,
        message=str(exc) or UNKNOWN_ERROR_MESSAGE,
        elapsed_ms=elapsed_ms,
    )
