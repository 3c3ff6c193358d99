"""httpx-backed HTTP executor.

Performs exactly one outbound request per descriptor and never raises:
timeouts, connection failures and client errors come back as
ExecutionFailure. No retries.

The timeout bounds the whole call (connect, send and read), not each phase
separately.
"""

import asyncio
import time
from urllib.parse import urlsplit

import httpx
import structlog

from apihub.domain.value_objects import ExecutionResult, RequestDescriptor
from apihub.infrastructure.http.response_classifier import (
    classify_exception,
    classify_response,
)


class HttpxExecutor:
    """Execute test requests with httpx.AsyncClient.

    A fresh client is opened per call so no cookies or connections leak
    between unrelated test requests.

    Attributes:
        _follow_redirects: Whether 3xx responses are followed.
        _logger: Structured logger.

    Example:
        >>> executor = HttpxExecutor()
        >>> result = await executor.execute(descriptor)
        >>> isinstance(result, ExecutionSuccess)
        True
    """

    def __init__(self, *, follow_redirects: bool = True) -> None:
        """Initialize executor.

        Args:
            follow_redirects: Follow 3xx responses (default True).
        """
        self._follow_redirects = follow_redirects
        self._logger = structlog.get_logger(__name__)

    async def execute(self, descriptor: RequestDescriptor) -> ExecutionResult:
        """Send the request and classify the outcome.

        Args:
            descriptor: Normalized request.

        Returns:
            ExecutionSuccess for any HTTP response, ExecutionFailure otherwise.
        """
        timeout_s = descriptor.timeout_ms / 1000
        started = time.perf_counter()

        try:
            async with asyncio.timeout(timeout_s):
                async with httpx.AsyncClient(
                    timeout=timeout_s,
                    follow_redirects=self._follow_redirects,
                ) as client:
                    response = await client.request(
                        method=descriptor.method.value,
                        url=descriptor.url,
                        headers=descriptor.headers,
                        content=descriptor.body_text,
                    )
        except Exception as e:
            failure = classify_exception(e, _elapsed_ms(started))
            self._logger.debug(
                "outbound_request_failed",
                method=descriptor.method.value,
                host=urlsplit(descriptor.url).hostname,
                kind=failure.kind.value,
                error_type=type(e).__name__,
            )
            return failure

        return classify_response(response, _elapsed_ms(started))


def _elapsed_ms(started: float) -> int:
    return int((time.perf_counter() - started) * 1000)
