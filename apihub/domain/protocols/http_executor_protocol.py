"""HTTP executor protocol.

Port for performing exactly one outbound HTTP call per request
descriptor. Implementations never raise: every outcome, including
timeouts and connection failures, is returned as an ExecutionResult.
"""

from typing import Protocol

from apihub.domain.value_objects import ExecutionResult, RequestDescriptor


class HttpExecutorProtocol(Protocol):
    """Protocol for outbound request execution."""

    async def execute(self, descriptor: RequestDescriptor) -> ExecutionResult:
        """Perform the request described by ``descriptor``.

        Args:
            descriptor: Normalized request (absolute URL, bounded timeout).

        Returns:
            ExecutionSuccess for any HTTP response (1xx-5xx),
            ExecutionFailure when no response was obtained.
        """
        ...
