"""Outbound test request DTO.

TestRequestResult is the flat shape returned to the UI for both kinds
of ExecutionResult:

    success=True   status, status_text, headers, data, response_time, size
    success=False  error, error_kind, status (0 or last known), response_time
"""

from dataclasses import dataclass

from apihub.domain.value_objects import ExecutionFailure, ExecutionResult


@dataclass
class TestRequestResult:
    """Result of one outbound test request."""

    __test__ = False  # not a pytest test class

    success: bool
    status: int
    response_time: int
    status_text: str | None = None
    headers: dict[str, str] | None = None
    data: str | None = None
    size: int | None = None
    error: str | None = None
    error_kind: str | None = None

    @classmethod
    def from_execution(cls, result: ExecutionResult) -> "TestRequestResult":
        """Flatten an ExecutionResult.

        Args:
            result: Executor outcome.

        Returns:
            TestRequestResult.
        """
        if isinstance(result, ExecutionFailure):
            return cls(
                success=False,
                status=result.status,
                response_time=result.elapsed_ms,
                error=result.message,
                error_kind=result.kind.value,
            )

        return cls(
            success=True,
            status=result.status,
            response_time=result.elapsed_ms,
            status_text=result.status_text,
            headers=result.headers,
            data=result.raw_body,
            size=result.size_bytes,
        )
