"""Outcome of executing one outbound request.

Exactly one of two shapes:

- ExecutionSuccess: an HTTP response arrived, whatever its status (a 404
  or a 500 is still a success at this level).
- ExecutionFailure: no response, classified by FailureKind.

Both carry elapsed_ms, measured from just before dispatch until the
outcome was known.
"""

from dataclasses import dataclass, field

from apihub.domain.enums import FailureKind


@dataclass(frozen=True, slots=True, kw_only=True)
class ExecutionSuccess:
    """An HTTP response was received.

    Attributes:
        status: HTTP status code.
        status_text: Reason phrase (may be empty, e.g. over HTTP/2).
        headers: Response headers.
        raw_body: Body decoded as text, never parsed.
        elapsed_ms: Wall-clock milliseconds.
        size_bytes: Length of the received body in bytes.
    """

    status: int
    status_text: str
    headers: dict[str, str] = field(default_factory=dict)
    raw_body: str = ""
    elapsed_ms: int
    size_bytes: int


@dataclass(frozen=True, slots=True, kw_only=True)
class ExecutionFailure:
    """No usable HTTP response.

    Attributes:
        kind: Failure classification.
        message: User-facing message.
        elapsed_ms: Wall-clock milliseconds.
        status: Last known HTTP status, 0 if none.
    """

    kind: FailureKind
    message: str
    elapsed_ms: int
    status: int = 0


type ExecutionResult = ExecutionSuccess | ExecutionFailure
