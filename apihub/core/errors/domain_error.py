"""DomainError: errors carried as data inside Failure.

Nothing in the request pipeline, the vault or the handlers raises these;
they are returned (``Failure(error=ValidationError(...))``) and turned
into problem details by the presentation layer.
"""

from dataclasses import dataclass

from apihub.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base of all domain errors. Not an Exception.

    Attributes:
        code: Machine-readable code, rendered as ``errors[].code``.
        message: Text shown to the client.
        details: Extra key/value context for logs.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.message}"
