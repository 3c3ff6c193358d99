"""Shared DomainError subclasses.

ValidationError is what the request normalizer returns for input that
cannot be dispatched (no method, unsupported method, no URL, relative
URL). The field name ends up in the problem response's ``errors`` list.

    Failure(error=ValidationError(
        code=ErrorCode.MISSING_URL,
        message="URL is required",
        field="url",
    ))
"""

from dataclasses import dataclass

from apihub.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Rejected input.

    Attributes:
        field: Offending request field ("method", "url"), if known.
    """

    field: str | None = None
