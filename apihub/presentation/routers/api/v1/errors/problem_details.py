"""RFC 9457 Problem Details models.

RFC 9457: https://www.rfc-editor.org/rfc/rfc9457
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Individual field-specific error.

    Examples:
        >>> ErrorDetail(field="url", code="missing_url", message="URL is required")
    """

    field: str = Field(..., description="Field name")
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")


class ProblemDetails(BaseModel):
    """RFC 9457 Problem Details for HTTP APIs.

    Attributes:
        type: URI reference identifying the problem type
        title: Short, human-readable summary of the problem type
        status: HTTP status code for this occurrence
        detail: Human-readable explanation specific to this occurrence
        instance: Request path of the occurrence
        errors: Field-specific errors (validation failures only)
        trace_id: Request trace ID for debugging

    Examples:
        >>> ProblemDetails(
        ...     type="https://apihub.dev/errors/not_found",
        ...     title="Resource Not Found",
        ...     status=404,
        ...     detail="API not found",
        ...     instance="/api/v1/apis/0190...",
        ... )
    """

    type: str = Field(
        ...,
        description="URI reference identifying the problem type",
        examples=["https://apihub.dev/errors/command_validation_failed"],
    )
    title: str = Field(..., description="Short summary", examples=["Validation Failed"])
    status: int = Field(..., description="HTTP status code", examples=[400])
    detail: str = Field(
        ..., description="Human-readable explanation", examples=["URL is required"]
    )
    instance: str = Field(
        ..., description="Request path", examples=["/api/v1/test-requests"]
    )
    errors: list[ErrorDetail] | None = Field(None, description="Field errors")
    trace_id: str | None = Field(None, description="Request trace ID")
