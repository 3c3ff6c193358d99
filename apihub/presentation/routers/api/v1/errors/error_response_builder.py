"""Error response builder for RFC 9457 Problem Details."""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from apihub.application.errors import ApplicationError, ApplicationErrorCode
from apihub.core.config import settings
from apihub.core.errors import ValidationError
from apihub.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

_STATUS_AND_TITLE: dict[ApplicationErrorCode, tuple[int, str]] = {
    ApplicationErrorCode.COMMAND_VALIDATION_FAILED: (
        status.HTTP_400_BAD_REQUEST,
        "Validation Failed",
    ),
    ApplicationErrorCode.QUERY_VALIDATION_FAILED: (
        status.HTTP_400_BAD_REQUEST,
        "Validation Failed",
    ),
    ApplicationErrorCode.COMMAND_EXECUTION_FAILED: (
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Command Execution Failed",
    ),
    ApplicationErrorCode.QUERY_FAILED: (
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Query Failed",
    ),
    ApplicationErrorCode.QUERY_EXECUTION_FAILED: (
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Query Execution Failed",
    ),
    ApplicationErrorCode.EXTERNAL_SERVICE_ERROR: (
        status.HTTP_502_BAD_GATEWAY,
        "External Service Error",
    ),
    ApplicationErrorCode.NOT_FOUND: (
        status.HTTP_404_NOT_FOUND,
        "Resource Not Found",
    ),
    ApplicationErrorCode.CONFLICT: (
        status.HTTP_409_CONFLICT,
        "Resource Conflict",
    ),
}


class ErrorResponseBuilder:
    """Build RFC 9457 Problem Details error responses.

    Example:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.NOT_FOUND,
        ...     message="API not found",
        ... )
        >>> response = ErrorResponseBuilder.from_application_error(
        ...     error=error,
        ...     request=request,
        ...     trace_id=get_trace_id() or "",
        ... )
    """

    @staticmethod
    def from_application_error(
        error: ApplicationError,
        request: Request,
        trace_id: str,
    ) -> JSONResponse:
        """Convert ApplicationError to RFC 9457 JSON response.

        Args:
            error: Application layer error to convert
            request: FastAPI Request object (for instance path)
            trace_id: Request trace ID for debugging

        Returns:
            JSONResponse with ProblemDetails content.
        """
        status_code, title = ErrorResponseBuilder.status_and_title(error.code)

        problem = ProblemDetails(
            type=f"{settings.api_base_url}/errors/{error.code.value}",
            title=title,
            status=status_code,
            detail=error.message,
            instance=str(request.url.path),
            errors=None,
            trace_id=trace_id or None,
        )

        if isinstance(error.domain_error, ValidationError):
            problem.errors = [
                ErrorDetail(
                    field=error.domain_error.field or "unknown",
                    code=error.domain_error.code.value,
                    message=error.domain_error.message,
                )
            ]

        return JSONResponse(
            status_code=status_code,
            content=problem.model_dump(exclude_none=True),
        )

    @staticmethod
    def status_and_title(code: ApplicationErrorCode) -> tuple[int, str]:
        """Map application error code to HTTP status and title.

        Example:
            >>> ErrorResponseBuilder.status_and_title(ApplicationErrorCode.NOT_FOUND)
            (404, 'Resource Not Found')
        """
        return _STATUS_AND_TITLE.get(
            code,
            (status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error"),
        )
