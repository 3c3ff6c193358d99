"""Unit tests for ErrorResponseBuilder (RFC 9457 problem details)."""

import json

import pytest
from starlette.requests import Request

from apihub.application.errors import ApplicationError, ApplicationErrorCode
from apihub.core.enums import ErrorCode
from apihub.core.errors import ValidationError
from apihub.presentation.routers.api.v1.errors.error_response_builder import (
    ErrorResponseBuilder,
)


def make_request(path: str = "/api/v1/test-requests") -> Request:
    return Request(
        {
            "type": "http",
            "method": "POST",
            "scheme": "http",
            "server": ("testserver", 80),
            "root_path": "",
            "path": path,
            "query_string": b"",
            "headers": [],
        }
    )


def body_of(response) -> dict:
    return json.loads(response.body)


@pytest.mark.unit
class TestErrorResponseBuilder:
    """Tests for ErrorResponseBuilder."""

    @pytest.mark.parametrize(
        ("code", "status", "title"),
        [
            (ApplicationErrorCode.COMMAND_VALIDATION_FAILED, 400, "Validation Failed"),
            (ApplicationErrorCode.QUERY_VALIDATION_FAILED, 400, "Validation Failed"),
            (ApplicationErrorCode.NOT_FOUND, 404, "Resource Not Found"),
            (ApplicationErrorCode.CONFLICT, 409, "Resource Conflict"),
            (ApplicationErrorCode.EXTERNAL_SERVICE_ERROR, 502, "External Service Error"),
            (ApplicationErrorCode.COMMAND_EXECUTION_FAILED, 500, "Command Execution Failed"),
        ],
    )
    def test_status_and_title(self, code, status, title):
        assert ErrorResponseBuilder.status_and_title(code) == (status, title)

    def test_not_found_problem(self):
        response = ErrorResponseBuilder.from_application_error(
            error=ApplicationError(code=ApplicationErrorCode.NOT_FOUND, message="API not found"),
            request=make_request("/api/v1/apis/0190"),
            trace_id="trace-1",
        )

        assert response.status_code == 404
        assert body_of(response) == {
            "type": "https://apihub.test/errors/not_found",
            "title": "Resource Not Found",
            "status": 404,
            "detail": "API not found",
            "instance": "/api/v1/apis/0190",
            "trace_id": "trace-1",
        }

    def test_validation_error_adds_field_errors(self):
        domain_error = ValidationError(
            code=ErrorCode.MISSING_URL,
            message="URL is required",
            field="url",
        )

        response = ErrorResponseBuilder.from_application_error(
            error=ApplicationError(
                code=ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
                message="URL is required",
                domain_error=domain_error,
            ),
            request=make_request(),
            trace_id="",
        )

        body = body_of(response)
        assert response.status_code == 400
        assert body["errors"] == [
            {"field": "url", "code": "missing_url", "message": "URL is required"}
        ]
        assert "trace_id" not in body
