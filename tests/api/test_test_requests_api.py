"""HTTP tests for POST /api/v1/test-requests.

The real handler and normalizer run; only the outbound executor is
mocked.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from apihub.application.commands.handlers.send_test_request_handler import (
    SendTestRequestHandler,
)
from apihub.core.container import get_send_test_request_handler
from apihub.domain.enums import FailureKind, HttpMethod
from apihub.domain.value_objects import ExecutionFailure, ExecutionSuccess
from apihub.main import app

URL = "/api/v1/test-requests"


@pytest.fixture
def executor(client):
    executor = AsyncMock()
    handler = SendTestRequestHandler(executor=executor, logger=MagicMock())
    app.dependency_overrides[get_send_test_request_handler] = lambda: handler
    return executor


@pytest.mark.api
class TestCreateTestRequest:
    """POST /api/v1/test-requests."""

    def test_success(self, client, executor):
        executor.execute.return_value = ExecutionSuccess(
            status=201,
            status_text="Created",
            headers={"content-type": "application/json"},
            raw_body='{"id": 1}',
            elapsed_ms=87,
            size_bytes=9,
        )

        response = client.post(
            URL,
            json={
                "method": "post",
                "url": "https://jsonplaceholder.typicode.com/posts",
                "headers": [
                    {"key": "Content-Type", "value": "application/json"},
                    {"key": "X-Debug", "value": "1", "enabled": False},
                ],
                "params": [{"key": "q", "value": "a b"}],
                "auth": {"type": "bearer", "value": "tok"},
                "body": '{"title": "hello"}',
                "timeout": 5,
            },
        )

        body = response.json()
        assert response.status_code == 200
        assert body["success"] is True
        assert body["status"] == 201
        assert body["status_text"] == "Created"
        assert body["data"] == '{"id": 1}'
        assert body["response_time"] == 87
        assert body["size"] == 9

        descriptor = executor.execute.await_args.args[0]
        assert descriptor.method is HttpMethod.POST
        assert descriptor.url == "https://jsonplaceholder.typicode.com/posts?q=a%20b"
        assert descriptor.headers == {
            "Content-Type": "application/json",
            "Authorization": "Bearer tok",
        }
        assert descriptor.body_text == '{"title": "hello"}'
        assert descriptor.timeout_ms == 1000

    def test_error_status_is_still_success(self, client, executor):
        executor.execute.return_value = ExecutionSuccess(
            status=500, status_text="Internal Server Error", elapsed_ms=5, size_bytes=0
        )

        response = client.post(URL, json={"method": "GET", "url": "https://x.io/boom"})

        assert response.status_code == 200
        assert response.json()["success"] is True
        assert response.json()["status"] == 500

    def test_network_failure_is_200_with_success_false(self, client, executor):
        executor.execute.return_value = ExecutionFailure(
            kind=FailureKind.NETWORK,
            message="Connection refused",
            elapsed_ms=3,
        )

        response = client.post(URL, json={"method": "GET", "url": "https://down.example"})

        body = response.json()
        assert response.status_code == 200
        assert body["success"] is False
        assert body["status"] == 0
        assert body["error"] == "Connection refused"
        assert body["error_kind"] == "network"

    @pytest.mark.parametrize(
        ("payload", "field", "code"),
        [
            ({"method": "GET"}, "url", "missing_url"),
            ({"method": "GET", "url": "   "}, "url", "missing_url"),
            ({"method": "GET", "url": "/pokemon"}, "url", "invalid_url"),
            ({"method": "GET", "url": "ftp://files.example"}, "url", "invalid_url"),
            ({"url": "https://x.io"}, "method", "missing_http_method"),
            ({"method": "FETCH", "url": "https://x.io"}, "method", "invalid_http_method"),
        ],
    )
    def test_undispatchable_input_is_400(self, client, executor, payload, field, code):
        response = client.post(URL, json=payload)

        body = response.json()
        assert response.status_code == 400
        assert body["title"] == "Validation Failed"
        assert body["type"] == "https://apihub.test/errors/command_validation_failed"
        assert body["errors"] == [
            {"field": field, "code": code, "message": body["detail"]}
        ]
        executor.execute.assert_not_awaited()

    def test_unknown_auth_type_is_422(self, client, executor):
        response = client.post(
            URL,
            json={"method": "GET", "url": "https://x.io", "auth": {"type": "digest"}},
        )

        assert response.status_code == 422
        assert response.json()["errors"][0]["field"] == "auth.type"
