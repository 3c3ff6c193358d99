"""Unit tests for SendTestRequestHandler.

The executor is mocked; these tests check what reaches it and how its
outcome is flattened into TestRequestResult.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from apihub.application.commands.handlers.send_test_request_handler import (
    SendTestRequestHandler,
)
from apihub.application.commands.test_request_commands import SendTestRequest
from apihub.core.enums import ErrorCode
from apihub.core.result import Failure, Success
from apihub.domain.enums import AuthScheme, FailureKind, HttpMethod
from apihub.domain.value_objects import (
    AuthSpec,
    ExecutionFailure,
    ExecutionSuccess,
    HeaderEntry,
    QueryParam,
)


@pytest.fixture
def executor():
    return AsyncMock()


@pytest.fixture
def logger():
    return MagicMock()


@pytest.fixture
def handler(executor, logger):
    return SendTestRequestHandler(executor=executor, logger=logger)


@pytest.mark.unit
class TestSendTestRequestHandler:
    """Tests for SendTestRequestHandler.handle."""

    async def test_dispatches_normalized_descriptor(self, handler, executor):
        executor.execute.return_value = ExecutionSuccess(
            status=200,
            status_text="OK",
            headers={"content-type": "application/json"},
            raw_body='{"name":"ditto"}',
            elapsed_ms=42,
            size_bytes=16,
        )

        result = await handler.handle(
            SendTestRequest(
                method="get",
                url="https://pokeapi.co/api/v2/pokemon/ditto",
                headers=(HeaderEntry("Accept", "application/json"),),
                params=(QueryParam("lang", "en"),),
                auth=AuthSpec(scheme=AuthScheme.API_KEY, value="secret"),
                body="ignored for GET",
            )
        )

        descriptor = executor.execute.await_args.args[0]
        assert descriptor.method is HttpMethod.GET
        assert descriptor.url == "https://pokeapi.co/api/v2/pokemon/ditto?lang=en"
        assert descriptor.headers == {"Accept": "application/json", "X-API-Key": "secret"}
        assert descriptor.body_text is None

        assert isinstance(result, Success)
        assert result.value.success is True
        assert result.value.status == 200
        assert result.value.status_text == "OK"
        assert result.value.data == '{"name":"ditto"}'
        assert result.value.response_time == 42
        assert result.value.size == 16
        assert result.value.error is None

    async def test_error_status_is_still_success(self, handler, executor):
        executor.execute.return_value = ExecutionSuccess(
            status=404,
            status_text="Not Found",
            raw_body="",
            elapsed_ms=5,
            size_bytes=0,
        )

        result = await handler.handle(
            SendTestRequest(method="DELETE", url="https://api.example.com/items/1")
        )

        assert isinstance(result, Success)
        assert result.value.success is True
        assert result.value.status == 404

    async def test_execution_failure_is_flattened(self, handler, executor, logger):
        executor.execute.return_value = ExecutionFailure(
            kind=FailureKind.TIMEOUT,
            message="Request timed out",
            elapsed_ms=1000,
        )

        result = await handler.handle(
            SendTestRequest(method="GET", url="https://slow.example.com", timeout_ms=1000)
        )

        assert isinstance(result, Success)
        assert result.value.success is False
        assert result.value.status == 0
        assert result.value.error == "Request timed out"
        assert result.value.error_kind == "timeout"
        assert result.value.data is None
        logger.warning.assert_called_once()

    async def test_invalid_method_is_not_dispatched(self, handler, executor):
        result = await handler.handle(SendTestRequest(method="TRACE", url="https://x.io"))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_HTTP_METHOD
        executor.execute.assert_not_awaited()

    async def test_missing_url_is_not_dispatched(self, handler, executor):
        result = await handler.handle(SendTestRequest(method="GET", url=""))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.MISSING_URL
        executor.execute.assert_not_awaited()

    async def test_relative_url_is_rejected(self, handler, executor):
        result = await handler.handle(SendTestRequest(method="GET", url="/pokemon"))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_URL
        assert result.error.message == "URL must be an absolute http(s) URL"
        executor.execute.assert_not_awaited()

    async def test_logs_never_include_header_values(self, handler, executor, logger):
        executor.execute.return_value = ExecutionSuccess(
            status=200, status_text="OK", elapsed_ms=1, size_bytes=0
        )

        await handler.handle(
            SendTestRequest(
                method="GET",
                url="https://api.example.com",
                auth=AuthSpec(scheme=AuthScheme.BEARER, value="super-secret-token"),
            )
        )

        logged = repr(logger.info.call_args_list)
        assert "super-secret-token" not in logged
