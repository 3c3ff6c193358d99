"""Unit tests for HttpxExecutor.

Outbound traffic is intercepted with pytest-httpx. The deadline test talks
to a local listener on 127.0.0.1 instead, so no external network calls are
made.
"""

import asyncio
import json

import httpx
import pytest
import pytest_asyncio

from apihub.domain.enums import FailureKind, HttpMethod
from apihub.domain.value_objects import (
    ExecutionFailure,
    ExecutionSuccess,
    RequestDescriptor,
)
from apihub.infrastructure.http import HttpxExecutor


@pytest.fixture
def executor():
    return HttpxExecutor()


@pytest_asyncio.fixture
async def silent_server():
    """Local TCP listener that accepts connections and never replies."""

    async def hold_open(reader, writer):
        await reader.read()
        writer.close()

    server = await asyncio.start_server(hold_open, "127.0.0.1", 0)
    port = server.sockets[0].getsockname()[1]
    yield f"http://127.0.0.1:{port}/slow"
    server.close()


@pytest.mark.unit
class TestHttpxExecutor:
    """Tests for HttpxExecutor.execute."""

    async def test_success_returns_raw_body(self, executor, httpx_mock):
        httpx_mock.add_response(
            method="GET",
            url="https://api.example.com/pokemon?limit=1",
            json={"count": 1},
            headers={"X-Rate-Remaining": "99"},
        )

        result = await executor.execute(
            RequestDescriptor(
                method=HttpMethod.GET,
                url="https://api.example.com/pokemon?limit=1",
            )
        )

        assert isinstance(result, ExecutionSuccess)
        assert result.status == 200
        assert json.loads(result.raw_body) == {"count": 1}
        assert result.size_bytes == len(result.raw_body.encode("utf-8"))
        assert result.headers["x-rate-remaining"] == "99"
        assert result.elapsed_ms >= 0

    async def test_server_error_is_success(self, executor, httpx_mock):
        httpx_mock.add_response(status_code=500, text="Internal Server Error")

        result = await executor.execute(
            RequestDescriptor(method=HttpMethod.GET, url="https://api.example.com/fail")
        )

        assert isinstance(result, ExecutionSuccess)
        assert result.status == 500
        assert result.raw_body == "Internal Server Error"

    async def test_sends_method_headers_and_body(self, executor, httpx_mock):
        httpx_mock.add_response(status_code=201)

        await executor.execute(
            RequestDescriptor(
                method=HttpMethod.POST,
                url="https://api.example.com/items",
                headers={"Authorization": "Bearer abc", "Content-Type": "application/json"},
                body_text='{"name": "x"}',
            )
        )

        sent = httpx_mock.get_request()
        assert sent is not None
        assert sent.method == "POST"
        assert sent.headers["Authorization"] == "Bearer abc"
        assert sent.content == b'{"name": "x"}'

    async def test_connection_error_is_network_failure(self, executor, httpx_mock):
        httpx_mock.add_exception(httpx.ConnectError("Connection refused"))

        result = await executor.execute(
            RequestDescriptor(method=HttpMethod.GET, url="https://down.example.com")
        )

        assert isinstance(result, ExecutionFailure)
        assert result.kind is FailureKind.NETWORK
        assert result.status == 0

    async def test_read_timeout_is_timeout_failure(self, executor, httpx_mock):
        httpx_mock.add_exception(httpx.ReadTimeout("Read timed out"))

        result = await executor.execute(
            RequestDescriptor(
                method=HttpMethod.GET,
                url="https://slow.example.com",
                timeout_ms=1000,
            )
        )

        assert isinstance(result, ExecutionFailure)
        assert result.kind is FailureKind.TIMEOUT
        assert result.message == "Request timed out"


@pytest.mark.unit
class TestHttpxExecutorDeadline:
    """The timeout is enforced against a real socket."""

    async def test_unresponsive_target_times_out_at_deadline(self, executor, silent_server):
        result = await executor.execute(
            RequestDescriptor(method=HttpMethod.GET, url=silent_server, timeout_ms=1000)
        )

        assert isinstance(result, ExecutionFailure)
        assert result.kind is FailureKind.TIMEOUT
        assert result.status == 0
        assert 950 <= result.elapsed_ms <= 1500
