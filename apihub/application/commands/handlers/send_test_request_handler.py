"""SendTestRequest command handler.

The outbound request pipeline:

    SendTestRequest -> normalize_request -> absolute URL check
        -> HttpExecutorProtocol.execute -> TestRequestResult

Validation problems (missing or unsupported method, missing or
non-absolute URL) are returned as Failure(ValidationError) and nothing is
dispatched. Once dispatched, every outcome (including timeouts and
connection failures) is a Success carrying a TestRequestResult with
success=False; the executor never raises.

Nothing is saved to history here; saving is a separate explicit command.
"""

from urllib.parse import urlsplit

from apihub.application.commands.test_request_commands import SendTestRequest
from apihub.application.dtos import TestRequestResult
from apihub.application.services.request_normalizer import (
    is_absolute_url,
    normalize_request,
)
from apihub.core.enums import ErrorCode
from apihub.core.errors import ValidationError
from apihub.core.result import Failure, Result, Success
from apihub.domain.protocols.http_executor_protocol import HttpExecutorProtocol
from apihub.domain.protocols.logger_protocol import LoggerProtocol
from apihub.domain.value_objects import ExecutionFailure


class SendTestRequestHandler:
    """Handler for SendTestRequest command.

    Dependencies (injected via constructor):
        - HttpExecutorProtocol: Performs the outbound call
        - LoggerProtocol: Structured logging (never logs header values)
    """

    def __init__(
        self,
        executor: HttpExecutorProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            executor: HTTP executor.
            logger: Logger.
        """
        self._executor = executor
        self._logger = logger

    async def handle(
        self, cmd: SendTestRequest
    ) -> Result[TestRequestResult, ValidationError]:
        """Handle SendTestRequest command.

        Args:
            cmd: Raw test request input.

        Returns:
            Success(TestRequestResult): Request was dispatched (whatever
            the outcome).
            Failure(ValidationError): Request could not be dispatched.
        """
        normalized = normalize_request(
            method=cmd.method,
            url=cmd.url,
            headers=cmd.headers,
            params=cmd.params,
            auth=cmd.auth,
            body=cmd.body,
            timeout_ms=cmd.timeout_ms,
        )
        if isinstance(normalized, Failure):
            self._logger.info(
                "test_request_rejected",
                code=normalized.error.code.value,
                field=normalized.error.field,
            )
            return normalized

        descriptor = normalized.value
        if not is_absolute_url(descriptor.url):
            self._logger.info("test_request_rejected", code=ErrorCode.INVALID_URL.value)
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_URL,
                    message="URL must be an absolute http(s) URL",
                    field="url",
                )
            )

        outcome = await self._executor.execute(descriptor)

        host = urlsplit(descriptor.url).hostname
        if isinstance(outcome, ExecutionFailure):
            self._logger.warning(
                "test_request_failed",
                method=descriptor.method.value,
                host=host,
                kind=outcome.kind.value,
                elapsed_ms=outcome.elapsed_ms,
            )
        else:
            self._logger.info(
                "test_request_completed",
                method=descriptor.method.value,
                host=host,
                status=outcome.status,
                elapsed_ms=outcome.elapsed_ms,
                size_bytes=outcome.size_bytes,
            )

        return Success(value=TestRequestResult.from_execution(outcome))
