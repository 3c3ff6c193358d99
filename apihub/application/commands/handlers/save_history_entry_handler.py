"""SaveHistoryEntry command handler.

History is append-only: this is the only write path, and it only ever
inserts.
"""

from uuid_extensions import uuid7

from apihub.application.commands.history_commands import SaveHistoryEntry
from apihub.application.dtos import HistoryEntryResult
from apihub.core.result import Failure, Result, Success
from apihub.domain.entities import HistoryEntry
from apihub.domain.protocols.api_repository import ApiRepository
from apihub.domain.protocols.history_repository import HistoryRepository
from apihub.domain.protocols.logger_protocol import LoggerProtocol
from apihub.domain.protocols.user_repository import UserRepository


class SaveHistoryEntryError:
    """SaveHistoryEntry-specific errors."""

    MISSING_METHOD = "HTTP method is required"
    MISSING_URL = "URL is required"
    API_NOT_FOUND = "API not found"
    USER_NOT_FOUND = "User not found"


class SaveHistoryEntryHandler:
    """Handler for SaveHistoryEntry command.

    Dependencies (injected via constructor):
        - HistoryRepository: Persistence
        - ApiRepository: Verifies a referenced listing exists
        - UserRepository: Verifies a referenced owner exists
        - LoggerProtocol: Structured logging
    """

    def __init__(
        self,
        history_repo: HistoryRepository,
        api_repo: ApiRepository,
        user_repo: UserRepository,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            history_repo: History repository.
            api_repo: API listing repository.
            user_repo: User repository.
            logger: Logger.
        """
        self._history_repo = history_repo
        self._api_repo = api_repo
        self._user_repo = user_repo
        self._logger = logger

    async def handle(self, cmd: SaveHistoryEntry) -> Result[HistoryEntryResult, str]:
        """Handle SaveHistoryEntry command.

        Method, URL, headers and body are stored exactly as given. The
        method is not restricted to the verbs the executor can send.

        Args:
            cmd: SaveHistoryEntry command.

        Returns:
            Success(HistoryEntryResult): Entry saved.
            Failure(error): Missing method or URL, or an unknown
            listing/owner reference.
        """
        if not cmd.method:
            return Failure(error=SaveHistoryEntryError.MISSING_METHOD)

        if not cmd.url:
            return Failure(error=SaveHistoryEntryError.MISSING_URL)

        api = None
        if cmd.api_id is not None:
            api = await self._api_repo.find_by_id(cmd.api_id)
            if api is None:
                return Failure(error=SaveHistoryEntryError.API_NOT_FOUND)

        if cmd.user_id is not None and await self._user_repo.find_by_id(cmd.user_id) is None:
            return Failure(error=SaveHistoryEntryError.USER_NOT_FOUND)

        entry = HistoryEntry(
            id=uuid7(),
            method=cmd.method,
            url=cmd.url,
            user_id=cmd.user_id,
            api_id=cmd.api_id,
            headers=dict(cmd.headers) if cmd.headers is not None else None,
            body=cmd.body,
            response_status=cmd.response_status,
            response_body=cmd.response_body,
            response_time=cmd.response_time,
        )
        await self._history_repo.save(entry)

        self._logger.info(
            "history_entry_saved",
            history_id=str(entry.id),
            method=entry.method,
            response_status=entry.response_status,
        )

        return Success(value=HistoryEntryResult.from_entity(entry, api))
