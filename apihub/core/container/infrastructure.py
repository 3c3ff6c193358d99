"""Infrastructure dependency factories.

Application-scoped singletons:
- Database (PostgreSQL or SQLite)
- Logging (console, JSON outside development)
- Encryption (AES-256-GCM for the API key vault)
- HTTP executor (httpx)

Request-scoped:
- Database session (commit on success, rollback on error)
"""

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from apihub.core.config import settings
from apihub.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from apihub.domain.protocols.encryption_protocol import EncryptionProtocol
    from apihub.domain.protocols.http_executor_protocol import HttpExecutorProtocol
    from apihub.domain.protocols.logger_protocol import LoggerProtocol


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Prefer get_db_session() in endpoints.

    Returns:
        Database manager instance.
    """
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON lines)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from apihub.infrastructure.logging.console_adapter import ConsoleAdapter

    return ConsoleAdapter(
        use_json=settings.environment.json_logs,
        level=settings.log_level,
    )


@lru_cache()
def get_encryption_service() -> "EncryptionProtocol":
    """Get encryption service singleton (app-scoped).

    Returns:
        EncryptionService keyed with settings.encryption_key.

    Raises:
        RuntimeError: If the encryption key is invalid.
    """
    from apihub.core.result import Failure, Success
    from apihub.infrastructure.security.encryption_service import EncryptionService

    result = EncryptionService.create(settings.encryption_key.encode("utf-8"))

    match result:
        case Success(value=service):
            return service
        case Failure(error=err):
            raise RuntimeError(
                f"Failed to initialize encryption service: {err.message}"
            )


@lru_cache()
def get_http_executor() -> "HttpExecutorProtocol":
    """Get outbound HTTP executor singleton (app-scoped).

    Returns:
        HttpxExecutor honouring settings.test_request_follow_redirects.
    """
    from apihub.infrastructure.http.httpx_executor import HttpxExecutor

    return HttpxExecutor(follow_redirects=settings.test_request_follow_redirects)


# ============================================================================
# Request-Scoped Dependencies (Per-Request)
# ============================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session (request-scoped).

    Commits when the request succeeds, rolls back on exception and always
    closes the session.

    Yields:
        Database session for request duration.
    """
    db = get_database()
    async with db.get_session() as session:
        yield session
