"""Domain protocols (ports).

Infrastructure provides the concrete adapters; application handlers
depend only on these interfaces.

Usage:
    from apihub.domain.protocols import ApiRepository, HttpExecutorProtocol
"""

from apihub.domain.protocols.api_key_repository import ApiKeyRepository
from apihub.domain.protocols.api_repository import ApiRepository
from apihub.domain.protocols.encryption_protocol import (
    DecryptionError,
    EncryptionError,
    EncryptionKeyError,
    EncryptionProtocol,
)
from apihub.domain.protocols.history_repository import HistoryRepository
from apihub.domain.protocols.http_executor_protocol import HttpExecutorProtocol
from apihub.domain.protocols.logger_protocol import LoggerProtocol
from apihub.domain.protocols.review_repository import ReviewRepository
from apihub.domain.protocols.user_repository import UserRepository

__all__ = [
    "ApiKeyRepository",
    "ApiRepository",
    "DecryptionError",
    "EncryptionError",
    "EncryptionKeyError",
    "EncryptionProtocol",
    "HistoryRepository",
    "HttpExecutorProtocol",
    "LoggerProtocol",
    "ReviewRepository",
    "UserRepository",
]
