"""Repository implementations (SQLAlchemy async).

Each repository implements the matching protocol in
apihub.domain.protocols and maps between ORM models and domain entities.
"""

from apihub.infrastructure.persistence.repositories.api_key_repository import (
    ApiKeyRepository,
)
from apihub.infrastructure.persistence.repositories.api_repository import ApiRepository
from apihub.infrastructure.persistence.repositories.history_repository import (
    HistoryRepository,
)
from apihub.infrastructure.persistence.repositories.review_repository import (
    ReviewRepository,
)
from apihub.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)

__all__ = [
    "ApiKeyRepository",
    "ApiRepository",
    "HistoryRepository",
    "ReviewRepository",
    "UserRepository",
]
