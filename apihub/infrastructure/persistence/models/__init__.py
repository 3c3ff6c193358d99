"""Database models for the persistence layer.

Models Organization:
    - user.py: Users (owners of reviews and history)
    - api.py: Catalog listings
    - review.py: Reviews of listings
    - request_history.py: Saved test requests (append-only)
    - api_key.py: Encrypted third-party API keys

Note:
    Domain entities (dataclasses) live in apihub/domain/entities/ and are
    mapped to and from these models by the repositories.
"""

from apihub.infrastructure.persistence.models.api import ApiModel
from apihub.infrastructure.persistence.models.api_key import ApiKeyModel
from apihub.infrastructure.persistence.models.request_history import (
    RequestHistoryModel,
)
from apihub.infrastructure.persistence.models.review import ReviewModel
from apihub.infrastructure.persistence.models.user import UserModel

__all__ = [
    "ApiKeyModel",
    "ApiModel",
    "RequestHistoryModel",
    "ReviewModel",
    "UserModel",
]
