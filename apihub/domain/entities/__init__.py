"""Domain entities.

Usage:
    from apihub.domain.entities import ApiListing, Review
"""

from apihub.domain.entities.api_key import ApiKey
from apihub.domain.entities.api_listing import ApiListing
from apihub.domain.entities.history_entry import HistoryEntry
from apihub.domain.entities.review import Review
from apihub.domain.entities.user import User

__all__ = [
    "ApiKey",
    "ApiListing",
    "HistoryEntry",
    "Review",
    "User",
]
