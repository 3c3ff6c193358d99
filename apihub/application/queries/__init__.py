"""Queries (CQRS read operations).

Queries are immutable dataclasses with question-like names and never
change state.
"""

from apihub.application.queries.api_key_queries import (
    GetApiKey,
    ListApiKeys,
    ListApiKeyServices,
)
from apihub.application.queries.catalog_queries import (
    CompareApis,
    GetApi,
    ListApis,
    ListCategories,
    ListFeaturedApis,
)
from apihub.application.queries.history_queries import GetHistoryEntry, ListHistory
from apihub.application.queries.review_queries import ListReviews

__all__ = [
    "CompareApis",
    "GetApi",
    "GetApiKey",
    "GetHistoryEntry",
    "ListApiKeyServices",
    "ListApiKeys",
    "ListApis",
    "ListCategories",
    "ListFeaturedApis",
    "ListHistory",
    "ListReviews",
]
