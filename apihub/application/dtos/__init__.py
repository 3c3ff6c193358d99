"""Application DTOs (Data Transfer Objects).

Handlers return these instead of domain entities so the presentation
layer never depends on the domain model.
"""

from apihub.application.dtos.api_key_dtos import ApiKeyResult, RevealedApiKeyResult
from apihub.application.dtos.catalog_dtos import (
    ApiDetailResult,
    ApiListingResult,
    ApiPageResult,
    ApiSummaryResult,
    GroupCountResult,
    ReviewAuthorResult,
    ReviewPageResult,
    ReviewResult,
)
from apihub.application.dtos.history_dtos import HistoryEntryResult, HistoryPageResult
from apihub.application.dtos.test_request_dtos import TestRequestResult

__all__ = [
    "ApiDetailResult",
    "ApiKeyResult",
    "ApiListingResult",
    "ApiPageResult",
    "ApiSummaryResult",
    "GroupCountResult",
    "HistoryEntryResult",
    "HistoryPageResult",
    "RevealedApiKeyResult",
    "ReviewAuthorResult",
    "ReviewPageResult",
    "ReviewResult",
    "TestRequestResult",
]
