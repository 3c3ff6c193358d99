"""Centralized constants for internal implementation details.

These are fixed product rules, NOT environment-specific configuration.
For environment-specific settings use ``apihub/core/config.py``.

Categories:
- Outbound test requests: timeout bounds, body-carrying methods
- Pagination: page-size bounds per listing
- Catalog: featured/recent-review counts
"""

# =============================================================================
# Outbound Test Requests
# =============================================================================

TEST_REQUEST_TIMEOUT_MIN_MS: int = 1000
"""Smallest accepted timeout for an outbound test request (milliseconds)."""

TEST_REQUEST_TIMEOUT_MAX_MS: int = 60000
"""Largest accepted timeout for an outbound test request (milliseconds)."""

TEST_REQUEST_TIMEOUT_DEFAULT_MS: int = 30000
"""Timeout used when the caller does not specify one (milliseconds)."""

BODY_METHODS: frozenset[str] = frozenset({"POST", "PUT", "PATCH"})
"""HTTP methods whose descriptors carry a request body."""

API_KEY_HEADER: str = "X-API-Key"
"""Header carrying an API key credential."""

AUTHORIZATION_HEADER: str = "Authorization"

TIMEOUT_ERROR_MESSAGE: str = "Request timed out"
NETWORK_ERROR_MESSAGE: str = "Network error - check if the API is accessible"
UNKNOWN_ERROR_MESSAGE: str = "Unknown error occurred"


# =============================================================================
# Pagination
# =============================================================================

API_PAGE_SIZE_DEFAULT: int = 20
API_PAGE_SIZE_MAX: int = 100

REVIEW_PAGE_SIZE_DEFAULT: int = 10
REVIEW_PAGE_SIZE_MAX: int = 50

HISTORY_PAGE_SIZE_DEFAULT: int = 20
HISTORY_PAGE_SIZE_MAX: int = 50


# =============================================================================
# Catalog
# =============================================================================

FEATURED_API_LIMIT: int = 6
"""Maximum number of featured APIs returned."""

RECENT_REVIEWS_ON_DETAIL: int = 10
"""Number of most recent reviews embedded in the API detail view."""

COMPARISON_MIN_APIS: int = 2
COMPARISON_MAX_APIS: int = 4
