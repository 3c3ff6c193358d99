"""API route registry - single source of truth for all v1 routes.

Order matters where a literal segment shares a position with a path
parameter: /apis/featured and /apis/comparisons are listed before
/apis/{api_id}.

Usage:
    router = APIRouter(prefix=settings.api_v1_prefix)
    register_routes_from_registry(router, ROUTE_REGISTRY)
"""

from apihub.presentation.routers.api.v1.api_keys import (
    create_api_key,
    delete_api_key,
    get_api_key,
    list_api_key_services,
    list_api_keys,
    reveal_api_key,
    update_api_key,
)
from apihub.presentation.routers.api.v1.apis import (
    compare_apis,
    get_api,
    list_apis,
    list_featured_apis,
)
from apihub.presentation.routers.api.v1.categories import list_categories
from apihub.presentation.routers.api.v1.health import get_health
from apihub.presentation.routers.api.v1.history import (
    create_history_entry,
    get_history_entry,
    list_history,
)
from apihub.presentation.routers.api.v1.reviews import (
    create_review,
    list_reviews,
    vote_review,
)
from apihub.presentation.routers.api.v1.routes.metadata import (
    ErrorSpec,
    HTTPMethod,
    IdempotencyLevel,
    RouteMetadata,
)
from apihub.presentation.routers.api.v1.test_requests import create_test_request
from apihub.schemas.api_key_schemas import (
    ApiKeyListResponse,
    ApiKeyResponse,
    ApiKeyServiceListResponse,
    RevealedApiKeyResponse,
)
from apihub.schemas.api_schemas import (
    ApiComparisonResponse,
    ApiDetailResponse,
    ApiListResponse,
    CategoryListResponse,
    FeaturedApiListResponse,
)
from apihub.schemas.common_schemas import HealthResponse
from apihub.schemas.history_schemas import HistoryEntryResponse, HistoryListResponse
from apihub.schemas.review_schemas import ReviewListResponse, ReviewResponse
from apihub.schemas.test_request_schemas import TestRequestResponse

ROUTE_REGISTRY: list[RouteMetadata] = [
    # =========================================================================
    # APIs Resource (5 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/apis",
        handler=list_apis,
        resource="apis",
        tags=["APIs"],
        summary="List APIs",
        description="Filter by category, auth type or free-text search. Newest first, cursor-paginated.",
        operation_id="list_apis",
        response_model=ApiListResponse,
        errors=[ErrorSpec(status=422, description="Invalid query parameter")],
        idempotency=IdempotencyLevel.SAFE,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/apis/featured",
        handler=list_featured_apis,
        resource="apis",
        tags=["APIs"],
        summary="List featured APIs",
        operation_id="list_featured_apis",
        response_model=FeaturedApiListResponse,
        idempotency=IdempotencyLevel.SAFE,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/apis/comparisons",
        handler=compare_apis,
        resource="apis",
        tags=["APIs"],
        summary="Compare APIs",
        description="Load 2 to 4 APIs side by side, in the requested order.",
        operation_id="compare_apis",
        response_model=ApiComparisonResponse,
        errors=[
            ErrorSpec(status=400, description="Wrong number of ids"),
            ErrorSpec(status=404, description="API not found"),
        ],
        idempotency=IdempotencyLevel.SAFE,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/apis/{api_id}",
        handler=get_api,
        resource="apis",
        tags=["APIs"],
        summary="Get API",
        description="API detail with average rating and the most recent reviews.",
        operation_id="get_api",
        response_model=ApiDetailResponse,
        errors=[ErrorSpec(status=404, description="API not found")],
        idempotency=IdempotencyLevel.SAFE,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/apis/{api_id}/reviews",
        handler=list_reviews,
        resource="reviews",
        tags=["Reviews"],
        summary="List reviews of an API",
        operation_id="list_api_reviews",
        response_model=ReviewListResponse,
        errors=[ErrorSpec(status=404, description="API not found")],
        idempotency=IdempotencyLevel.SAFE,
    ),
    # =========================================================================
    # Categories Resource (1 endpoint)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/categories",
        handler=list_categories,
        resource="categories",
        tags=["APIs"],
        summary="List categories",
        operation_id="list_categories",
        response_model=CategoryListResponse,
        idempotency=IdempotencyLevel.SAFE,
    ),
    # =========================================================================
    # Reviews Resource (2 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/reviews",
        handler=create_review,
        resource="reviews",
        tags=["Reviews"],
        summary="Create review",
        operation_id="create_review",
        response_model=ReviewResponse,
        status_code=201,
        errors=[
            ErrorSpec(status=400, description="Rating out of range"),
            ErrorSpec(status=404, description="API or user not found"),
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/reviews/{review_id}/votes",
        handler=vote_review,
        resource="reviews",
        tags=["Reviews"],
        summary="Vote on review",
        description="Add (up) or remove (down) one helpful vote.",
        operation_id="vote_review",
        response_model=ReviewResponse,
        errors=[ErrorSpec(status=404, description="Review not found")],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
    ),
    # =========================================================================
    # Test Requests Resource (1 endpoint)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/test-requests",
        handler=create_test_request,
        resource="test_requests",
        tags=["Test Requests"],
        summary="Send test request",
        description=(
            "Perform one outbound HTTP request. Timeouts and connection "
            "failures are reported in the body with success=false."
        ),
        operation_id="create_test_request",
        response_model=TestRequestResponse,
        errors=[ErrorSpec(status=400, description="Request cannot be dispatched")],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
    ),
    # =========================================================================
    # History Resource (3 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/history",
        handler=create_history_entry,
        resource="history",
        tags=["History"],
        summary="Record request",
        operation_id="create_history_entry",
        response_model=HistoryEntryResponse,
        status_code=201,
        errors=[
            ErrorSpec(status=400, description="Invalid method or missing URL"),
            ErrorSpec(status=404, description="API or user not found"),
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/history",
        handler=list_history,
        resource="history",
        tags=["History"],
        summary="List request history",
        operation_id="list_history",
        response_model=HistoryListResponse,
        idempotency=IdempotencyLevel.SAFE,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/history/{history_id}",
        handler=get_history_entry,
        resource="history",
        tags=["History"],
        summary="Get history entry",
        operation_id="get_history_entry",
        response_model=HistoryEntryResponse,
        errors=[ErrorSpec(status=404, description="History entry not found")],
        idempotency=IdempotencyLevel.SAFE,
    ),
    # =========================================================================
    # API Keys Resource (7 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/api-keys",
        handler=list_api_keys,
        resource="api_keys",
        tags=["API Keys"],
        summary="List API keys",
        operation_id="list_api_keys",
        response_model=ApiKeyListResponse,
        idempotency=IdempotencyLevel.SAFE,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/api-keys",
        handler=create_api_key,
        resource="api_keys",
        tags=["API Keys"],
        summary="Create API key",
        description="The key is encrypted at rest and never returned by this endpoint.",
        operation_id="create_api_key",
        response_model=ApiKeyResponse,
        status_code=201,
        errors=[ErrorSpec(status=400, description="Validation error")],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/api-keys/{api_key_id}",
        handler=get_api_key,
        resource="api_keys",
        tags=["API Keys"],
        summary="Get API key",
        operation_id="get_api_key",
        response_model=ApiKeyResponse,
        errors=[ErrorSpec(status=404, description="API key not found")],
        idempotency=IdempotencyLevel.SAFE,
    ),
    RouteMetadata(
        method=HTTPMethod.PATCH,
        path="/api-keys/{api_key_id}",
        handler=update_api_key,
        resource="api_keys",
        tags=["API Keys"],
        summary="Update API key",
        operation_id="update_api_key",
        response_model=ApiKeyResponse,
        errors=[
            ErrorSpec(status=400, description="Validation error"),
            ErrorSpec(status=404, description="API key not found"),
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/api-keys/{api_key_id}",
        handler=delete_api_key,
        resource="api_keys",
        tags=["API Keys"],
        summary="Delete API key",
        operation_id="delete_api_key",
        response_model=None,
        status_code=204,
        errors=[ErrorSpec(status=404, description="API key not found")],
        idempotency=IdempotencyLevel.IDEMPOTENT,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/api-keys/{api_key_id}/reveals",
        handler=reveal_api_key,
        resource="api_keys",
        tags=["API Keys"],
        summary="Reveal API key",
        description="Decrypt the stored key and record the time of use.",
        operation_id="reveal_api_key",
        response_model=RevealedApiKeyResponse,
        errors=[
            ErrorSpec(status=404, description="API key not found"),
            ErrorSpec(status=500, description="Stored key cannot be decrypted"),
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/api-key-services",
        handler=list_api_key_services,
        resource="api_keys",
        tags=["API Keys"],
        summary="List API key services",
        operation_id="list_api_key_services",
        response_model=ApiKeyServiceListResponse,
        idempotency=IdempotencyLevel.SAFE,
    ),
    # =========================================================================
    # Health (1 endpoint)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/health",
        handler=get_health,
        resource="health",
        tags=["System"],
        summary="Health check",
        operation_id="get_health",
        response_model=HealthResponse,
        idempotency=IdempotencyLevel.SAFE,
    ),
]
