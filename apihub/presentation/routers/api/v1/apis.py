"""APIs resource handlers.

Handler functions for catalog endpoints. Routes are registered via
ROUTE_REGISTRY in routes/registry.py.

Handlers:
    list_apis          - Filtered, cursor-paginated catalog
    list_featured_apis - Featured listings
    compare_apis       - 2-4 listings side by side
    get_api            - Listing detail with recent reviews
"""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Path, Query, Request
from fastapi.responses import JSONResponse

from apihub.application.errors import ApplicationError, ApplicationErrorCode
from apihub.application.queries.catalog_queries import (
    CompareApis,
    GetApi,
    ListApis,
    ListFeaturedApis,
)
from apihub.application.queries.handlers.compare_apis_handler import (
    CompareApisHandler,
)
from apihub.application.queries.handlers.get_api_handler import GetApiHandler
from apihub.application.queries.handlers.list_apis_handler import (
    ListApisHandler,
    ListFeaturedApisHandler,
)
from apihub.core.constants import API_PAGE_SIZE_DEFAULT, API_PAGE_SIZE_MAX
from apihub.core.container import (
    get_compare_apis_handler,
    get_get_api_handler,
    get_list_apis_handler,
    get_list_featured_apis_handler,
)
from apihub.core.result import Failure
from apihub.presentation.routers.api.middleware.trace_middleware import get_trace_id
from apihub.presentation.routers.api.v1.errors import ErrorResponseBuilder
from apihub.schemas.api_schemas import (
    ApiComparisonResponse,
    ApiDetailResponse,
    ApiListResponse,
    FeaturedApiListResponse,
)


# =============================================================================
# Error Mapping (String → ApplicationError)
# =============================================================================


def _map_api_error(error: str) -> ApplicationError:
    """Map handler string error to ApplicationError.

    Args:
        error: Error string from handler.

    Returns:
        ApplicationError with appropriate code and message.
    """
    error_lower = error.lower()

    if "not found" in error_lower:
        return ApplicationError(code=ApplicationErrorCode.NOT_FOUND, message=error)
    if "must be" in error_lower or "between" in error_lower:
        return ApplicationError(
            code=ApplicationErrorCode.QUERY_VALIDATION_FAILED,
            message=error,
        )

    return ApplicationError(code=ApplicationErrorCode.QUERY_FAILED, message=error)


# =============================================================================
# Handlers
# =============================================================================


async def list_apis(
    request: Request,
    category: Annotated[str | None, Query(description="Exact category")] = None,
    auth_type: Annotated[str | None, Query(description="Exact auth type")] = None,
    search: Annotated[
        str | None,
        Query(description="Case-insensitive match on name or description"),
    ] = None,
    limit: Annotated[int, Query(ge=1, le=API_PAGE_SIZE_MAX)] = API_PAGE_SIZE_DEFAULT,
    cursor: Annotated[UUID | None, Query(description="next_cursor of the previous page")] = None,
    handler: ListApisHandler = Depends(get_list_apis_handler),
) -> ApiListResponse | JSONResponse:
    """List catalog APIs, newest first.

    GET /api/v1/apis → 200 OK

    Returns:
        ApiListResponse with one page of listings.
        JSONResponse with RFC 9457 error on failure.
    """
    result = await handler.handle(
        ListApis(
            category=category or None,
            auth_type=auth_type or None,
            search=search or None,
            limit=limit,
            cursor=cursor,
        )
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=_map_api_error(result.error),
            request=request,
            trace_id=get_trace_id() or "",
        )

    return ApiListResponse.from_dto(result.value)


async def list_featured_apis(
    request: Request,
    handler: ListFeaturedApisHandler = Depends(get_list_featured_apis_handler),
) -> FeaturedApiListResponse | JSONResponse:
    """List featured APIs.

    GET /api/v1/apis/featured → 200 OK
    """
    result = await handler.handle(ListFeaturedApis())

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=_map_api_error(result.error),
            request=request,
            trace_id=get_trace_id() or "",
        )

    return FeaturedApiListResponse.from_dto(result.value)


async def compare_apis(
    request: Request,
    ids: Annotated[
        list[UUID],
        Query(description="2 to 4 API ids; repeat the parameter per id"),
    ],
    handler: CompareApisHandler = Depends(get_compare_apis_handler),
) -> ApiComparisonResponse | JSONResponse:
    """Compare APIs side by side.

    GET /api/v1/apis/comparisons?ids=...&ids=... → 200 OK

    Returns:
        ApiComparisonResponse in the requested order.
        JSONResponse 400 for a wrong number of ids, 404 for an unknown id.
    """
    result = await handler.handle(CompareApis(api_ids=tuple(ids)))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=_map_api_error(result.error),
            request=request,
            trace_id=get_trace_id() or "",
        )

    return ApiComparisonResponse.from_dto(result.value)


async def get_api(
    request: Request,
    api_id: Annotated[UUID, Path(description="API UUID")],
    handler: GetApiHandler = Depends(get_get_api_handler),
) -> ApiDetailResponse | JSONResponse:
    """Get one API with its rating and most recent reviews.

    GET /api/v1/apis/{api_id} → 200 OK

    Args:
        request: FastAPI request object.
        api_id: API UUID.
        handler: Get API handler (injected).

    Returns:
        ApiDetailResponse.
        JSONResponse with RFC 9457 error on failure.
    """
    result = await handler.handle(GetApi(api_id=api_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=_map_api_error(result.error),
            request=request,
            trace_id=get_trace_id() or "",
        )

    return ApiDetailResponse.from_detail_dto(result.value)
