"""Categories resource handler."""

from fastapi import Depends, Request
from fastapi.responses import JSONResponse

from apihub.application.errors import ApplicationError, ApplicationErrorCode
from apihub.application.queries.catalog_queries import ListCategories
from apihub.application.queries.handlers.list_categories_handler import (
    ListCategoriesHandler,
)
from apihub.core.container import get_list_categories_handler
from apihub.core.result import Failure
from apihub.presentation.routers.api.middleware.trace_middleware import get_trace_id
from apihub.presentation.routers.api.v1.errors import ErrorResponseBuilder
from apihub.schemas.api_schemas import CategoryListResponse
from apihub.schemas.common_schemas import GroupCountResponse


async def list_categories(
    request: Request,
    handler: ListCategoriesHandler = Depends(get_list_categories_handler),
) -> CategoryListResponse | JSONResponse:
    """List categories with their API count, largest first.

    GET /api/v1/categories → 200 OK
    """
    result = await handler.handle(ListCategories())

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=ApplicationError(
                code=ApplicationErrorCode.QUERY_FAILED,
                message=result.error,
            ),
            request=request,
            trace_id=get_trace_id() or "",
        )

    return CategoryListResponse(
        items=[GroupCountResponse.from_dto(group) for group in result.value]
    )
