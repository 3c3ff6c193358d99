"""Reviews resource handlers.

Handlers:
    list_reviews  - Cursor-paginated reviews of one API
    create_review - Review an API
    vote_review   - Helpful / not helpful vote
"""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Path, Query, Request
from fastapi.responses import JSONResponse

from apihub.application.commands.handlers.create_review_handler import (
    CreateReviewHandler,
)
from apihub.application.commands.handlers.vote_review_handler import (
    VoteReviewHandler,
)
from apihub.application.commands.review_commands import CreateReview, VoteReview
from apihub.application.errors import ApplicationError, ApplicationErrorCode
from apihub.application.queries.handlers.list_reviews_handler import (
    ListReviewsHandler,
)
from apihub.application.queries.review_queries import ListReviews
from apihub.core.constants import REVIEW_PAGE_SIZE_DEFAULT, REVIEW_PAGE_SIZE_MAX
from apihub.core.container import (
    get_create_review_handler,
    get_list_reviews_handler,
    get_vote_review_handler,
)
from apihub.core.result import Failure
from apihub.domain.enums import ReviewSort
from apihub.presentation.routers.api.middleware.trace_middleware import get_trace_id
from apihub.presentation.routers.api.v1.errors import ErrorResponseBuilder
from apihub.schemas.review_schemas import (
    ReviewCreateRequest,
    ReviewListResponse,
    ReviewResponse,
    ReviewVoteRequest,
)


def _map_review_error(error: str) -> ApplicationError:
    """Map handler string error to ApplicationError."""
    error_lower = error.lower()

    if "not found" in error_lower:
        return ApplicationError(code=ApplicationErrorCode.NOT_FOUND, message=error)
    if "must be" in error_lower or "invalid" in error_lower:
        return ApplicationError(
            code=ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
            message=error,
        )

    return ApplicationError(
        code=ApplicationErrorCode.COMMAND_EXECUTION_FAILED,
        message=error,
    )


async def list_reviews(
    request: Request,
    api_id: Annotated[UUID, Path(description="Reviewed API UUID")],
    sort_by: Annotated[ReviewSort, Query(description="recent, highest or lowest")] = (
        ReviewSort.RECENT
    ),
    limit: Annotated[int, Query(ge=1, le=REVIEW_PAGE_SIZE_MAX)] = REVIEW_PAGE_SIZE_DEFAULT,
    cursor: Annotated[UUID | None, Query()] = None,
    handler: ListReviewsHandler = Depends(get_list_reviews_handler),
) -> ReviewListResponse | JSONResponse:
    """List reviews of one API.

    GET /api/v1/apis/{api_id}/reviews → 200 OK

    Returns:
        ReviewListResponse with one page of reviews.
        JSONResponse 404 when the API does not exist.
    """
    result = await handler.handle(
        ListReviews(api_id=api_id, sort_by=sort_by, limit=limit, cursor=cursor)
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=_map_review_error(result.error),
            request=request,
            trace_id=get_trace_id() or "",
        )

    return ReviewListResponse.from_dto(result.value)


async def create_review(
    request: Request,
    data: ReviewCreateRequest,
    handler: CreateReviewHandler = Depends(get_create_review_handler),
) -> ReviewResponse | JSONResponse:
    """Create a review.

    POST /api/v1/reviews → 201 Created

    Args:
        request: FastAPI request object.
        data: Review to create.
        handler: Create review handler (injected).

    Returns:
        ReviewResponse with the stored review.
        JSONResponse 404 when the API or the user does not exist.
    """
    result = await handler.handle(
        CreateReview(
            api_id=data.api_id,
            user_id=data.user_id,
            rating=data.rating,
            content=data.content,
        )
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=_map_review_error(result.error),
            request=request,
            trace_id=get_trace_id() or "",
        )

    return ReviewResponse.from_dto(result.value)


async def vote_review(
    request: Request,
    review_id: Annotated[UUID, Path(description="Review UUID")],
    data: ReviewVoteRequest,
    handler: VoteReviewHandler = Depends(get_vote_review_handler),
) -> ReviewResponse | JSONResponse:
    """Vote on a review's helpfulness.

    POST /api/v1/reviews/{review_id}/votes → 200 OK
    """
    result = await handler.handle(
        VoteReview(review_id=review_id, direction=data.direction)
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=_map_review_error(result.error),
            request=request,
            trace_id=get_trace_id() or "",
        )

    return ReviewResponse.from_dto(result.value)
