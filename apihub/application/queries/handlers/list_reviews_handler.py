"""ListReviews query handler."""

from apihub.application.dtos import ReviewPageResult, ReviewResult
from apihub.application.queries.review_queries import ListReviews
from apihub.core.constants import REVIEW_PAGE_SIZE_MAX
from apihub.core.result import Failure, Result, Success
from apihub.domain.protocols.api_repository import ApiRepository
from apihub.domain.protocols.review_repository import ReviewRepository
from apihub.domain.protocols.user_repository import UserRepository


class ListReviewsError:
    """ListReviews-specific errors."""

    API_NOT_FOUND = "API not found"
    INVALID_LIMIT = f"Limit must be between 1 and {REVIEW_PAGE_SIZE_MAX}"


class ListReviewsHandler:
    """Handler for ListReviews query.

    Dependencies (injected via constructor):
        - ApiRepository: Verifies the listing exists
        - ReviewRepository: Cursor-paginated reviews
        - UserRepository: Review authors
    """

    def __init__(
        self,
        api_repo: ApiRepository,
        review_repo: ReviewRepository,
        user_repo: UserRepository,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            api_repo: API listing repository.
            review_repo: Review repository.
            user_repo: User repository.
        """
        self._api_repo = api_repo
        self._review_repo = review_repo
        self._user_repo = user_repo

    async def handle(self, query: ListReviews) -> Result[ReviewPageResult, str]:
        """Handle ListReviews query.

        Args:
            query: Listing id, sort mode and pagination.

        Returns:
            Success(ReviewPageResult): Page of reviews.
            Failure(error): Listing does not exist or limit out of range.
        """
        if not 1 <= query.limit <= REVIEW_PAGE_SIZE_MAX:
            return Failure(error=ListReviewsError.INVALID_LIMIT)

        if await self._api_repo.find_by_id(query.api_id) is None:
            return Failure(error=ListReviewsError.API_NOT_FOUND)

        page = await self._review_repo.list_page(
            api_id=query.api_id,
            sort_by=query.sort_by,
            limit=query.limit,
            cursor=query.cursor,
        )
        authors = await self._user_repo.find_by_ids(
            list({review.user_id for review in page.items})
        )

        return Success(
            value=ReviewPageResult(
                items=[
                    ReviewResult.from_entity(review, authors.get(review.user_id))
                    for review in page.items
                ],
                next_cursor=page.next_cursor,
            )
        )
