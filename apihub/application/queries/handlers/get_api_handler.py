"""GetApi query handler.

Returns one listing with its rating over ALL of its reviews and the ten
most recent reviews (with their authors).
"""

from apihub.application.dtos import ApiDetailResult, ApiListingResult, ReviewResult
from apihub.application.queries.catalog_queries import GetApi
from apihub.core.constants import RECENT_REVIEWS_ON_DETAIL
from apihub.core.result import Failure, Result, Success
from apihub.domain.protocols.api_repository import ApiRepository
from apihub.domain.protocols.review_repository import ReviewRepository
from apihub.domain.protocols.user_repository import UserRepository


class GetApiError:
    """GetApi-specific errors."""

    API_NOT_FOUND = "API not found"


class GetApiHandler:
    """Handler for GetApi query.

    Dependencies (injected via constructor):
        - ApiRepository: Listing lookup
        - ReviewRepository: Recent reviews and rating aggregation
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

    async def handle(self, query: GetApi) -> Result[ApiDetailResult, str]:
        """Handle GetApi query.

        Args:
            query: GetApi query with the listing id.

        Returns:
            Success(ApiDetailResult): Listing found.
            Failure(error): Listing does not exist.
        """
        listing = await self._api_repo.find_by_id(query.api_id)
        if listing is None:
            return Failure(error=GetApiError.API_NOT_FOUND)

        ratings = await self._review_repo.rating_summaries([listing.id])
        reviews = await self._review_repo.list_recent(listing.id, RECENT_REVIEWS_ON_DETAIL)
        authors = await self._user_repo.find_by_ids(
            list({review.user_id for review in reviews})
        )

        return Success(
            value=ApiDetailResult(
                api=ApiListingResult.from_entity(listing, ratings.get(listing.id)),
                reviews=[
                    ReviewResult.from_entity(review, authors.get(review.user_id))
                    for review in reviews
                ],
            )
        )
