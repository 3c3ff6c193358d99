"""ListApis and ListFeaturedApis query handlers.

Both return listings newest first, each decorated with its derived
rating (avg_rating, review_count).

Architecture:
- Application layer handlers (orchestrate data retrieval)
- Return Result[DTO, str] (explicit error handling)
- Side-effect free
"""

from apihub.application.dtos import ApiListingResult, ApiPageResult
from apihub.application.queries.catalog_queries import ListApis, ListFeaturedApis
from apihub.core.constants import API_PAGE_SIZE_MAX, FEATURED_API_LIMIT
from apihub.core.result import Failure, Result, Success
from apihub.domain.protocols.api_repository import ApiRepository
from apihub.domain.protocols.review_repository import ReviewRepository


class ListApisError:
    """ListApis-specific errors."""

    INVALID_LIMIT = f"Limit must be between 1 and {API_PAGE_SIZE_MAX}"


class ListApisHandler:
    """Handler for ListApis query.

    Dependencies (injected via constructor):
        - ApiRepository: Filtered, cursor-paginated listing
        - ReviewRepository: Rating aggregation

    Returns:
        Result[ApiPageResult, str]: Success(page) or Failure(error)
    """

    def __init__(
        self,
        api_repo: ApiRepository,
        review_repo: ReviewRepository,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            api_repo: API listing repository.
            review_repo: Review repository.
        """
        self._api_repo = api_repo
        self._review_repo = review_repo

    async def handle(self, query: ListApis) -> Result[ApiPageResult, str]:
        """Handle ListApis query.

        Args:
            query: Filters and pagination.

        Returns:
            Success(ApiPageResult): Page of listings with ratings.
            Failure(error): Limit out of range.
        """
        if not 1 <= query.limit <= API_PAGE_SIZE_MAX:
            return Failure(error=ListApisError.INVALID_LIMIT)

        search = query.search.strip() if query.search else None
        page = await self._api_repo.list_page(
            limit=query.limit,
            cursor=query.cursor,
            category=query.category or None,
            auth_type=query.auth_type or None,
            search=search or None,
        )

        ratings = await self._review_repo.rating_summaries([api.id for api in page.items])
        items = [ApiListingResult.from_entity(api, ratings.get(api.id)) for api in page.items]

        return Success(value=ApiPageResult(items=items, next_cursor=page.next_cursor))


class ListFeaturedApisHandler:
    """Handler for ListFeaturedApis query.

    Returns at most six featured listings, newest first.
    """

    def __init__(
        self,
        api_repo: ApiRepository,
        review_repo: ReviewRepository,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            api_repo: API listing repository.
            review_repo: Review repository.
        """
        self._api_repo = api_repo
        self._review_repo = review_repo

    async def handle(
        self, query: ListFeaturedApis
    ) -> Result[list[ApiListingResult], str]:
        """Handle ListFeaturedApis query.

        Args:
            query: ListFeaturedApis query (no parameters).

        Returns:
            Success(list[ApiListingResult]): Featured listings.
        """
        listings = await self._api_repo.list_featured(FEATURED_API_LIMIT)
        ratings = await self._review_repo.rating_summaries([api.id for api in listings])

        return Success(
            value=[ApiListingResult.from_entity(api, ratings.get(api.id)) for api in listings]
        )
