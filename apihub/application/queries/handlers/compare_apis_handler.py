"""CompareApis query handler.

Loads 2 to 4 listings for side-by-side comparison, in the order the
caller asked for them.
"""

from apihub.application.dtos import ApiListingResult
from apihub.application.queries.catalog_queries import CompareApis
from apihub.core.constants import COMPARISON_MAX_APIS, COMPARISON_MIN_APIS
from apihub.core.result import Failure, Result, Success
from apihub.domain.protocols.api_repository import ApiRepository
from apihub.domain.protocols.review_repository import ReviewRepository


class CompareApisError:
    """CompareApis-specific errors."""

    INVALID_COUNT = (
        f"Between {COMPARISON_MIN_APIS} and {COMPARISON_MAX_APIS} "
        "distinct APIs can be compared"
    )
    API_NOT_FOUND = "API not found"


class CompareApisHandler:
    """Handler for CompareApis query."""

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

    async def handle(self, query: CompareApis) -> Result[list[ApiListingResult], str]:
        """Handle CompareApis query.

        Args:
            query: Ids to compare.

        Returns:
            Success(list[ApiListingResult]): Listings in requested order.
            Failure(error): Wrong number of ids, or an id does not exist.
        """
        api_ids = list(dict.fromkeys(query.api_ids))
        if not COMPARISON_MIN_APIS <= len(api_ids) <= COMPARISON_MAX_APIS:
            return Failure(error=CompareApisError.INVALID_COUNT)

        listings = await self._api_repo.find_by_ids(api_ids)
        missing = [api_id for api_id in api_ids if api_id not in listings]
        if missing:
            return Failure(error=f"{CompareApisError.API_NOT_FOUND}: {missing[0]}")

        ratings = await self._review_repo.rating_summaries(api_ids)
        return Success(
            value=[
                ApiListingResult.from_entity(listings[api_id], ratings.get(api_id))
                for api_id in api_ids
            ]
        )
