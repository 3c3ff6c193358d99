"""ListCategories query handler."""

from apihub.application.dtos import GroupCountResult
from apihub.application.queries.catalog_queries import ListCategories
from apihub.core.result import Result, Success
from apihub.domain.protocols.api_repository import ApiRepository


class ListCategoriesHandler:
    """Handler for ListCategories query.

    Returns categories by descending listing count; empty category names
    are left out.
    """

    def __init__(self, api_repo: ApiRepository) -> None:
        """Initialize handler with dependencies.

        Args:
            api_repo: API listing repository.
        """
        self._api_repo = api_repo

    async def handle(self, query: ListCategories) -> Result[list[GroupCountResult], str]:
        """Handle ListCategories query.

        Args:
            query: ListCategories query (no parameters).

        Returns:
            Success(list[GroupCountResult]): Categories with counts.
        """
        groups = await self._api_repo.list_categories()
        return Success(
            value=[GroupCountResult.from_value(group) for group in groups if group.name]
        )
