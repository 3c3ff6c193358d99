"""Catalog handler dependency factories.

Request-scoped handlers for listing, detail, featured, category and
comparison queries.
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from apihub.core.container.infrastructure import get_db_session

if TYPE_CHECKING:
    from apihub.application.queries.handlers.compare_apis_handler import (
        CompareApisHandler,
    )
    from apihub.application.queries.handlers.get_api_handler import GetApiHandler
    from apihub.application.queries.handlers.list_apis_handler import (
        ListApisHandler,
        ListFeaturedApisHandler,
    )
    from apihub.application.queries.handlers.list_categories_handler import (
        ListCategoriesHandler,
    )


async def get_list_apis_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ListApisHandler":
    """Get ListApis query handler (request-scoped)."""
    from apihub.application.queries.handlers.list_apis_handler import ListApisHandler
    from apihub.infrastructure.persistence.repositories import (
        ApiRepository,
        ReviewRepository,
    )

    return ListApisHandler(
        api_repo=ApiRepository(session=session),
        review_repo=ReviewRepository(session=session),
    )


async def get_list_featured_apis_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ListFeaturedApisHandler":
    """Get ListFeaturedApis query handler (request-scoped)."""
    from apihub.application.queries.handlers.list_apis_handler import (
        ListFeaturedApisHandler,
    )
    from apihub.infrastructure.persistence.repositories import (
        ApiRepository,
        ReviewRepository,
    )

    return ListFeaturedApisHandler(
        api_repo=ApiRepository(session=session),
        review_repo=ReviewRepository(session=session),
    )


async def get_get_api_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "GetApiHandler":
    """Get GetApi query handler (request-scoped).

    Creates handler with:
    - ApiRepository (listing lookup)
    - ReviewRepository (recent reviews, rating)
    - UserRepository (review authors)
    """
    from apihub.application.queries.handlers.get_api_handler import GetApiHandler
    from apihub.infrastructure.persistence.repositories import (
        ApiRepository,
        ReviewRepository,
        UserRepository,
    )

    return GetApiHandler(
        api_repo=ApiRepository(session=session),
        review_repo=ReviewRepository(session=session),
        user_repo=UserRepository(session=session),
    )


async def get_list_categories_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ListCategoriesHandler":
    """Get ListCategories query handler (request-scoped)."""
    from apihub.application.queries.handlers.list_categories_handler import (
        ListCategoriesHandler,
    )
    from apihub.infrastructure.persistence.repositories import ApiRepository

    return ListCategoriesHandler(api_repo=ApiRepository(session=session))


async def get_compare_apis_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "CompareApisHandler":
    """Get CompareApis query handler (request-scoped)."""
    from apihub.application.queries.handlers.compare_apis_handler import (
        CompareApisHandler,
    )
    from apihub.infrastructure.persistence.repositories import (
        ApiRepository,
        ReviewRepository,
    )

    return CompareApisHandler(
        api_repo=ApiRepository(session=session),
        review_repo=ReviewRepository(session=session),
    )
