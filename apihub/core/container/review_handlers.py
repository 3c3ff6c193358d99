"""Review handler dependency factories."""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from apihub.core.container.infrastructure import get_db_session, get_logger

if TYPE_CHECKING:
    from apihub.application.commands.handlers.create_review_handler import (
        CreateReviewHandler,
    )
    from apihub.application.commands.handlers.vote_review_handler import (
        VoteReviewHandler,
    )
    from apihub.application.queries.handlers.list_reviews_handler import (
        ListReviewsHandler,
    )


async def get_list_reviews_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ListReviewsHandler":
    """Get ListReviews query handler (request-scoped)."""
    from apihub.application.queries.handlers.list_reviews_handler import (
        ListReviewsHandler,
    )
    from apihub.infrastructure.persistence.repositories import (
        ApiRepository,
        ReviewRepository,
        UserRepository,
    )

    return ListReviewsHandler(
        api_repo=ApiRepository(session=session),
        review_repo=ReviewRepository(session=session),
        user_repo=UserRepository(session=session),
    )


async def get_create_review_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "CreateReviewHandler":
    """Get CreateReview command handler (request-scoped)."""
    from apihub.application.commands.handlers.create_review_handler import (
        CreateReviewHandler,
    )
    from apihub.infrastructure.persistence.repositories import (
        ApiRepository,
        ReviewRepository,
        UserRepository,
    )

    return CreateReviewHandler(
        api_repo=ApiRepository(session=session),
        user_repo=UserRepository(session=session),
        review_repo=ReviewRepository(session=session),
        logger=get_logger(),
    )


async def get_vote_review_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "VoteReviewHandler":
    """Get VoteReview command handler (request-scoped)."""
    from apihub.application.commands.handlers.vote_review_handler import (
        VoteReviewHandler,
    )
    from apihub.infrastructure.persistence.repositories import (
        ReviewRepository,
        UserRepository,
    )

    return VoteReviewHandler(
        review_repo=ReviewRepository(session=session),
        user_repo=UserRepository(session=session),
        logger=get_logger(),
    )
