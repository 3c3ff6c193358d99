"""Unit tests for review command handlers."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from uuid_extensions import uuid7

from apihub.application.commands.handlers.create_review_handler import (
    CreateReviewError,
    CreateReviewHandler,
)
from apihub.application.commands.handlers.vote_review_handler import (
    VoteReviewError,
    VoteReviewHandler,
)
from apihub.application.commands.review_commands import CreateReview, VoteReview
from apihub.core.result import Failure, Success
from apihub.domain.entities import Review
from apihub.domain.enums import VoteDirection
from apihub.domain.protocols.api_repository import ApiRepository
from apihub.domain.protocols.review_repository import ReviewRepository
from apihub.domain.protocols.user_repository import UserRepository
from tests.conftest import create_listing, create_review, create_user


@pytest.fixture
def api_repo():
    return AsyncMock(spec=ApiRepository)


@pytest.fixture
def review_repo():
    return AsyncMock(spec=ReviewRepository)


@pytest.fixture
def user_repo():
    return AsyncMock(spec=UserRepository)


@pytest.fixture
def logger():
    return MagicMock()


@pytest.mark.unit
class TestCreateReviewHandler:
    """Tests for CreateReviewHandler."""

    @pytest.fixture
    def handler(self, api_repo, user_repo, review_repo, logger):
        return CreateReviewHandler(
            api_repo=api_repo,
            user_repo=user_repo,
            review_repo=review_repo,
            logger=logger,
        )

    async def test_creates_review(self, handler, api_repo, user_repo, review_repo, logger):
        listing = create_listing()
        author = create_user(name="Misty")
        api_repo.find_by_id.return_value = listing
        user_repo.find_by_id.return_value = author

        result = await handler.handle(
            CreateReview(api_id=listing.id, user_id=author.id, rating=5, content="Great docs")
        )

        assert isinstance(result, Success)
        assert result.value.rating == 5
        assert result.value.content == "Great docs"
        assert result.value.helpful_count == 0
        assert result.value.author.name == "Misty"

        saved = review_repo.save.await_args.args[0]
        assert isinstance(saved, Review)
        assert saved.api_id == listing.id
        assert saved.user_id == author.id
        logger.info.assert_called_once()

    async def test_blank_content_is_stored_as_none(self, handler, api_repo, user_repo, review_repo):
        api_repo.find_by_id.return_value = create_listing()
        user_repo.find_by_id.return_value = create_user()

        result = await handler.handle(
            CreateReview(api_id=uuid7(), user_id=uuid7(), rating=3, content="")
        )

        assert isinstance(result, Success)
        assert review_repo.save.await_args.args[0].content is None

    @pytest.mark.parametrize("rating", [0, 6, -1])
    async def test_rating_out_of_range(self, handler, api_repo, review_repo, rating):
        result = await handler.handle(
            CreateReview(api_id=uuid7(), user_id=uuid7(), rating=rating)
        )

        assert isinstance(result, Failure)
        assert result.error == CreateReviewError.INVALID_RATING
        api_repo.find_by_id.assert_not_awaited()
        review_repo.save.assert_not_awaited()

    async def test_unknown_api(self, handler, api_repo, review_repo):
        api_repo.find_by_id.return_value = None

        result = await handler.handle(CreateReview(api_id=uuid7(), user_id=uuid7(), rating=4))

        assert isinstance(result, Failure)
        assert result.error == CreateReviewError.API_NOT_FOUND
        review_repo.save.assert_not_awaited()

    async def test_unknown_user(self, handler, api_repo, user_repo, review_repo):
        api_repo.find_by_id.return_value = create_listing()
        user_repo.find_by_id.return_value = None

        result = await handler.handle(CreateReview(api_id=uuid7(), user_id=uuid7(), rating=4))

        assert isinstance(result, Failure)
        assert result.error == CreateReviewError.USER_NOT_FOUND
        review_repo.save.assert_not_awaited()


@pytest.mark.unit
class TestVoteReviewHandler:
    """Tests for VoteReviewHandler."""

    @pytest.fixture
    def handler(self, review_repo, user_repo, logger):
        return VoteReviewHandler(review_repo=review_repo, user_repo=user_repo, logger=logger)

    @pytest.mark.parametrize(
        ("direction", "delta"),
        [(VoteDirection.UP, 1), (VoteDirection.DOWN, -1)],
    )
    async def test_applies_delta(self, handler, review_repo, user_repo, direction, delta):
        author = create_user()
        review = create_review(uuid7(), author.id, helpful_count=delta)
        review_repo.apply_vote.return_value = review
        user_repo.find_by_id.return_value = author

        result = await handler.handle(VoteReview(review_id=review.id, direction=direction))

        assert isinstance(result, Success)
        assert result.value.helpful_count == delta
        review_repo.apply_vote.assert_awaited_once_with(review.id, delta)

    async def test_count_can_go_negative(self, handler, review_repo, user_repo):
        review = create_review(uuid7(), uuid7(), helpful_count=-3)
        review_repo.apply_vote.return_value = review
        user_repo.find_by_id.return_value = None

        result = await handler.handle(
            VoteReview(review_id=review.id, direction=VoteDirection.DOWN)
        )

        assert isinstance(result, Success)
        assert result.value.helpful_count == -3
        assert result.value.author is None

    async def test_unknown_review(self, handler, review_repo, logger):
        review_repo.apply_vote.return_value = None

        result = await handler.handle(
            VoteReview(review_id=uuid7(), direction=VoteDirection.UP)
        )

        assert isinstance(result, Failure)
        assert result.error == VoteReviewError.REVIEW_NOT_FOUND
        logger.info.assert_not_called()
