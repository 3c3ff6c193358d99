"""Integration tests for ReviewRepository (ratings, sorting, votes)."""

from datetime import UTC, datetime, timedelta

import pytest
from uuid_extensions import uuid7

from apihub.domain.enums import ReviewSort
from apihub.infrastructure.persistence.repositories import (
    ApiRepository,
    ReviewRepository,
    UserRepository,
)
from tests.conftest import create_listing, create_review, create_user

BASE_TIME = datetime(2026, 2, 1, tzinfo=UTC)


@pytest.fixture
async def listing_and_user(db_session):
    listing = create_listing()
    user = create_user()
    await ApiRepository(session=db_session).save(listing)
    await UserRepository(session=db_session).save(user)
    return listing, user


async def add_reviews(db_session, api_id, user_id, ratings):
    repo = ReviewRepository(session=db_session)
    reviews = [
        create_review(api_id, user_id, rating=rating, created_at=BASE_TIME + timedelta(minutes=i))
        for i, rating in enumerate(ratings)
    ]
    for review in reviews:
        await repo.save(review)
    return reviews


@pytest.mark.integration
class TestRatingSummaries:
    """Derived ratings."""

    async def test_average_and_count(self, db_session, listing_and_user):
        listing, user = listing_and_user
        await add_reviews(db_session, listing.id, user.id, [5, 4, 3])

        summaries = await ReviewRepository(session=db_session).rating_summaries([listing.id])

        assert summaries[listing.id].avg_rating == 4.0
        assert summaries[listing.id].review_count == 3

    async def test_rounding(self, db_session, listing_and_user):
        listing, user = listing_and_user
        await add_reviews(db_session, listing.id, user.id, [4, 4, 4, 5])

        summaries = await ReviewRepository(session=db_session).rating_summaries([listing.id])

        assert summaries[listing.id].avg_rating == 4.3

    async def test_unrated_listing(self, db_session):
        unrated = uuid7()

        summaries = await ReviewRepository(session=db_session).rating_summaries([unrated])

        assert summaries[unrated].avg_rating == 0.0
        assert summaries[unrated].review_count == 0


@pytest.mark.integration
class TestReviewListing:
    """Sorting and pagination of reviews."""

    async def test_sort_modes(self, db_session, listing_and_user):
        listing, user = listing_and_user
        await add_reviews(db_session, listing.id, user.id, [3, 5, 1, 5])
        repo = ReviewRepository(session=db_session)

        recent = await repo.list_page(api_id=listing.id, sort_by=ReviewSort.RECENT, limit=10)
        highest = await repo.list_page(api_id=listing.id, sort_by=ReviewSort.HIGHEST, limit=10)
        lowest = await repo.list_page(api_id=listing.id, sort_by=ReviewSort.LOWEST, limit=10)

        assert [r.rating for r in recent.items] == [5, 1, 5, 3]
        assert [r.rating for r in highest.items] == [5, 5, 3, 1]
        assert [r.rating for r in lowest.items] == [1, 3, 5, 5]

    async def test_highest_ties_break_newest_first(self, db_session, listing_and_user):
        listing, user = listing_and_user
        reviews = await add_reviews(db_session, listing.id, user.id, [5, 5, 2])
        repo = ReviewRepository(session=db_session)

        first = await repo.list_page(api_id=listing.id, sort_by=ReviewSort.HIGHEST, limit=1)
        second = await repo.list_page(
            api_id=listing.id, sort_by=ReviewSort.HIGHEST, limit=1, cursor=first.next_cursor
        )

        assert first.items[0].id == reviews[1].id
        assert first.next_cursor == reviews[0].id
        assert second.items[0].id == reviews[0].id
        assert second.next_cursor == reviews[2].id

    async def test_only_reviews_of_that_listing(self, db_session, listing_and_user):
        listing, user = listing_and_user
        other = create_listing("Other")
        await ApiRepository(session=db_session).save(other)
        await add_reviews(db_session, listing.id, user.id, [4])
        await add_reviews(db_session, other.id, user.id, [1, 2])

        page = await ReviewRepository(session=db_session).list_page(
            api_id=listing.id, sort_by=ReviewSort.RECENT, limit=10
        )

        assert [r.rating for r in page.items] == [4]

    async def test_list_recent_limit(self, db_session, listing_and_user):
        listing, user = listing_and_user
        await add_reviews(db_session, listing.id, user.id, [1, 2, 3, 4])

        recent = await ReviewRepository(session=db_session).list_recent(listing.id, 2)

        assert [r.rating for r in recent] == [4, 3]


@pytest.mark.integration
class TestApplyVote:
    """Atomic helpful_count updates."""

    async def test_up_and_down(self, db_session, listing_and_user):
        listing, user = listing_and_user
        [review] = await add_reviews(db_session, listing.id, user.id, [5])
        repo = ReviewRepository(session=db_session)

        await repo.apply_vote(review.id, 1)
        await repo.apply_vote(review.id, 1)
        updated = await repo.apply_vote(review.id, -1)

        assert updated is not None
        assert updated.helpful_count == 1

    async def test_can_go_negative(self, db_session, listing_and_user):
        listing, user = listing_and_user
        [review] = await add_reviews(db_session, listing.id, user.id, [2])
        repo = ReviewRepository(session=db_session)

        await repo.apply_vote(review.id, -1)
        updated = await repo.apply_vote(review.id, -1)

        assert updated.helpful_count == -2

    async def test_missing_review(self, db_session):
        assert await ReviewRepository(session=db_session).apply_vote(uuid7(), 1) is None
