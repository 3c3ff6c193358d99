"""Unit tests for domain entities, enums and value objects."""

from datetime import UTC, datetime, timedelta

import pytest
from freezegun import freeze_time
from uuid_extensions import uuid7

from apihub.domain.entities import ApiKey, ApiListing, Review, User
from apihub.domain.enums import HttpMethod, VoteDirection
from apihub.domain.value_objects import RatingSummary


@pytest.mark.unit
class TestRatingSummary:
    """Average rating derivation."""

    @pytest.mark.parametrize(
        ("ratings", "expected"),
        [
            ([5, 4, 3], 4.0),
            ([4, 4, 4, 5], 4.3),
            ([5, 4], 4.5),
            ([1, 2, 2, 2], 1.8),
            ([3, 4, 4, 4, 4, 4, 4, 4, 4, 4, 4, 4, 4, 4, 4, 4, 4, 4, 4, 4], 4.0),
        ],
    )
    def test_mean_rounded_to_one_decimal(self, ratings, expected):
        summary = RatingSummary.from_totals(sum(ratings), len(ratings))

        assert summary.avg_rating == expected
        assert summary.review_count == len(ratings)

    def test_rounds_half_up(self):
        # 4.25 would round to 4.2 with banker's rounding
        assert RatingSummary.from_totals(17, 4).avg_rating == 4.3

    def test_no_reviews(self):
        assert RatingSummary.from_totals(0, 0) == RatingSummary(avg_rating=0.0, review_count=0)
        assert RatingSummary.from_totals(None, 0) == RatingSummary()


@pytest.mark.unit
class TestEnums:
    """Behaviour carried by domain enums."""

    def test_vote_delta(self):
        assert VoteDirection.UP.delta == 1
        assert VoteDirection.DOWN.delta == -1

    @pytest.mark.parametrize(
        ("method", "carries_body"),
        [
            (HttpMethod.GET, False),
            (HttpMethod.POST, True),
            (HttpMethod.PUT, True),
            (HttpMethod.PATCH, True),
            (HttpMethod.DELETE, False),
            (HttpMethod.HEAD, False),
            (HttpMethod.OPTIONS, False),
        ],
    )
    def test_carries_body(self, method, carries_body):
        assert method.carries_body is carries_body

    def test_method_values(self):
        assert HttpMethod.values() == [
            "GET",
            "POST",
            "PUT",
            "DELETE",
            "PATCH",
            "HEAD",
            "OPTIONS",
        ]


@pytest.mark.unit
class TestEntityValidation:
    """Invariants enforced at construction."""

    @pytest.mark.parametrize("rating", [0, 6])
    def test_review_rating_range(self, rating):
        with pytest.raises(ValueError, match="between 1 and 5"):
            Review(id=uuid7(), api_id=uuid7(), user_id=uuid7(), rating=rating)

    def test_listing_requires_name(self):
        with pytest.raises(ValueError, match="name cannot be empty"):
            ApiListing(
                id=uuid7(),
                name="",
                description="",
                base_url="https://x.io",
                category="Misc",
            )

    def test_user_requires_email(self):
        with pytest.raises(ValueError, match="valid address"):
            User(id=uuid7(), email="not-an-email")


@pytest.mark.unit
class TestApiKey:
    """ApiKey expiry and usage tracking."""

    def _key(self, **kwargs) -> ApiKey:
        return ApiKey(id=uuid7(), name="k", service="s", encrypted_key=b"x", **kwargs)

    def test_never_expires_without_date(self):
        assert self._key().is_expired() is False

    def test_expired(self):
        now = datetime.now(UTC)

        assert self._key(expires_at=now - timedelta(seconds=1)).is_expired(now) is True
        assert self._key(expires_at=now + timedelta(days=1)).is_expired(now) is False

    def test_naive_expiry_is_treated_as_utc(self):
        naive = datetime(2020, 1, 1)

        assert self._key(expires_at=naive).is_expired() is True

    @freeze_time("2026-03-01 09:30:00")
    def test_mark_used(self):
        key = self._key()

        key.mark_used()

        assert key.last_used_at == datetime(2026, 3, 1, 9, 30, tzinfo=UTC)
        assert key.updated_at == key.last_used_at

    @freeze_time("2026-03-01 09:30:00")
    def test_expires_exactly_at_deadline(self):
        key = self._key(expires_at=datetime(2026, 3, 1, 9, 30, tzinfo=UTC))

        assert key.is_expired() is True

    def test_repr_hides_ciphertext(self):
        assert "encrypted_key" not in repr(self._key())
