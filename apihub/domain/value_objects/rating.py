"""Derived rating of an API listing."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal


@dataclass(frozen=True, slots=True)
class RatingSummary:
    """Average rating and review count of a listing.

    avg_rating is the arithmetic mean of all ratings rounded half-up to
    one decimal place, or 0 when there are no reviews.
    """

    avg_rating: float = 0.0
    review_count: int = 0

    @classmethod
    def from_totals(cls, rating_sum: int | None, review_count: int) -> "RatingSummary":
        """Build a summary from an aggregated sum and count.

        Args:
            rating_sum: Sum of all ratings (None when there are no rows).
            review_count: Number of reviews.

        Returns:
            RatingSummary: Rounded summary.

        Example:
            >>> RatingSummary.from_totals(12, 3)
            RatingSummary(avg_rating=4.0, review_count=3)
        """
        if not review_count:
            return cls(avg_rating=0.0, review_count=0)

        mean = Decimal(rating_sum or 0) / Decimal(review_count)
        rounded = mean.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
        return cls(avg_rating=float(rounded), review_count=review_count)
