"""Review repository implementation.

Also owns rating aggregation: ratings are summed and counted in SQL and
rounded in Python (RatingSummary) so the rounding rule is identical on
every database.
"""

from uuid import UUID

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from apihub.domain.entities.review import Review
from apihub.domain.enums import ReviewSort
from apihub.domain.value_objects import CursorPage, RatingSummary
from apihub.infrastructure.persistence.models.review import ReviewModel
from apihub.infrastructure.persistence.pagination import SortKey, fetch_page

_TIE_BREAK = (SortKey(ReviewModel.created_at), SortKey(ReviewModel.id))

_SORT_KEYS: dict[ReviewSort, tuple[SortKey, ...]] = {
    ReviewSort.RECENT: _TIE_BREAK,
    ReviewSort.HIGHEST: (SortKey(ReviewModel.rating, descending=True), *_TIE_BREAK),
    ReviewSort.LOWEST: (SortKey(ReviewModel.rating, descending=False), *_TIE_BREAK),
}


class ReviewRepository:
    """SQLAlchemy implementation of ReviewRepository protocol."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self._session = session

    async def find_by_id(self, review_id: UUID) -> Review | None:
        """Find review by ID.

        Args:
            review_id: Review identifier.

        Returns:
            Review if found, None otherwise.
        """
        model = await self._session.get(ReviewModel, review_id)
        if model is None:
            return None
        return self._to_entity(model)

    async def save(self, review: Review) -> None:
        """Create or update a review.

        helpful_count is never written here; votes go through apply_vote().

        Args:
            review: Review to persist.
        """
        existing = await self._session.get(ReviewModel, review.id)

        if existing is None:
            self._session.add(self._to_model(review))
        else:
            existing.rating = review.rating
            existing.content = review.content

        await self._session.flush()

    async def list_page(
        self,
        *,
        api_id: UUID,
        sort_by: ReviewSort,
        limit: int,
        cursor: UUID | None = None,
    ) -> CursorPage[Review]:
        """List reviews of one listing, cursor-paginated.

        Args:
            api_id: Reviewed listing.
            sort_by: Sort mode.
            limit: Page size.
            cursor: Id of the row the page starts at (inclusive).

        Returns:
            CursorPage of reviews.
        """
        models, next_cursor = await fetch_page(
            self._session,
            select(ReviewModel).where(ReviewModel.api_id == api_id),
            keys=_SORT_KEYS[sort_by],
            id_column=ReviewModel.id,
            limit=limit,
            cursor=cursor,
        )
        return CursorPage(
            items=[self._to_entity(model) for model in models],
            next_cursor=next_cursor,
        )

    async def list_recent(self, api_id: UUID, limit: int) -> list[Review]:
        """List the most recent reviews of one listing.

        Args:
            api_id: Reviewed listing.
            limit: Maximum number of reviews.

        Returns:
            Reviews newest first.
        """
        stmt = (
            select(ReviewModel)
            .where(ReviewModel.api_id == api_id)
            .order_by(ReviewModel.created_at.desc(), ReviewModel.id.desc())
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars().all()]

    async def rating_summaries(self, api_ids: list[UUID]) -> dict[UUID, RatingSummary]:
        """Aggregate ratings per listing.

        Args:
            api_ids: Listings to aggregate.

        Returns:
            Summary for every requested id (unrated listings get 0.0/0).
        """
        summaries = {api_id: RatingSummary() for api_id in api_ids}
        if not api_ids:
            return summaries

        stmt = (
            select(
                ReviewModel.api_id,
                func.sum(ReviewModel.rating),
                func.count(ReviewModel.id),
            )
            .where(ReviewModel.api_id.in_(set(api_ids)))
            .group_by(ReviewModel.api_id)
        )
        result = await self._session.execute(stmt)
        for api_id, rating_sum, review_count in result.all():
            summaries[api_id] = RatingSummary.from_totals(rating_sum, review_count)

        return summaries

    async def apply_vote(self, review_id: UUID, delta: int) -> Review | None:
        """Atomically add delta to helpful_count.

        Args:
            review_id: Review identifier.
            delta: +1 or -1.

        Returns:
            Updated review, or None if it does not exist.
        """
        stmt = (
            update(ReviewModel)
            .where(ReviewModel.id == review_id)
            .values(helpful_count=ReviewModel.helpful_count + delta)
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        if result.rowcount == 0:  # type: ignore[attr-defined]
            return None

        refreshed = await self._session.execute(
            select(ReviewModel)
            .where(ReviewModel.id == review_id)
            .execution_options(populate_existing=True)
        )
        return self._to_entity(refreshed.scalar_one())

    def _to_entity(self, model: ReviewModel) -> Review:
        """Map database model to domain entity."""
        return Review(
            id=model.id,
            api_id=model.api_id,
            user_id=model.user_id,
            rating=model.rating,
            content=model.content,
            helpful_count=model.helpful_count,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Review) -> ReviewModel:
        """Map domain entity to database model."""
        return ReviewModel(
            id=entity.id,
            api_id=entity.api_id,
            user_id=entity.user_id,
            rating=entity.rating,
            content=entity.content,
            helpful_count=entity.helpful_count,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
