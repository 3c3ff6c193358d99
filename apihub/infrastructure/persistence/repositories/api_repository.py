"""API listing repository implementation.

SQLAlchemy implementation of the ApiRepository protocol. Maps between
the ApiListing domain entity and ApiModel.
"""

from uuid import UUID

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from apihub.domain.entities.api_listing import ApiListing
from apihub.domain.value_objects import CursorPage, GroupCount
from apihub.infrastructure.persistence.models.api import ApiModel
from apihub.infrastructure.persistence.pagination import SortKey, fetch_page

_NEWEST_FIRST = (SortKey(ApiModel.created_at), SortKey(ApiModel.id))


class ApiRepository:
    """SQLAlchemy implementation of ApiRepository protocol.

    **Implementation Notes**:
    - select() queries (SQLAlchemy 2.0 style)
    - Search lower-cases both sides and escapes LIKE wildcards, so it
      behaves the same on PostgreSQL and SQLite
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self._session = session

    async def find_by_id(self, api_id: UUID) -> ApiListing | None:
        """Find listing by ID.

        Args:
            api_id: Listing identifier.

        Returns:
            ApiListing if found, None otherwise.
        """
        model = await self._session.get(ApiModel, api_id)
        if model is None:
            return None
        return self._to_entity(model)

    async def find_by_ids(self, api_ids: list[UUID]) -> dict[UUID, ApiListing]:
        """Load several listings at once.

        Args:
            api_ids: Listing identifiers.

        Returns:
            Mapping of id to listing for the ids that exist.
        """
        if not api_ids:
            return {}

        stmt = select(ApiModel).where(ApiModel.id.in_(set(api_ids)))
        result = await self._session.execute(stmt)
        return {model.id: self._to_entity(model) for model in result.scalars().all()}

    async def list_page(
        self,
        *,
        limit: int,
        cursor: UUID | None = None,
        category: str | None = None,
        auth_type: str | None = None,
        search: str | None = None,
    ) -> CursorPage[ApiListing]:
        """List listings newest first, filtered and cursor-paginated.

        Args:
            limit: Page size.
            cursor: Id of the row the page starts at (inclusive).
            category: Exact category filter.
            auth_type: Exact auth type filter.
            search: Case-insensitive substring of name or description.

        Returns:
            CursorPage of listings.
        """
        stmt = select(ApiModel)
        if category:
            stmt = stmt.where(ApiModel.category == category)
        if auth_type:
            stmt = stmt.where(ApiModel.auth_type == auth_type)
        if search:
            needle = search.lower()
            stmt = stmt.where(
                or_(
                    func.lower(ApiModel.name).contains(needle, autoescape=True),
                    func.lower(ApiModel.description).contains(needle, autoescape=True),
                )
            )

        models, next_cursor = await fetch_page(
            self._session,
            stmt,
            keys=_NEWEST_FIRST,
            id_column=ApiModel.id,
            limit=limit,
            cursor=cursor,
        )
        return CursorPage(
            items=[self._to_entity(model) for model in models],
            next_cursor=next_cursor,
        )

    async def list_featured(self, limit: int) -> list[ApiListing]:
        """List featured listings newest first.

        Args:
            limit: Maximum number of listings.

        Returns:
            Featured listings.
        """
        stmt = (
            select(ApiModel)
            .where(ApiModel.featured.is_(True))
            .order_by(ApiModel.created_at.desc(), ApiModel.id.desc())
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars().all()]

    async def list_categories(self) -> list[GroupCount]:
        """Group listings by category, count descending.

        Returns:
            Non-empty categories with their listing count.
        """
        count = func.count(ApiModel.id).label("count")
        stmt = (
            select(ApiModel.category, count)
            .where(ApiModel.category != "")
            .group_by(ApiModel.category)
            .order_by(count.desc(), ApiModel.category)
        )
        result = await self._session.execute(stmt)
        return [GroupCount(name=name, count=total) for name, total in result.all()]

    async def save(self, listing: ApiListing) -> None:
        """Create or update a listing.

        Args:
            listing: Listing to persist.
        """
        existing = await self._session.get(ApiModel, listing.id)

        if existing is None:
            self._session.add(self._to_model(listing))
        else:
            existing.name = listing.name
            existing.description = listing.description
            existing.base_url = listing.base_url
            existing.category = listing.category
            existing.auth_type = listing.auth_type
            existing.rate_limit = listing.rate_limit
            existing.https = listing.https
            existing.cors_policy = listing.cors_policy
            existing.documentation_url = listing.documentation_url
            existing.featured = listing.featured

        await self._session.flush()

    def _to_entity(self, model: ApiModel) -> ApiListing:
        """Map database model to domain entity."""
        return ApiListing(
            id=model.id,
            name=model.name,
            description=model.description,
            base_url=model.base_url,
            category=model.category,
            auth_type=model.auth_type,
            rate_limit=model.rate_limit,
            https=model.https,
            cors_policy=model.cors_policy,
            documentation_url=model.documentation_url,
            featured=model.featured,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: ApiListing) -> ApiModel:
        """Map domain entity to database model."""
        return ApiModel(
            id=entity.id,
            name=entity.name,
            description=entity.description,
            base_url=entity.base_url,
            category=entity.category,
            auth_type=entity.auth_type,
            rate_limit=entity.rate_limit,
            https=entity.https,
            cors_policy=entity.cors_policy,
            documentation_url=entity.documentation_url,
            featured=entity.featured,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
