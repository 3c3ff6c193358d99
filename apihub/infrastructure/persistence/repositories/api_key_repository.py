"""API key vault repository implementation."""

from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from apihub.domain.entities.api_key import ApiKey
from apihub.domain.value_objects import GroupCount
from apihub.infrastructure.persistence.models.api_key import ApiKeyModel


class ApiKeyRepository:
    """SQLAlchemy implementation of ApiKeyRepository protocol.

    Stores and returns ciphertext only.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self._session = session

    async def find_by_id(self, api_key_id: UUID) -> ApiKey | None:
        """Find key by ID.

        Args:
            api_key_id: Key identifier.

        Returns:
            ApiKey if found, None otherwise.
        """
        model = await self._session.get(ApiKeyModel, api_key_id)
        if model is None:
            return None
        return self._to_entity(model)

    async def list_all(
        self,
        *,
        service: str | None = None,
        environment: str | None = None,
    ) -> list[ApiKey]:
        """List keys newest first.

        Args:
            service: Exact service filter.
            environment: Exact environment filter.

        Returns:
            Matching keys.
        """
        stmt = select(ApiKeyModel)
        if service:
            stmt = stmt.where(ApiKeyModel.service == service)
        if environment:
            stmt = stmt.where(ApiKeyModel.environment == environment)
        stmt = stmt.order_by(ApiKeyModel.created_at.desc(), ApiKeyModel.id.desc())

        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars().all()]

    async def list_services(self) -> list[GroupCount]:
        """Group keys by service, count descending.

        Returns:
            Services with their key count.
        """
        count = func.count(ApiKeyModel.id).label("count")
        stmt = (
            select(ApiKeyModel.service, count)
            .group_by(ApiKeyModel.service)
            .order_by(count.desc(), ApiKeyModel.service)
        )
        result = await self._session.execute(stmt)
        return [GroupCount(name=name, count=total) for name, total in result.all()]

    async def save(self, api_key: ApiKey) -> None:
        """Create or update a key.

        Args:
            api_key: Key to persist.
        """
        existing = await self._session.get(ApiKeyModel, api_key.id)

        if existing is None:
            self._session.add(self._to_model(api_key))
        else:
            existing.name = api_key.name
            existing.service = api_key.service
            existing.encrypted_key = api_key.encrypted_key
            existing.environment = api_key.environment
            existing.expires_at = api_key.expires_at
            existing.last_used_at = api_key.last_used_at
            existing.updated_at = api_key.updated_at

        await self._session.flush()

    async def delete(self, api_key_id: UUID) -> bool:
        """Delete a key.

        Args:
            api_key_id: Key identifier.

        Returns:
            True if a row was deleted.
        """
        result = await self._session.execute(
            delete(ApiKeyModel).where(ApiKeyModel.id == api_key_id)
        )
        return bool(result.rowcount)  # type: ignore[attr-defined]

    def _to_entity(self, model: ApiKeyModel) -> ApiKey:
        """Map database model to domain entity."""
        return ApiKey(
            id=model.id,
            name=model.name,
            service=model.service,
            encrypted_key=model.encrypted_key,
            environment=model.environment,
            expires_at=model.expires_at,
            last_used_at=model.last_used_at,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: ApiKey) -> ApiKeyModel:
        """Map domain entity to database model."""
        return ApiKeyModel(
            id=entity.id,
            name=entity.name,
            service=entity.service,
            encrypted_key=entity.encrypted_key,
            environment=entity.environment,
            expires_at=entity.expires_at,
            last_used_at=entity.last_used_at,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
