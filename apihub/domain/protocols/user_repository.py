"""User repository protocol."""

from typing import Protocol
from uuid import UUID

from apihub.domain.entities.user import User


class UserRepository(Protocol):
    """Protocol for user persistence operations."""

    async def find_by_id(self, user_id: UUID) -> User | None:
        """Find user by ID."""
        ...

    async def find_by_ids(self, user_ids: list[UUID]) -> dict[UUID, User]:
        """Load several users at once; unknown ids are absent."""
        ...

    async def find_by_email(self, email: str) -> User | None:
        """Find user by email address."""
        ...

    async def save(self, user: User) -> None:
        """Create or update a user."""
        ...
