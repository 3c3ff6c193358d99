"""User domain entity.

Users own reviews and history entries. There is no authentication
model; a user is identified only by id and email.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID


@dataclass
class User:
    """Owner of reviews and saved history.

    Attributes:
        id: Unique user identifier.
        email: Unique email address.
        name: Optional display name.
        avatar_url: Optional avatar image URL.
        created_at: When the user was created.
        updated_at: When the user was last modified.
    """

    id: UUID
    email: str
    name: str | None = None
    avatar_url: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        """Validate email.

        Raises:
            ValueError: If email is empty or malformed.
        """
        if not self.email or "@" not in self.email:
            raise ValueError("User email must be a valid address")
