"""ApiListing domain entity.

A public HTTP API in the catalog. Listings are seeded or added by
operators and read far more often than they are written.

The rating pair (avg_rating, review_count) is NOT stored on the entity;
it is derived at query time from the listing's reviews, see
``apihub.domain.value_objects.rating.RatingSummary``.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID


@dataclass
class ApiListing:
    """Catalog entry describing a public HTTP API.

    Attributes:
        id: Unique listing identifier.
        name: Display name (e.g., "PokeAPI").
        description: Free-text description shown in the catalog.
        base_url: Root URL of the API (e.g., "https://pokeapi.co/api/v2").
        category: Catalog category (e.g., "Games & Comics").
        auth_type: Human-readable auth requirement (e.g., "None", "Api Key").
        rate_limit: Human-readable rate limit (e.g., "100/min").
        https: Whether the API is served over HTTPS.
        cors_policy: CORS support ("Yes", "No", "Unknown").
        documentation_url: Link to the API's documentation.
        featured: Whether the listing appears in the featured set.
        created_at: When the listing was added.
        updated_at: When the listing was last modified.

    Example:
        >>> listing = ApiListing(
        ...     id=uuid7(),
        ...     name="PokeAPI",
        ...     description="RESTful Pokemon API",
        ...     base_url="https://pokeapi.co/api/v2",
        ...     category="Games & Comics",
        ... )
    """

    id: UUID
    name: str
    description: str
    base_url: str
    category: str
    auth_type: str | None = None
    rate_limit: str | None = None
    https: bool = True
    cors_policy: str | None = None
    documentation_url: str | None = None
    featured: bool = False
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        """Validate listing after initialization.

        Raises:
            ValueError: If required fields are empty.
        """
        if not self.name:
            raise ValueError("API name cannot be empty")

        if not self.base_url:
            raise ValueError("API base URL cannot be empty")

        if not self.category:
            raise ValueError("API category cannot be empty")

    def __str__(self) -> str:
        """Return string representation.

        Returns:
            str: Human-readable string.
        """
        return f"{self.name} ({self.category})"
