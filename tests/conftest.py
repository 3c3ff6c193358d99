"""Pytest configuration for APIHub tests.

This configuration ensures:
1. Required settings exist before apihub.core.config is imported
2. Each database test gets a fresh SQLite file (no shared state)
3. Domain entity helpers are available to every test module
"""

import os

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("ENCRYPTION_KEY", "0123456789abcdef0123456789abcdef")
os.environ.setdefault("API_BASE_URL", "https://apihub.test")
os.environ.setdefault("CORS_ORIGINS", "http://localhost:3000")

from datetime import UTC, datetime  # noqa: E402
from uuid import UUID  # noqa: E402

import pytest_asyncio  # noqa: E402
from uuid_extensions import uuid7  # noqa: E402

from apihub.domain.entities import ApiListing, Review, User  # noqa: E402
from apihub.infrastructure.persistence.database import Database  # noqa: E402


# =============================================================================
# Database fixtures
# =============================================================================


@pytest_asyncio.fixture
async def test_database(tmp_path):
    """Fresh SQLite database with all tables created.

    A file (not :memory:) is used so every connection of the pool sees the
    same schema.
    """
    database = Database(f"sqlite+aiosqlite:///{tmp_path / 'apihub.db'}")
    await database.create_all()
    yield database
    await database.close()


@pytest_asyncio.fixture
async def db_session(test_database):
    """Transactional session on the fresh database."""
    async with test_database.get_session() as session:
        yield session


# =============================================================================
# Entity helpers
# =============================================================================


def create_listing(
    name: str = "PokeAPI",
    *,
    category: str = "Gaming",
    description: str = "RESTful Pokemon API",
    auth_type: str | None = "None",
    featured: bool = False,
    created_at: datetime | None = None,
) -> ApiListing:
    """Helper to create an ApiListing for testing."""
    now = created_at or datetime.now(UTC)
    return ApiListing(
        id=uuid7(),
        name=name,
        description=description,
        base_url=f"https://{name.lower().replace(' ', '')}.example.com",
        category=category,
        auth_type=auth_type,
        featured=featured,
        created_at=now,
        updated_at=now,
    )


def create_user(email: str | None = None, name: str | None = "Demo User") -> User:
    """Helper to create a User for testing."""
    user_id = uuid7()
    return User(id=user_id, email=email or f"user_{user_id.hex[:8]}@example.com", name=name)


def create_review(
    api_id: UUID,
    user_id: UUID,
    *,
    rating: int = 5,
    content: str | None = "Works great",
    helpful_count: int = 0,
    created_at: datetime | None = None,
) -> Review:
    """Helper to create a Review for testing."""
    now = created_at or datetime.now(UTC)
    return Review(
        id=uuid7(),
        api_id=api_id,
        user_id=user_id,
        rating=rating,
        content=content,
        helpful_count=helpful_count,
        created_at=now,
        updated_at=now,
    )
