"""Common schemas used across multiple API endpoints."""

from uuid import UUID

from pydantic import BaseModel, Field

from apihub.application.dtos.catalog_dtos import GroupCountResult


class GroupCountResponse(BaseModel):
    """A category or service name with its item count."""

    name: str = Field(..., description="Group name", examples=["Weather"])
    count: int = Field(..., ge=0, description="Number of items in the group")

    @classmethod
    def from_dto(cls, dto: GroupCountResult) -> "GroupCountResponse":
        """Convert application DTO to response schema."""
        return cls(name=dto.name, count=dto.count)


class CursorPageMeta(BaseModel):
    """Cursor for the next page.

    Pass next_cursor back as the ``cursor`` query parameter to continue;
    null means this is the last page.
    """

    next_cursor: UUID | None = Field(
        None, description="Id of the first row of the next page"
    )


class HealthResponse(BaseModel):
    """Liveness probe response."""

    status: str = Field(..., examples=["healthy"])
    version: str = Field(..., examples=["0.1.0"])
