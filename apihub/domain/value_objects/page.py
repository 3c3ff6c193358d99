"""Cursor-paginated page of results."""

from dataclasses import dataclass, field
from typing import Generic, TypeVar
from uuid import UUID

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class CursorPage(Generic[T]):
    """One page of a cursor-paginated listing.

    Attributes:
        items: Rows in listing order.
        next_cursor: Id of the first row of the next page, or None when
            this is the last page. Passing it back as ``cursor`` resumes
            the listing at (and including) that row.
    """

    items: list[T] = field(default_factory=list)
    next_cursor: UUID | None = None
