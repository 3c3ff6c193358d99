"""Keyset (cursor) pagination for SQLAlchemy select statements.

Every paginated listing shares one contract:

1. Rows are ordered by one or more sort keys, always ending with
   created_at DESC, id DESC so the order is total.
2. The page starts AT the cursor row (inclusive).
3. limit + 1 rows are fetched. If the extra row exists it is removed and
   its id becomes next_cursor; otherwise next_cursor is None.

The cursor row's sort values are read with scalar subqueries inside the
same statement, so a cursor that does not exist simply yields an empty
page.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, TypeVar
from uuid import UUID

from sqlalchemy import ColumnElement, Select, and_, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import InstrumentedAttribute, aliased

M = TypeVar("M")


@dataclass(frozen=True, slots=True)
class SortKey:
    """One ordering column and its direction."""

    column: InstrumentedAttribute[Any]
    descending: bool = True

    def order_clause(self) -> ColumnElement[Any]:
        """ORDER BY expression for this key."""
        return self.column.desc() if self.descending else self.column.asc()


def _after(key: SortKey, value: Any, *, inclusive: bool) -> ColumnElement[bool]:
    if key.descending:
        return key.column <= value if inclusive else key.column < value
    return key.column >= value if inclusive else key.column > value


def keyset_condition(
    keys: Sequence[SortKey],
    id_column: InstrumentedAttribute[Any],
    cursor: UUID,
) -> ColumnElement[bool]:
    """Build the WHERE clause selecting rows at or after the cursor row.

    For keys (k1, ..., kn) the clause is the expanded lexicographic
    comparison:

        k1 > v1
        OR (k1 = v1 AND k2 > v2)
        OR ...
        OR (k1 = v1 AND ... AND kn >= vn)

    where ">" means "after in listing order" and vi is read from the
    cursor row. The last key must be unique (the id column).

    Args:
        keys: Sort keys, last one the id column.
        id_column: Primary key column used to locate the cursor row.
        cursor: Id of the cursor row.

    Returns:
        Boolean SQL expression.
    """
    cursor_row = aliased(id_column.class_)
    cursor_id = getattr(cursor_row, id_column.key)
    values = [
        select(getattr(cursor_row, key.column.key))
        .where(cursor_id == cursor)
        .scalar_subquery()
        for key in keys
    ]

    clauses: list[ColumnElement[bool]] = []
    for index, key in enumerate(keys):
        is_last = index == len(keys) - 1
        equal_prefix = [keys[i].column == values[i] for i in range(index)]
        clauses.append(and_(*equal_prefix, _after(key, values[index], inclusive=is_last)))

    return or_(*clauses)


async def fetch_page(
    session: AsyncSession,
    stmt: Select[tuple[M]],
    *,
    keys: Sequence[SortKey],
    id_column: InstrumentedAttribute[Any],
    limit: int,
    cursor: UUID | None = None,
) -> tuple[list[M], UUID | None]:
    """Execute a select as one cursor page.

    Args:
        session: Database session.
        stmt: Filtered select of a single ORM entity.
        keys: Sort keys, last one the id column.
        id_column: Primary key column.
        limit: Page size.
        cursor: Id of the first row of the page, or None for the first page.

    Returns:
        (rows, next_cursor).

    Example:
        >>> rows, next_cursor = await fetch_page(
        ...     session,
        ...     select(ApiModel),
        ...     keys=[SortKey(ApiModel.created_at), SortKey(ApiModel.id)],
        ...     id_column=ApiModel.id,
        ...     limit=20,
        ... )
    """
    if cursor is not None:
        stmt = stmt.where(keyset_condition(keys, id_column, cursor))

    stmt = stmt.order_by(*(key.order_clause() for key in keys)).limit(limit + 1)
    result = await session.execute(stmt)
    rows = list(result.scalars().all())

    next_cursor: UUID | None = None
    if len(rows) > limit:
        next_cursor = rows.pop().id  # type: ignore[attr-defined]

    return rows, next_cursor
