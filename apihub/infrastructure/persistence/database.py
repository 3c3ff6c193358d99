"""Async engine and transactional sessions.

PostgreSQL (asyncpg) in deployments, SQLite (aiosqlite) in tests and
local runs. Only the pool options differ between the two.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)


def _engine_options(database_url: str, pool_size: int) -> dict[str, Any]:
    if database_url.startswith("sqlite"):
        return {}

    options: dict[str, Any] = {
        "pool_pre_ping": True,
        "pool_size": pool_size,
        "max_overflow": 0,
    }
    if database_url.startswith("postgresql+asyncpg"):
        options["connect_args"] = {"server_settings": {"jit": "off"}, "timeout": 30}
    return options


class Database:
    """Owns the engine and hands out sessions.

    Usage:
        db = Database("postgresql+asyncpg://apihub:apihub@db/apihub")
        async with db.get_session() as session:
            await ApiRepository(session=session).list_page(limit=20)
    """

    def __init__(self, database_url: str, echo: bool = False, pool_size: int = 10) -> None:
        """Create the engine.

        Args:
            database_url: postgresql+asyncpg://... or sqlite+aiosqlite://...
            echo: Log every SQL statement.
            pool_size: Pooled connections (ignored for SQLite).
        """
        self.engine: AsyncEngine = create_async_engine(
            database_url, echo=echo, **_engine_options(database_url, pool_size)
        )
        self._sessions = async_sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False
        )

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """Session committed on clean exit and rolled back on error.

        Yields:
            AsyncSession: Session bound to this engine.
        """
        async with self._sessions() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def create_all(self) -> None:
        """Create every table from the ORM models (tests and local runs).

        Deployments use Alembic migrations instead.
        """
        from apihub.infrastructure.persistence import models  # noqa: F401
        from apihub.infrastructure.persistence.base import BaseModel

        async with self.engine.begin() as conn:
            await conn.run_sync(BaseModel.metadata.create_all)

    async def close(self) -> None:
        """Dispose the engine and its pooled connections."""
        await self.engine.dispose()
