"""Alembic environment (async SQLAlchemy).

DATABASE_URL always comes from apihub Settings; alembic.ini carries no
URL. After ``alembic upgrade`` the idempotent seeders in alembic/seeds
load the sample catalog. Pass ``-x seed=false`` to skip them, or
``-x seed=true`` to run them with any other command.
"""

import asyncio
import sys
from logging.config import fileConfig
from pathlib import Path

from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import AsyncEngine, async_engine_from_config, async_sessionmaker

from alembic import context
from apihub.core.config import settings
from apihub.infrastructure.persistence import models  # noqa: F401
from apihub.infrastructure.persistence.base import BaseModel

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)
config.set_main_option("sqlalchemy.url", settings.database_url)

target_metadata = BaseModel.metadata


def _seed_requested() -> bool:
    flag = context.get_x_argument(as_dictionary=True).get("seed", "").strip().lower()
    if flag:
        return flag in {"1", "true", "yes"}
    return getattr(getattr(config, "cmd_opts", None), "cmd", None) == "upgrade"


def _configure_and_run(connection: Connection) -> None:
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        render_as_batch=connection.dialect.name == "sqlite",
    )
    with context.begin_transaction():
        context.run_migrations()


async def _seed(engine: AsyncEngine) -> None:
    seeds_dir = str(Path(__file__).parent)
    if seeds_dir not in sys.path:
        sys.path.insert(0, seeds_dir)
    from seeds import run_all_seeders

    async with async_sessionmaker(engine, expire_on_commit=False)() as session:
        await run_all_seeders(session)
        await session.commit()


async def _migrate_online() -> None:
    engine = async_engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    try:
        async with engine.connect() as connection:
            await connection.run_sync(_configure_and_run)
        if _seed_requested():
            await _seed(engine)
    finally:
        await engine.dispose()


def _migrate_offline() -> None:
    """Emit SQL to stdout; seeders never run in this mode."""
    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


if context.is_offline_mode():
    _migrate_offline()
else:
    asyncio.run(_migrate_online())
