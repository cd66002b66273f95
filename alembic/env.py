"""Alembic environment for the seller dashboard schema.

Migrations are raw SQL (op.execute), so there is no target metadata and
autogenerate is not used. The database URL defaults to settings.DATABASE_URL
and can be overridden per run: ``alembic -x db_url=postgresql+asyncpg://... upgrade head``.
"""

import asyncio
import logging
from logging.config import fileConfig

from alembic import context
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import create_async_engine

from config.settings import settings

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

logger = logging.getLogger("alembic.env")

target_metadata = None


def _database_url() -> str:
    return context.get_x_argument(as_dictionary=True).get("db_url") or settings.DATABASE_URL


def run_migrations_offline() -> None:
    """Emit the SQL script without connecting (``alembic upgrade head --sql``)."""
    context.configure(
        url=_database_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection: Connection) -> None:
    context.configure(connection=connection, target_metadata=target_metadata)
    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations() -> None:
    connectable = create_async_engine(_database_url())
    logger.info("Migrating %s", connectable.url.render_as_string(hide_password=True))
    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)
    await connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_async_migrations())
