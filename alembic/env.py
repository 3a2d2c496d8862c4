"""Alembic migrations for the salon admin database (async engines).

The target URL is `-x url=...` when given, else `sqlalchemy.url` from
alembic.ini, else `DATABASE_URL` from the app settings.
"""

import asyncio
import sys
from logging.config import fileConfig
from pathlib import Path

from sqlalchemy import pool
from sqlalchemy.ext.asyncio import create_async_engine

from alembic import context

# alembic may be run from outside the project root
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from salon_admin.core.config import settings  # noqa: E402
from salon_admin.core.database import load_models  # noqa: E402

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = load_models()


def database_url() -> str:
    return (
        context.get_x_argument(as_dictionary=True).get("url")
        or config.get_main_option("sqlalchemy.url")
        or settings.DATABASE_URL
    )


def configure(**kwargs) -> None:
    url = kwargs.pop("url", None)
    batch = (url or str(kwargs["connection"].engine.url)).startswith("sqlite")
    context.configure(
        url=url,
        target_metadata=target_metadata,
        render_as_batch=batch,
        compare_type=True,
        **kwargs,
    )


def run_offline(url: str) -> None:
    configure(url=url, literal_binds=True, dialect_opts={"paramstyle": "named"})
    with context.begin_transaction():
        context.run_migrations()


def _migrate(connection) -> None:
    configure(connection=connection)
    with context.begin_transaction():
        context.run_migrations()


async def run_online(url: str) -> None:
    engine = create_async_engine(url, poolclass=pool.NullPool)
    try:
        async with engine.connect() as connection:
            await connection.run_sync(_migrate)
    finally:
        await engine.dispose()


if context.is_offline_mode():
    run_offline(database_url())
else:
    asyncio.run(run_online(database_url()))
