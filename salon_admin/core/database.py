"""Async SQLAlchemy engine, session factory and declarative base."""

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from salon_admin.core.config import settings

Base = declarative_base()

engine = create_async_engine(settings.DATABASE_URL, echo=False)
async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


def load_models():
    """Import every model module so its table is registered on Base.metadata."""
    from salon_admin.models import appointment, client, product, service  # noqa: F401
    return Base.metadata


async def create_tables(bind=engine):
    """Create all tables that do not exist yet (local SQLite setups).

    Production databases are migrated with Alembic instead.
    """
    metadata = load_models()
    async with bind.begin() as conn:
        await conn.run_sync(metadata.create_all)
