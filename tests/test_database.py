"""Tests for model registration and SQL store lifecycle."""

import pytest

from salon_admin.core.database import load_models
from salon_admin.services.sql_store import build_sql_store


class RecordingEngine:
    def __init__(self):
        self.disposed = 0

    async def dispose(self):
        self.disposed += 1


def test_load_models_registers_every_table():
    metadata = load_models()
    assert set(metadata.tables) >= {"clients", "services", "products", "appointments"}


@pytest.mark.asyncio
async def test_close_disposes_engine():
    engine = RecordingEngine()
    store = build_sql_store(session_factory=None, engine=engine)

    await store.close()

    assert engine.disposed == 1


@pytest.mark.asyncio
async def test_close_without_engine_is_a_noop(store):
    await store.close()
    assert store.engine is None
