"""Key-value entity store.

Each collection is a JSON array kept under a fixed namespace key, the same
layout the admin panel used in browser storage. The keys live together in a
single JSON file on disk. A sequence key per collection makes sure ids are
never reused after a delete.
"""

import asyncio
import json
import logging
from datetime import datetime
from pathlib import Path

from salon_admin.services.store import (
    COLLECTIONS,
    Collection,
    CollectionSpec,
    EntityNotFoundError,
    EntityStore,
    StoreTransportError,
)

logger = logging.getLogger(__name__)

NAMESPACE = "salon"


def collection_key(name: str) -> str:
    return f"{NAMESPACE}_{name}"


def sequence_key(name: str) -> str:
    return f"{NAMESPACE}_{name}_seq"


class KeyValueFile:
    """Minimal get/set storage persisted as one JSON document."""

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self.lock = asyncio.Lock()

    def _read_all(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            return json.loads(self.path.read_text(encoding="utf-8") or "{}")
        except (OSError, json.JSONDecodeError) as e:
            raise StoreTransportError(f"Could not read key-value store {self.path}: {e}") from e

    def _write_all(self, values: dict) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self.path.with_suffix(self.path.suffix + ".tmp")
            tmp.write_text(json.dumps(values, ensure_ascii=False, indent=2), encoding="utf-8")
            tmp.replace(self.path)
        except OSError as e:
            raise StoreTransportError(f"Could not write key-value store {self.path}: {e}") from e

    def get(self, key: str, default=None):
        return self._read_all().get(key, default)

    def set_many(self, items: dict) -> None:
        values = self._read_all()
        values.update(items)
        self._write_all(values)


class KvCollection(Collection):
    def __init__(self, spec: CollectionSpec, storage: KeyValueFile):
        super().__init__(spec)
        self.storage = storage
        self.key = collection_key(spec.name)
        self.seq_key = sequence_key(spec.name)

    def _records(self) -> list[dict]:
        return self.storage.get(self.key, []) or []

    def _dump(self, record) -> dict:
        # Derived fields such as stock_status are recomputed on read
        return record.model_dump(mode="json", exclude=set(type(record).model_computed_fields))

    async def list(self) -> list:
        async with self.storage.lock:
            records = self._records()
        return [self.spec.out_schema.model_validate(r) for r in records]

    async def get(self, entity_id: int):
        async with self.storage.lock:
            for record in self._records():
                if record.get("id") == entity_id:
                    return self.spec.out_schema.model_validate(record)
        return None

    async def create(self, data):
        async with self.storage.lock:
            records = self._records()
            last_used = max([r.get("id", 0) for r in records], default=0)
            next_id = max(self.storage.get(self.seq_key, 0) or 0, last_used) + 1

            stored = self.spec.out_schema(
                id=next_id,
                created_at=datetime.utcnow(),
                **data.model_dump(),
            )
            records.append(self._dump(stored))
            self.storage.set_many({self.key: records, self.seq_key: next_id})

        logger.info("%s %s created", self.spec.label, next_id)
        return stored

    async def update(self, entity_id: int, data):
        async with self.storage.lock:
            records = self._records()
            for index, record in enumerate(records):
                if record.get("id") == entity_id:
                    merged = {**record, **data.model_dump(mode="json", exclude_unset=True)}
                    updated = self.spec.out_schema.model_validate(merged)
                    records[index] = self._dump(updated)
                    self.storage.set_many({self.key: records})
                    break
            else:
                raise EntityNotFoundError(self.spec.label, entity_id)

        logger.info("%s %s updated", self.spec.label, entity_id)
        return updated

    async def delete(self, entity_id: int) -> bool:
        async with self.storage.lock:
            records = self._records()
            remaining = [r for r in records if r.get("id") != entity_id]
            if len(remaining) == len(records):
                return False
            self.storage.set_many({self.key: remaining})

        logger.info("%s %s deleted", self.spec.label, entity_id)
        return True


def build_kv_store(path: str | Path) -> EntityStore:
    storage = KeyValueFile(path)
    clients, services, products, appointments = (KvCollection(spec, storage) for spec in COLLECTIONS)
    return EntityStore(
        clients=clients,
        services=services,
        products=products,
        appointments=appointments,
        backend="kv",
    )
