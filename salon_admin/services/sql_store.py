"""SQL-backed entity store (async SQLAlchemy)."""

import logging
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from salon_admin.models.appointment import Appointment
from salon_admin.models.client import Client
from salon_admin.models.product import Product
from salon_admin.models.service import Service
from salon_admin.services.store import (
    APPOINTMENTS,
    CLIENTS,
    PRODUCTS,
    SERVICES,
    Collection,
    CollectionSpec,
    EntityNotFoundError,
    EntityStore,
    StoreTransportError,
)

logger = logging.getLogger(__name__)


class SqlCollection(Collection):
    def __init__(self, spec: CollectionSpec, model, session_factory):
        super().__init__(spec)
        self.model = model
        self._session_factory = session_factory

    def _out(self, row):
        return self.spec.out_schema.model_validate(row)

    async def list(self) -> list:
        try:
            async with self._session_factory() as db:
                result = await db.execute(select(self.model).order_by(self.model.id))
                return [self._out(row) for row in result.scalars().all()]
        except SQLAlchemyError as e:
            raise StoreTransportError(f"Could not list {self.spec.name}: {e}") from e

    async def get(self, entity_id: int):
        try:
            async with self._session_factory() as db:
                row = await db.get(self.model, entity_id)
                return self._out(row) if row else None
        except SQLAlchemyError as e:
            raise StoreTransportError(f"Could not read {self.spec.label} {entity_id}: {e}") from e

    async def create(self, data):
        try:
            async with self._session_factory() as db:
                row = self.model(**data.model_dump())
                db.add(row)
                await db.commit()
                await db.refresh(row)
                logger.info("%s %s created", self.spec.label, row.id)
                return self._out(row)
        except SQLAlchemyError as e:
            raise StoreTransportError(f"Could not create {self.spec.label}: {e}") from e

    async def update(self, entity_id: int, data):
        try:
            async with self._session_factory() as db:
                row = await db.get(self.model, entity_id)
                if not row:
                    raise EntityNotFoundError(self.spec.label, entity_id)

                for key, value in data.model_dump(exclude_unset=True).items():
                    setattr(row, key, value)

                await db.commit()
                await db.refresh(row)
                logger.info("%s %s updated", self.spec.label, entity_id)
                return self._out(row)
        except SQLAlchemyError as e:
            raise StoreTransportError(f"Could not update {self.spec.label} {entity_id}: {e}") from e

    async def delete(self, entity_id: int) -> bool:
        try:
            async with self._session_factory() as db:
                row = await db.get(self.model, entity_id)
                if not row:
                    return False
                await db.delete(row)
                await db.commit()
                logger.info("%s %s deleted", self.spec.label, entity_id)
                return True
        except SQLAlchemyError as e:
            raise StoreTransportError(f"Could not delete {self.spec.label} {entity_id}: {e}") from e


class SqlEntityStore(EntityStore):
    def __init__(self, session_factory, engine=None):
        super().__init__(
            clients=SqlCollection(CLIENTS, Client, session_factory),
            services=SqlCollection(SERVICES, Service, session_factory),
            products=SqlCollection(PRODUCTS, Product, session_factory),
            appointments=SqlCollection(APPOINTMENTS, Appointment, session_factory),
            backend="sql",
        )
        self.engine = engine

    async def close(self) -> None:
        """Dispose the engine this store was built with, if any."""
        if self.engine is not None:
            await self.engine.dispose()
            logger.info("SQL engine disposed")


def build_sql_store(session_factory, engine=None) -> SqlEntityStore:
    return SqlEntityStore(session_factory, engine=engine)
