"""Entity store: per-collection CRUD behind a swappable backend.

The core never knows whether records live in a SQL database, a key-value
JSON file or another instance of the API. Handlers receive an `EntityStore`
and call `store.clients.list()`, `store.appointments.update(...)` and so on.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

from pydantic import BaseModel

from salon_admin.schemas.appointment import AppointmentCreate, AppointmentOut, AppointmentUpdate
from salon_admin.schemas.client import ClientCreate, ClientOut, ClientUpdate
from salon_admin.schemas.product import ProductCreate, ProductOut, ProductUpdate
from salon_admin.schemas.service import ServiceCreate, ServiceOut, ServiceUpdate

logger = logging.getLogger(__name__)


class EntityNotFoundError(Exception):
    """Raised when an operation references an id that does not exist."""

    def __init__(self, label: str, entity_id):
        self.label = label
        self.entity_id = entity_id
        super().__init__(f"{label} {entity_id} not found")


class StoreTransportError(Exception):
    """The backing store could not be read or written."""


@dataclass(frozen=True)
class CollectionSpec:
    name: str
    label: str
    out_schema: type[BaseModel]
    create_schema: type[BaseModel]
    update_schema: type[BaseModel]


CLIENTS = CollectionSpec("clients", "Client", ClientOut, ClientCreate, ClientUpdate)
SERVICES = CollectionSpec("services", "Service", ServiceOut, ServiceCreate, ServiceUpdate)
PRODUCTS = CollectionSpec("products", "Product", ProductOut, ProductCreate, ProductUpdate)
APPOINTMENTS = CollectionSpec(
    "appointments", "Appointment", AppointmentOut, AppointmentCreate, AppointmentUpdate
)

COLLECTIONS = (CLIENTS, SERVICES, PRODUCTS, APPOINTMENTS)


class Collection(ABC):
    """CRUD over one entity collection."""

    def __init__(self, spec: CollectionSpec):
        self.spec = spec

    @abstractmethod
    async def list(self) -> list:
        ...

    @abstractmethod
    async def get(self, entity_id: int):
        """Return the record or None."""

    @abstractmethod
    async def create(self, data: BaseModel):
        """Assign id and creation timestamp, persist, return the stored record."""

    @abstractmethod
    async def update(self, entity_id: int, data: BaseModel):
        """Merge the fields set on `data`. Raises EntityNotFoundError."""

    @abstractmethod
    async def delete(self, entity_id: int) -> bool:
        """Hard delete. Returns False when the id does not exist."""


class EntityStore:
    def __init__(
        self,
        clients: Collection,
        services: Collection,
        products: Collection,
        appointments: Collection,
        backend: str,
    ):
        self.clients = clients
        self.services = services
        self.products = products
        self.appointments = appointments
        self.backend = backend

    async def close(self) -> None:
        """Release backend resources (HTTP clients, engines)."""


def build_store(settings, session_factory=None, http_client=None) -> EntityStore:
    """Build the store selected by `settings.STORE_BACKEND`."""
    backend = settings.STORE_BACKEND
    logger.info("Using '%s' entity store backend", backend)

    if backend == "sql":
        from salon_admin.services.sql_store import build_sql_store
        if session_factory is None:
            from salon_admin.core.database import async_session, engine
            return build_sql_store(async_session, engine=engine)
        return build_sql_store(session_factory)

    if backend == "kv":
        from salon_admin.services.kv_store import build_kv_store
        return build_kv_store(settings.KV_STORE_PATH)

    if backend == "remote":
        from salon_admin.services.remote_store import build_remote_store
        return build_remote_store(
            settings.REMOTE_API_URL,
            timeout=settings.REMOTE_TIMEOUT_SECONDS,
            client=http_client,
        )

    raise ValueError(f"Unknown store backend: {backend}")
