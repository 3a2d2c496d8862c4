"""Load every collection for aggregation, tolerating a failing backend."""

import logging
from dataclasses import dataclass, field

from salon_admin.services.store import EntityStore, StoreTransportError

logger = logging.getLogger(__name__)


@dataclass
class Snapshot:
    clients: list = field(default_factory=list)
    services: list = field(default_factory=list)
    products: list = field(default_factory=list)
    appointments: list = field(default_factory=list)
    failed: list[str] = field(default_factory=list)


async def load_snapshot(store: EntityStore, *names: str) -> Snapshot:
    """Fetch the named collections (all four by default).

    A collection that cannot be read is logged and left empty so stats are
    still computed over whatever was fetched.
    """
    snapshot = Snapshot()
    for name in names or ("clients", "services", "products", "appointments"):
        try:
            records = await getattr(store, name).list()
        except StoreTransportError as e:
            logger.warning("Aggregating without %s: %s", name, e)
            snapshot.failed.append(name)
            continue
        setattr(snapshot, name, records)
    return snapshot
