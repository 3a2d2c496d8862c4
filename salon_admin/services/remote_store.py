"""Entity store that talks to another salon-admin API over HTTP.

The remote speaks the same REST surface this app exposes:
`GET/POST /{collection}` and `GET/PUT/DELETE /{collection}/{id}`, with
responses wrapped as `{"data": ...}`. Transport problems and unexpected
status codes surface as StoreTransportError; nothing is retried.
"""

import logging
import httpx

from salon_admin.services.store import (
    COLLECTIONS,
    Collection,
    CollectionSpec,
    EntityNotFoundError,
    EntityStore,
    StoreTransportError,
)

logger = logging.getLogger(__name__)


def _unwrap(payload):
    """Accept both `{"data": ...}` envelopes and bare payloads."""
    if isinstance(payload, dict) and "data" in payload:
        return payload["data"]
    return payload


class RemoteCollection(Collection):
    def __init__(self, spec: CollectionSpec, client: httpx.AsyncClient):
        super().__init__(spec)
        self.client = client

    async def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        try:
            response = await self.client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.error("Remote store %s %s failed: %s", method, path, e)
            raise StoreTransportError(f"{method} {path} failed: {e}") from e
        logger.debug("Remote store %s %s -> %s", method, path, response.status_code)
        return response

    def _check(self, response: httpx.Response) -> None:
        if response.is_success:
            return
        logger.error(
            "Remote store %s %s returned %s",
            response.request.method, response.request.url, response.status_code,
        )
        raise StoreTransportError(
            f"{response.request.method} {response.request.url} returned {response.status_code}"
        )

    def _out(self, response: httpx.Response):
        return self.spec.out_schema.model_validate(_unwrap(response.json()))

    async def list(self) -> list:
        response = await self._request("GET", f"/{self.spec.name}")
        self._check(response)
        return [self.spec.out_schema.model_validate(r) for r in _unwrap(response.json()) or []]

    async def get(self, entity_id: int):
        response = await self._request("GET", f"/{self.spec.name}/{entity_id}")
        if response.status_code == 404:
            return None
        self._check(response)
        return self._out(response)

    async def create(self, data):
        response = await self._request(
            "POST", f"/{self.spec.name}", json=data.model_dump(mode="json")
        )
        self._check(response)
        return self._out(response)

    async def update(self, entity_id: int, data):
        response = await self._request(
            "PUT",
            f"/{self.spec.name}/{entity_id}",
            json=data.model_dump(mode="json", exclude_unset=True),
        )
        if response.status_code == 404:
            raise EntityNotFoundError(self.spec.label, entity_id)
        self._check(response)
        return self._out(response)

    async def delete(self, entity_id: int) -> bool:
        response = await self._request("DELETE", f"/{self.spec.name}/{entity_id}")
        if response.status_code == 404:
            return False
        self._check(response)
        return True


class RemoteEntityStore(EntityStore):
    def __init__(self, client: httpx.AsyncClient, owns_client: bool = True):
        clients, services, products, appointments = (
            RemoteCollection(spec, client) for spec in COLLECTIONS
        )
        super().__init__(clients, services, products, appointments, backend="remote")
        self.client = client
        self._owns_client = owns_client

    async def close(self) -> None:
        if self._owns_client:
            await self.client.aclose()


def build_remote_store(base_url: str, timeout: float = 10.0, client: httpx.AsyncClient | None = None) -> RemoteEntityStore:
    if client is not None:
        return RemoteEntityStore(client, owns_client=False)
    return RemoteEntityStore(
        httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            timeout=timeout,
            headers={"Content-Type": "application/json"},
        )
    )
