"""Tests for the HTTP-backed entity store."""

import json
from datetime import date, time

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from salon_admin.main import app
from salon_admin.schemas.appointment import AppointmentCreate, AppointmentUpdate
from salon_admin.schemas.client import ClientCreate, ClientUpdate
from salon_admin.services.remote_store import build_remote_store
from salon_admin.services.store import EntityNotFoundError, StoreTransportError

JANE = {"id": 1, "full_name": "Jane Doe", "phone": "11999990000"}


def mock_store(handler):
    client = AsyncClient(transport=httpx.MockTransport(handler), base_url="http://salon.test/api/v1")
    return build_remote_store("http://salon.test/api/v1", client=client)


@pytest.mark.asyncio
async def test_unwraps_data_envelope_and_bare_payloads():
    def handler(request):
        if request.url.path == "/api/v1/clients":
            return httpx.Response(200, json={"data": [JANE]})
        return httpx.Response(200, json=JANE)

    store = mock_store(handler)

    [listed] = await store.clients.list()
    assert listed.full_name == "Jane Doe"
    assert (await store.clients.get(1)).id == 1


@pytest.mark.asyncio
async def test_not_found_responses():
    store = mock_store(lambda request: httpx.Response(404, json={"detail": "Client not found"}))

    assert await store.clients.get(9) is None
    assert await store.clients.delete(9) is False
    with pytest.raises(EntityNotFoundError):
        await store.clients.update(9, ClientUpdate(full_name="Ghost"))


@pytest.mark.asyncio
async def test_server_error_is_transport_error():
    store = mock_store(lambda request: httpx.Response(500, json={"detail": "boom"}))

    with pytest.raises(StoreTransportError):
        await store.clients.list()
    with pytest.raises(StoreTransportError):
        await store.clients.create(ClientCreate(full_name="Jane Doe", phone="1"))


@pytest.mark.asyncio
async def test_connection_failure_is_transport_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    store = mock_store(handler)

    with pytest.raises(StoreTransportError):
        await store.services.list()


@pytest.mark.asyncio
async def test_update_sends_only_changed_fields():
    seen = {}

    def handler(request):
        seen["method"] = request.method
        seen["path"] = request.url.path
        seen["body"] = request.read()
        return httpx.Response(200, json={"data": {**JANE, "notes": "VIP"}})

    store = mock_store(handler)
    updated = await store.clients.update(1, ClientUpdate(notes="VIP"))

    assert updated.notes == "VIP"
    assert seen["method"] == "PUT"
    assert seen["path"] == "/api/v1/clients/1"
    assert json.loads(seen["body"]) == {"notes": "VIP"}


@pytest.mark.asyncio
async def test_round_trip_against_the_api(salon):
    """A remote store pointed at this app behaves like the local store."""
    http = AsyncClient(transport=ASGITransport(app=app), base_url="http://test/api/v1")
    store = build_remote_store("http://test/api/v1", client=http)
    try:
        clients = await store.clients.list()
        assert [c.full_name for c in clients] == ["Jane Doe"]

        product = await store.products.get(salon["shampoo"]["id"])
        assert product.stock_status == "low stock"

        booked = await store.appointments.create(AppointmentCreate(
            client_id=salon["client"]["id"],
            service_id=salon["cut"]["id"],
            appointment_date=date(2026, 10, 19),
            appointment_time=time(10, 0),
        ))
        assert booked.status.value == "scheduled"

        done = await store.appointments.update(booked.id, AppointmentUpdate(status="completed"))
        assert done.status.value == "completed"

        assert await store.appointments.delete(booked.id) is True
        assert await store.appointments.get(booked.id) is None
    finally:
        await http.aclose()
