"""Tests for the client, service and product endpoints."""

import pytest

from salon_admin.services.store import StoreTransportError


@pytest.mark.asyncio
async def test_health(client):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


@pytest.mark.asyncio
async def test_create_and_list_clients(client):
    response = await client.post("/api/v1/clients", json={
        "full_name": "Jane Doe",
        "phone": "11999990000",
        "email": "jane@example.com",
    })
    assert response.status_code == 201
    created = response.json()["data"]
    assert created["id"] == 1
    assert created["created_at"] is not None

    listed = (await client.get("/api/v1/clients")).json()["data"]
    assert [c["full_name"] for c in listed] == ["Jane Doe"]


@pytest.mark.asyncio
async def test_client_requires_name_and_valid_email(client):
    response = await client.post("/api/v1/clients", json={"phone": "1"})
    assert response.status_code == 422

    response = await client.post("/api/v1/clients", json={
        "full_name": "Jane", "phone": "1", "email": "not-an-email",
    })
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_update_client_partial(client, salon):
    client_id = salon["client"]["id"]

    response = await client.put(f"/api/v1/clients/{client_id}", json={"notes": "Allergic to latex"})
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["notes"] == "Allergic to latex"
    assert data["full_name"] == "Jane Doe"
    assert data["email"] == "jane@example.com"


@pytest.mark.asyncio
async def test_update_rejects_unknown_fields(client, salon):
    response = await client.put(f"/api/v1/clients/{salon['client']['id']}", json={"id": 99})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_missing_client_is_404(client):
    assert (await client.get("/api/v1/clients/99")).status_code == 404
    assert (await client.put("/api/v1/clients/99", json={"notes": "x"})).status_code == 404

    response = await client.delete("/api/v1/clients/99")
    assert response.status_code == 404
    assert response.json()["detail"] == "Client not found"


@pytest.mark.asyncio
async def test_deleted_ids_are_not_reused(client, salon):
    first = salon["client"]["id"]
    assert (await client.delete(f"/api/v1/clients/{first}")).json() == {"message": "Client deleted"}

    response = await client.post("/api/v1/clients", json={"full_name": "Ana", "phone": "2"})
    assert response.json()["data"]["id"] > first


@pytest.mark.asyncio
async def test_services_filter_by_active(client, salon):
    await client.put(f"/api/v1/services/{salon['nails']['id']}", json={"active": False})

    active = (await client.get("/api/v1/services", params={"active": True})).json()["data"]
    assert [s["name"] for s in active] == ["Cut"]

    everything = (await client.get("/api/v1/services")).json()["data"]
    assert len(everything) == 2


@pytest.mark.asyncio
async def test_service_price_cannot_be_negative(client):
    response = await client.post("/api/v1/services", json={
        "name": "Cut", "category": "Hair", "duration_minutes": 30, "price": -1,
    })
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_product_stock_status_is_derived(client, salon):
    product_id = salon["shampoo"]["id"]
    assert salon["shampoo"]["stock_status"] == "low stock"

    data = (await client.put(f"/api/v1/products/{product_id}", json={"quantity": 20})).json()["data"]
    assert data["stock_status"] == "in stock"

    data = (await client.put(f"/api/v1/products/{product_id}", json={"quantity": 0})).json()["data"]
    assert data["stock_status"] == "out of stock"


@pytest.mark.asyncio
async def test_product_rejects_client_supplied_stock_status(client, salon):
    response = await client.put(
        f"/api/v1/products/{salon['shampoo']['id']}", json={"stock_status": "in stock"}
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_low_stock_listing(client, salon):
    await client.post("/api/v1/products", json={
        "name": "Conditioner", "category": "Hair", "quantity": 40, "minimum_stock": 5,
    })

    low = (await client.get("/api/v1/products/low-stock")).json()["data"]
    assert [p["name"] for p in low] == ["Shampoo"]


@pytest.mark.asyncio
async def test_store_failure_is_502(client, store, monkeypatch):
    async def broken():
        raise StoreTransportError("disk on fire")

    monkeypatch.setattr(store.clients, "list", broken)

    response = await client.get("/api/v1/clients")
    assert response.status_code == 502
    assert response.json()["detail"] == "Entity store unavailable"


@pytest.mark.asyncio
async def test_update_rejects_null_for_required_fields(client, salon):
    client_id = salon["client"]["id"]

    for field in ("full_name", "phone"):
        response = await client.put(f"/api/v1/clients/{client_id}", json={field: None})
        assert response.status_code == 422

    response = await client.put(f"/api/v1/services/{salon['cut']['id']}", json={"price": None})
    assert response.status_code == 422

    response = await client.put(f"/api/v1/products/{salon['shampoo']['id']}", json={"quantity": None})
    assert response.status_code == 422

    stored = (await client.get(f"/api/v1/clients/{client_id}")).json()["data"]
    assert stored["full_name"] == "Jane Doe"


@pytest.mark.asyncio
async def test_update_allows_clearing_optional_fields(client, salon):
    client_id = salon["client"]["id"]

    response = await client.put(f"/api/v1/clients/{client_id}", json={"email": None})
    assert response.status_code == 200
    assert response.json()["data"]["email"] is None
