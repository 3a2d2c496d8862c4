"""Salon service (treatment catalogue) CRUD endpoints."""

from fastapi import APIRouter, Depends, Query

from salon_admin.api.v1.endpoints._crud import delete_or_404, get_or_404
from salon_admin.core.deps import get_store
from salon_admin.schemas.common import DataResponse, MessageResponse
from salon_admin.schemas.service import ServiceCreate, ServiceOut, ServiceUpdate
from salon_admin.services.store import EntityStore

router = APIRouter()


@router.get("", response_model=DataResponse[list[ServiceOut]])
async def list_services(
    active: bool | None = Query(None),
    store: EntityStore = Depends(get_store),
):
    """List services, optionally only active or inactive ones."""
    services = await store.services.list()
    if active is not None:
        services = [s for s in services if s.active == active]
    return DataResponse(data=services)


@router.post("", response_model=DataResponse[ServiceOut], status_code=201)
async def create_service(service: ServiceCreate, store: EntityStore = Depends(get_store)):
    return DataResponse(data=await store.services.create(service))


@router.get("/{service_id}", response_model=DataResponse[ServiceOut])
async def get_service(service_id: int, store: EntityStore = Depends(get_store)):
    return DataResponse(data=await get_or_404(store.services, service_id))


@router.put("/{service_id}", response_model=DataResponse[ServiceOut])
async def update_service(service_id: int, changes: ServiceUpdate, store: EntityStore = Depends(get_store)):
    """Partial update. A new price also applies to past appointments in reports."""
    return DataResponse(data=await store.services.update(service_id, changes))


@router.delete("/{service_id}", response_model=MessageResponse)
async def delete_service(service_id: int, store: EntityStore = Depends(get_store)):
    await delete_or_404(store.services, service_id)
    return MessageResponse(message="Service deleted")
