"""Client CRUD endpoints."""

from fastapi import APIRouter, Depends

from salon_admin.api.v1.endpoints._crud import delete_or_404, get_or_404
from salon_admin.core.deps import get_store
from salon_admin.schemas.client import ClientCreate, ClientOut, ClientUpdate
from salon_admin.schemas.common import DataResponse, MessageResponse
from salon_admin.services.store import EntityStore

router = APIRouter()


@router.get("", response_model=DataResponse[list[ClientOut]])
async def list_clients(store: EntityStore = Depends(get_store)):
    return DataResponse(data=await store.clients.list())


@router.post("", response_model=DataResponse[ClientOut], status_code=201)
async def create_client(client: ClientCreate, store: EntityStore = Depends(get_store)):
    return DataResponse(data=await store.clients.create(client))


@router.get("/{client_id}", response_model=DataResponse[ClientOut])
async def get_client(client_id: int, store: EntityStore = Depends(get_store)):
    return DataResponse(data=await get_or_404(store.clients, client_id))


@router.put("/{client_id}", response_model=DataResponse[ClientOut])
async def update_client(client_id: int, changes: ClientUpdate, store: EntityStore = Depends(get_store)):
    """Partial update: only the fields sent are changed."""
    return DataResponse(data=await store.clients.update(client_id, changes))


@router.delete("/{client_id}", response_model=MessageResponse)
async def delete_client(client_id: int, store: EntityStore = Depends(get_store)):
    """Delete a client. Their appointments are kept and show "Client not found"."""
    await delete_or_404(store.clients, client_id)
    return MessageResponse(message="Client deleted")
