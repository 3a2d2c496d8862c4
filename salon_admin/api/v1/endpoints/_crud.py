"""Shared helpers for collection endpoints."""

from fastapi import HTTPException

from salon_admin.services.store import Collection


async def get_or_404(collection: Collection, entity_id: int):
    entity = await collection.get(entity_id)
    if entity is None:
        raise HTTPException(status_code=404, detail=f"{collection.spec.label} not found")
    return entity


async def delete_or_404(collection: Collection, entity_id: int) -> None:
    if not await collection.delete(entity_id):
        raise HTTPException(status_code=404, detail=f"{collection.spec.label} not found")
