"""Example data endpoint."""

from fastapi import APIRouter, Depends

from salon_admin.core.deps import get_store
from salon_admin.core.seed import seed_example_data
from salon_admin.schemas.common import DataResponse
from salon_admin.services.store import EntityStore

router = APIRouter()


@router.post("/example", response_model=DataResponse[dict[str, int]], status_code=201)
async def seed_example(store: EntityStore = Depends(get_store)):
    """Fill an empty store with example records. Returns how many were created."""
    return DataResponse(data=await seed_example_data(store))
