"""FastAPI dependencies."""

from fastapi import Request

from salon_admin.services.store import EntityStore


async def get_store(request: Request) -> EntityStore:
    """Entity store built once in the app lifespan."""
    return request.app.state.store
