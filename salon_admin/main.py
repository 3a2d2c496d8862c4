import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from salon_admin.api.v1.router import api_router
from salon_admin.core.config import settings
from salon_admin.core.seed import seed_example_data
from salon_admin.services.scheduler import InvalidStatusTransitionError
from salon_admin.services.store import EntityNotFoundError, StoreTransportError, build_store

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    store = build_store(settings)
    app.state.store = store

    if store.backend == "sql" and settings.DATABASE_URL.startswith("sqlite"):
        from salon_admin.core.database import create_tables
        await create_tables()

    if settings.SEED_ON_STARTUP:
        try:
            await seed_example_data(store)
        except StoreTransportError as e:
            logger.error(f"Failed to seed example data: {e}")

    yield

    await store.close()


app = FastAPI(
    title="Salon Admin API",
    description="Clients, services, inventory and appointment booking for a beauty salon",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api/v1")


@app.exception_handler(EntityNotFoundError)
async def entity_not_found_handler(request: Request, exc: EntityNotFoundError):
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.exception_handler(InvalidStatusTransitionError)
async def invalid_transition_handler(request: Request, exc: InvalidStatusTransitionError):
    return JSONResponse(status_code=409, content={"detail": str(exc)})


@app.exception_handler(StoreTransportError)
async def store_transport_handler(request: Request, exc: StoreTransportError):
    logger.error("Store failure on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=502, content={"detail": "Entity store unavailable"})


@app.get("/health")
async def health():
    return {"status": "ok", "service": "salon-admin-api", "version": "0.1.0", "store": settings.STORE_BACKEND}
