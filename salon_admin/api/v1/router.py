from fastapi import APIRouter
from salon_admin.api.v1.endpoints import appointments, calendar, clients, dashboard, products, reports, seed, services

api_router = APIRouter()
api_router.include_router(clients.router, prefix="/clients", tags=["clients"])
api_router.include_router(services.router, prefix="/services", tags=["services"])
api_router.include_router(products.router, prefix="/products", tags=["products"])
api_router.include_router(appointments.router, prefix="/appointments", tags=["appointments"])
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
api_router.include_router(calendar.router, prefix="/calendar", tags=["calendar"])
api_router.include_router(reports.router, prefix="/reports", tags=["reports"])
api_router.include_router(seed.router, prefix="/seed", tags=["seed"])
