"""Dashboard stats endpoint.

- GET /api/v1/dashboard/stats → headline numbers for the dashboard cards
"""

import logging
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query

from salon_admin.core.deps import get_store
from salon_admin.schemas.stats import DashboardStats
from salon_admin.services.snapshot import load_snapshot
from salon_admin.services.stats import dashboard_stats
from salon_admin.services.store import EntityStore

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/stats", response_model=DashboardStats)
async def get_dashboard_stats(
    today: Optional[date] = Query(None, description="Reference date, defaults to the server's local date"),
    store: EntityStore = Depends(get_store),
):
    """Client count, today's appointments, this month's revenue and completed services."""
    snap = await load_snapshot(store, "clients", "services", "appointments")
    if snap.failed:
        logger.warning("Dashboard stats computed without: %s", ", ".join(snap.failed))
    return dashboard_stats(snap.clients, snap.services, snap.appointments, today or date.today())
