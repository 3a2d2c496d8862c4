"""Report endpoints: summary stats and spreadsheet export.

- GET /api/v1/reports/stats → totals for the reports page
- GET /api/v1/reports/top-services → most performed services
- GET /api/v1/reports/revenue/{year} → completed revenue per month
- GET /api/v1/reports/closing → month-closing summary
- GET /api/v1/reports/general → general report sheets as JSON rows
- GET /api/v1/reports/general.xlsx → general report workbook
- GET /api/v1/reports/detailed.xlsx → detailed report workbook
"""

from dataclasses import asdict
from datetime import date, datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.encoders import jsonable_encoder
from fastapi.responses import Response

from salon_admin.core.config import settings
from salon_admin.core.deps import get_store
from salon_admin.schemas.stats import MonthlyClosing, MonthRevenue, ReportStats, ServiceCount
from salon_admin.services import export, stats
from salon_admin.services.snapshot import load_snapshot
from salon_admin.services.store import EntityStore

router = APIRouter()

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def _xlsx_response(content: bytes, filename: str) -> Response:
    return Response(
        content=content,
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/stats", response_model=ReportStats)
async def get_report_stats(store: EntityStore = Depends(get_store)):
    snap = await load_snapshot(store)
    return stats.report_stats(snap.clients, snap.services, snap.products, snap.appointments)


@router.get("/top-services", response_model=list[ServiceCount])
async def get_top_services(
    n: int = Query(5, ge=1, le=50),
    store: EntityStore = Depends(get_store),
):
    snap = await load_snapshot(store, "services", "appointments")
    return [
        {"service_name": name, "count": count}
        for name, count in stats.top_services(snap.appointments, snap.services, n)
    ]


@router.get("/revenue/{year}", response_model=list[MonthRevenue])
async def get_revenue_by_month(year: int, store: EntityStore = Depends(get_store)):
    snap = await load_snapshot(store, "services", "appointments")
    return stats.revenue_by_month(snap.services, snap.appointments, year)


@router.get("/closing", response_model=MonthlyClosing)
async def get_monthly_closing(
    today: Optional[date] = Query(None),
    store: EntityStore = Depends(get_store),
):
    snap = await load_snapshot(store, "clients", "services", "appointments")
    return stats.monthly_closing(snap.clients, snap.services, snap.appointments, today or date.today())


@router.get("/general")
async def get_general_report(
    today: Optional[date] = Query(None),
    store: EntityStore = Depends(get_store),
):
    """General report content as `{"data": [{title, header, rows}, ...]}`."""
    snap = await load_snapshot(store, "clients", "services", "appointments")
    sheets = export.general_report(snap.clients, snap.services, snap.appointments, today or date.today())
    return {"data": jsonable_encoder([asdict(s) for s in sheets])}


@router.get("/general.xlsx")
async def download_general_report(store: EntityStore = Depends(get_store)):
    today = date.today()
    snap = await load_snapshot(store, "clients", "services", "appointments")
    sheets = export.general_report(snap.clients, snap.services, snap.appointments, today)
    content = export.render_workbook(sheets, f"GENERAL REPORT - {settings.SALON_NAME.upper()}")
    return _xlsx_response(content, export.report_filename("General", settings.SALON_NAME, today))


@router.get("/detailed.xlsx")
async def download_detailed_report(store: EntityStore = Depends(get_store)):
    now = datetime.now()
    snap = await load_snapshot(store)
    sheets = export.detailed_report(snap.clients, snap.services, snap.products, snap.appointments, now)
    content = export.render_workbook(sheets, f"DETAILED REPORT - {settings.SALON_NAME.upper()}")
    return _xlsx_response(content, export.report_filename("Detailed", settings.SALON_NAME, now.date()))
