"""Month calendar endpoints.

- GET /api/v1/calendar → grid for the current month
- GET /api/v1/calendar/{year}/{month} → grid for any month, with prev/next cursors
"""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from salon_admin.core.deps import get_store
from salon_admin.schemas.calendar import CalendarGrid
from salon_admin.services.calendar import build_calendar_grid, month_title, shift_month
from salon_admin.services.store import EntityStore

router = APIRouter()


async def _grid(year: int, month: int, today: date, store: EntityStore) -> dict:
    if not 1 <= month <= 12:
        raise HTTPException(status_code=422, detail="Month must be between 1 and 12")

    appointments = await store.appointments.list()
    try:
        cells = build_calendar_grid(year, month, appointments, today)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    prev_year, prev_month = shift_month(year, month, -1)
    next_year, next_month = shift_month(year, month, 1)
    return {
        "year": year,
        "month": month,
        "title": month_title(year, month),
        "previous": {"year": prev_year, "month": prev_month},
        "next": {"year": next_year, "month": next_month},
        "cells": cells,
    }


@router.get("", response_model=CalendarGrid)
async def current_month(
    today: Optional[date] = Query(None),
    store: EntityStore = Depends(get_store),
):
    today = today or date.today()
    return await _grid(today.year, today.month, today, store)


@router.get("/{year}/{month}", response_model=CalendarGrid)
async def month_grid(
    year: int,
    month: int,
    today: Optional[date] = Query(None),
    store: EntityStore = Depends(get_store),
):
    return await _grid(year, month, today or date.today(), store)
