"""Appointment booking, listing and status endpoints."""

from datetime import date, datetime
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from salon_admin.api.v1.endpoints._crud import delete_or_404, get_or_404
from salon_admin.core.config import settings
from salon_admin.core.deps import get_store
from salon_admin.schemas.appointment import (
    AppointmentCreate,
    AppointmentDetail,
    AppointmentOut,
    AppointmentStatusUpdate,
    AppointmentUpdate,
)
from salon_admin.schemas.common import DataResponse, MessageResponse
from salon_admin.services import scheduler
from salon_admin.services.calendar import appointments_in_month
from salon_admin.services.snapshot import load_snapshot
from salon_admin.services.stats import enrich_appointments, upcoming_appointments
from salon_admin.services.store import EntityStore

router = APIRouter()


def _sorted(appointments: list) -> list:
    return sorted(appointments, key=lambda a: (a.appointment_date, a.appointment_time))


@router.get("", response_model=DataResponse[list[AppointmentDetail]])
async def list_appointments(
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None),
    store: EntityStore = Depends(get_store),
):
    """List appointments with client/service names, optionally within a date range."""
    snap = await load_snapshot(store, "clients", "services")
    appointments = await store.appointments.list()

    if start_date:
        appointments = [a for a in appointments if a.appointment_date >= start_date]
    if end_date:
        appointments = [a for a in appointments if a.appointment_date <= end_date]

    return DataResponse(data=enrich_appointments(_sorted(appointments), snap.clients, snap.services))


@router.post("", response_model=DataResponse[AppointmentOut], status_code=201)
async def book_appointment(appointment: AppointmentCreate, store: EntityStore = Depends(get_store)):
    """Book an appointment. New appointments always start as `scheduled`."""
    return DataResponse(data=await scheduler.schedule_appointment(store, appointment))


@router.get("/upcoming", response_model=DataResponse[list[AppointmentDetail]])
async def list_upcoming(
    limit: int = Query(settings.UPCOMING_LIMIT, ge=1, le=100),
    store: EntityStore = Depends(get_store),
):
    """Next non-canceled appointments, soonest first."""
    snap = await load_snapshot(store, "clients", "services", "appointments")
    return DataResponse(data=upcoming_appointments(
        snap.appointments, snap.clients, snap.services, datetime.now(), limit
    ))


@router.get("/month/{year}/{month}", response_model=DataResponse[list[AppointmentDetail]])
async def list_month(year: int, month: int, store: EntityStore = Depends(get_store)):
    """Appointments dated in the given month (1-12)."""
    if not 1 <= month <= 12:
        raise HTTPException(status_code=422, detail="Month must be between 1 and 12")

    snap = await load_snapshot(store, "clients", "services")
    appointments = appointments_in_month(await store.appointments.list(), year, month)
    return DataResponse(data=enrich_appointments(_sorted(appointments), snap.clients, snap.services))


@router.get("/{appointment_id}", response_model=DataResponse[AppointmentDetail])
async def get_appointment(appointment_id: int, store: EntityStore = Depends(get_store)):
    appointment = await get_or_404(store.appointments, appointment_id)
    snap = await load_snapshot(store, "clients", "services")
    return DataResponse(data=enrich_appointments([appointment], snap.clients, snap.services)[0])


@router.put("/{appointment_id}", response_model=DataResponse[AppointmentOut])
async def update_appointment(
    appointment_id: int,
    changes: AppointmentUpdate,
    store: EntityStore = Depends(get_store),
):
    return DataResponse(data=await scheduler.update_appointment(store, appointment_id, changes))


@router.put("/{appointment_id}/status", response_model=DataResponse[AppointmentOut])
async def update_status(
    appointment_id: int,
    body: AppointmentStatusUpdate,
    store: EntityStore = Depends(get_store),
):
    """Move an appointment to another status."""
    return DataResponse(data=await scheduler.set_status(store, appointment_id, body.status))


@router.delete("/{appointment_id}", response_model=MessageResponse)
async def delete_appointment(appointment_id: int, store: EntityStore = Depends(get_store)):
    await delete_or_404(store.appointments, appointment_id)
    return MessageResponse(message="Appointment deleted")
