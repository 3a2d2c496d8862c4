"""Pydantic schemas for Appointments."""

from datetime import datetime, date, time
from pydantic import BaseModel, field_validator
from salon_admin.models.appointment import AppointmentStatus
from salon_admin.schemas.common import reject_null


class AppointmentCreate(BaseModel):
    """Booking request. Status is always `scheduled` on creation."""
    client_id: int
    service_id: int
    appointment_date: date
    appointment_time: time
    observations: str | None = None


class AppointmentUpdate(BaseModel):
    """Fields an admin may change on an existing appointment."""
    client_id: int | None = None
    service_id: int | None = None
    appointment_date: date | None = None
    appointment_time: time | None = None
    status: AppointmentStatus | None = None
    observations: str | None = None

    @field_validator(
        "client_id", "service_id", "appointment_date", "appointment_time", "status", mode="before"
    )
    @classmethod
    def required_not_null(cls, v):
        return reject_null(v)

    class Config:
        extra = "forbid"


class AppointmentStatusUpdate(BaseModel):
    status: AppointmentStatus


class AppointmentOut(BaseModel):
    id: int
    client_id: int
    service_id: int
    appointment_date: date
    appointment_time: time
    status: AppointmentStatus = AppointmentStatus.SCHEDULED
    observations: str | None = None
    created_at: datetime | None = None

    class Config:
        from_attributes = True


class AppointmentDetail(AppointmentOut):
    """Appointment joined with its client and service at read time.

    `total_price` follows the service's current price, so editing a service
    price restates past appointments too.
    """
    client_name: str
    service_name: str
    total_price: float
