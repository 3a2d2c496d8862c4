"""Pydantic schemas for the month calendar view."""

from datetime import date
from pydantic import BaseModel
from salon_admin.schemas.appointment import AppointmentOut


class CalendarCell(BaseModel):
    date: date
    in_month: bool
    other_month: bool
    is_today: bool
    appointments: list[AppointmentOut]


class MonthCursor(BaseModel):
    year: int
    month: int


class CalendarGrid(BaseModel):
    year: int
    month: int
    title: str
    previous: MonthCursor
    next: MonthCursor
    cells: list[CalendarCell]
