"""Month calendar grid for the booking view.

The grid is always 6 weeks x 7 days, Sunday first, starting on the Sunday on
or before the 1st of the month. The only navigation state is the
(year, month) cursor.
"""

import calendar as _calendar
from collections import defaultdict
from datetime import date, timedelta
from typing import Sequence

GRID_DAYS = 42


def _validate_month(month: int) -> None:
    if not 1 <= month <= 12:
        raise ValueError(f"month must be between 1 and 12, got {month}")


def grid_start(year: int, month: int) -> date:
    """Most recent Sunday on or before the first day of the month."""
    _validate_month(month)
    try:
        first = date(year, month, 1)
        # weekday(): Monday=0 .. Sunday=6
        days_since_sunday = (first.weekday() + 1) % 7
        return first - timedelta(days=days_since_sunday)
    except OverflowError as e:
        raise ValueError(f"{month_title(year, month)} grid starts before {date.min}") from e


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """Move the cursor by `delta` months, wrapping the year."""
    _validate_month(month)
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def month_title(year: int, month: int) -> str:
    _validate_month(month)
    return f"{_calendar.month_name[month]} {year}"


def build_calendar_grid(year: int, month: int, appointments: Sequence, today: date) -> list[dict]:
    """Return the 42 day cells for a month, each with that day's appointments."""
    start = grid_start(year, month)
    if date.max - start < timedelta(days=GRID_DAYS - 1):
        raise ValueError(f"{month_title(year, month)} grid ends after {date.max}")

    by_day = defaultdict(list)
    for appt in appointments:
        by_day[appt.appointment_date].append(appt)

    cells = []
    for offset in range(GRID_DAYS):
        day = start + timedelta(days=offset)
        in_month = day.year == year and day.month == month
        cells.append({
            "date": day,
            "in_month": in_month,
            "other_month": not in_month,
            "is_today": day == today,
            "appointments": sorted(by_day.get(day, []), key=lambda a: a.appointment_time),
        })
    return cells


def appointments_in_month(appointments: Sequence, year: int, month: int) -> list:
    _validate_month(month)
    return [
        a for a in appointments
        if a.appointment_date.year == year and a.appointment_date.month == month
    ]
