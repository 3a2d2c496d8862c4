"""Tests for the month calendar grid."""

from datetime import date, time, timedelta

import pytest

from salon_admin.schemas.appointment import AppointmentOut
from salon_admin.services.calendar import (
    GRID_DAYS,
    appointments_in_month,
    build_calendar_grid,
    grid_start,
    month_title,
    shift_month,
)

TODAY = date(2026, 10, 19)


def appt(id, day, at=time(10, 0)):
    return AppointmentOut(id=id, client_id=1, service_id=1, appointment_date=day, appointment_time=at)


@pytest.mark.parametrize("year", [2023, 2024, 2026, 2100])
def test_grid_is_42_consecutive_days_starting_sunday(year):
    for month in range(1, 13):
        cells = build_calendar_grid(year, month, [], TODAY)

        assert len(cells) == GRID_DAYS
        first = cells[0]["date"]
        assert first.weekday() == 6  # Sunday
        assert first <= date(year, month, 1)
        assert (date(year, month, 1) - first).days < 7
        for offset, cell in enumerate(cells):
            assert cell["date"] == first + timedelta(days=offset)


def test_in_month_flags_cover_every_day_of_month():
    cells = build_calendar_grid(2024, 2, [], TODAY)
    in_month = [c["date"] for c in cells if c["in_month"]]

    assert len(in_month) == 29
    assert in_month[0] == date(2024, 2, 1)
    assert all(c["other_month"] != c["in_month"] for c in cells)


def test_month_starting_on_sunday_has_no_leading_days():
    # March 2026 starts on a Sunday
    assert grid_start(2026, 3) == date(2026, 3, 1)
    cells = build_calendar_grid(2026, 3, [], TODAY)
    assert cells[0]["in_month"] is True


def test_october_2026_grid_starts_in_september():
    assert grid_start(2026, 10) == date(2026, 9, 27)


def test_today_is_flagged_once():
    cells = build_calendar_grid(2026, 10, [], TODAY)
    flagged = [c["date"] for c in cells if c["is_today"]]
    assert flagged == [TODAY]


def test_each_appointment_lands_in_exactly_one_cell():
    appointments = [
        appt(1, date(2026, 10, 1)),
        appt(2, date(2026, 10, 19), time(15, 0)),
        appt(3, date(2026, 10, 19), time(9, 30)),
        appt(4, date(2026, 10, 31)),
        appt(5, date(2026, 12, 25)),
    ]
    cells = build_calendar_grid(2026, 10, appointments, TODAY)

    placed = [a.id for c in cells for a in c["appointments"]]
    assert sorted(placed) == [1, 2, 3, 4]

    cell = next(c for c in cells if c["date"] == TODAY)
    assert [a.id for a in cell["appointments"]] == [3, 2]


def test_adjacent_month_days_show_their_appointments():
    cells = build_calendar_grid(2026, 10, [appt(1, date(2026, 9, 28))], TODAY)
    cell = next(c for c in cells if c["date"] == date(2026, 9, 28))
    assert cell["other_month"] is True
    assert [a.id for a in cell["appointments"]] == [1]


@pytest.mark.parametrize("year,month,delta,expected", [
    (2026, 10, 1, (2026, 11)),
    (2026, 12, 1, (2027, 1)),
    (2026, 1, -1, (2025, 12)),
    (2026, 6, -18, (2024, 12)),
    (2026, 6, 0, (2026, 6)),
])
def test_shift_month_wraps_year(year, month, delta, expected):
    assert shift_month(year, month, delta) == expected


def test_month_title():
    assert month_title(2026, 10) == "October 2026"


@pytest.mark.parametrize("month", [0, 13, -1])
def test_invalid_month_rejected(month):
    with pytest.raises(ValueError):
        build_calendar_grid(2026, month, [], TODAY)
    with pytest.raises(ValueError):
        shift_month(2026, month, 1)


def test_appointments_in_month_filters_by_year_and_month():
    appointments = [appt(1, date(2026, 10, 3)), appt(2, date(2025, 10, 3)), appt(3, date(2026, 11, 1))]
    assert [a.id for a in appointments_in_month(appointments, 2026, 10)] == [1]


@pytest.mark.parametrize("year,month", [(1, 1), (9999, 12)])
def test_grid_outside_supported_dates_is_rejected(year, month):
    with pytest.raises(ValueError):
        build_calendar_grid(year, month, [], TODAY)


def test_grid_at_supported_edges():
    assert len(build_calendar_grid(1, 2, [], TODAY)) == GRID_DAYS
    assert len(build_calendar_grid(9999, 11, [], TODAY)) == GRID_DAYS
