"""Dashboard and report aggregation.

Every function here is pure: it takes the collections already fetched from
the entity store plus a reference date and never touches persistence.
Dangling client/service references never raise; they resolve to the
"not found" placeholders and contribute nothing to revenue.
"""

import logging
from collections import Counter
from datetime import date, datetime
from typing import Iterable, Sequence

from salon_admin.models.appointment import AppointmentStatus

logger = logging.getLogger(__name__)

CLIENT_NOT_FOUND = "Client not found"
SERVICE_NOT_FOUND = "Service not found"

OUT_OF_STOCK = "out of stock"
LOW_STOCK = "low stock"
IN_STOCK = "in stock"


def stock_status(quantity: int | None, minimum_stock: int | None) -> str:
    """Classify a product's stock level. Missing numbers count as zero."""
    quantity = quantity or 0
    minimum_stock = minimum_stock or 0
    if quantity <= 0:
        return OUT_OF_STOCK
    if quantity <= minimum_stock:
        return LOW_STOCK
    return IN_STOCK


def _is_completed(appointment) -> bool:
    return appointment.status == AppointmentStatus.COMPLETED


def _index(items: Iterable) -> dict:
    return {item.id: item for item in items}


def resolve_client_name(client_id, clients_by_id: dict) -> str:
    client = clients_by_id.get(client_id)
    return client.full_name if client else CLIENT_NOT_FOUND


def resolve_service(service_id, services_by_id: dict) -> tuple[str, float]:
    """Return (name, current price) for a service id, or the placeholder and 0."""
    service = services_by_id.get(service_id)
    if not service:
        return SERVICE_NOT_FOUND, 0.0
    return service.name, float(service.price or 0)


def _revenue(appointments: Iterable, services_by_id: dict) -> float:
    total = 0.0
    for appt in appointments:
        total += resolve_service(appt.service_id, services_by_id)[1]
    return round(total, 2)


def _in_month(day: date, year: int, month: int) -> bool:
    return day.year == year and day.month == month


def dashboard_stats(clients: Sequence, services: Sequence, appointments: Sequence, today: date) -> dict:
    """Headline numbers for the dashboard cards.

    Revenue only counts completed appointments dated in today's month and
    priced at the service's *current* price.
    """
    services_by_id = _index(services)
    completed = [a for a in appointments if _is_completed(a)]
    this_month = [a for a in completed if _in_month(a.appointment_date, today.year, today.month)]

    return {
        "total_clients": len(clients),
        "appointments_today": sum(1 for a in appointments if a.appointment_date == today),
        "monthly_revenue": _revenue(this_month, services_by_id),
        "completed_services_count": len(completed),
    }


def report_stats(clients: Sequence, services: Sequence, products: Sequence, appointments: Sequence) -> dict:
    return {
        "total_clients": len(clients),
        "completed_appointments": sum(1 for a in appointments if _is_completed(a)),
        "active_services": sum(1 for s in services if s.active),
        "total_products": len(products),
    }


def top_services(appointments: Sequence, services: Sequence, n: int = 5) -> list[tuple[str, int]]:
    """Most performed services among completed appointments.

    Ties keep the order in which the service name was first seen.
    """
    services_by_id = _index(services)
    # Counter preserves insertion order and most_common() sorts stably
    counts = Counter(
        resolve_service(a.service_id, services_by_id)[0]
        for a in appointments
        if _is_completed(a)
    )
    return counts.most_common(n)


def low_stock_products(products: Sequence) -> list:
    return [p for p in products if stock_status(p.quantity, p.minimum_stock) != IN_STOCK]


def completion_rate(total: int, completed: int) -> float:
    """Percentage with one decimal; 0 when there is nothing to complete."""
    if total <= 0:
        return 0.0
    return round(completed / total * 100, 1)


def monthly_closing(clients: Sequence, services: Sequence, appointments: Sequence, today: date) -> dict:
    services_by_id = _index(services)
    clients_by_id = _index(clients)
    month_appts = [a for a in appointments if _in_month(a.appointment_date, today.year, today.month)]
    completed = [a for a in month_appts if _is_completed(a)]
    canceled = [a for a in month_appts if a.status == AppointmentStatus.CANCELED]

    revenue = _revenue(completed, services_by_id)
    average_ticket = round(revenue / len(completed), 2) if completed else 0.0
    served = {resolve_client_name(a.client_id, clients_by_id) for a in completed}

    return {
        "year": today.year,
        "month": today.month,
        "revenue": revenue,
        "services_performed": len(completed),
        "average_ticket": average_ticket,
        "total_appointments": len(month_appts),
        "completed_appointments": len(completed),
        "completion_rate": completion_rate(len(month_appts), len(completed)),
        "canceled_appointments": len(canceled),
        "top_services": [
            {"service_name": name, "count": count}
            for name, count in top_services(month_appts, services, 5)
        ],
        "total_clients": len(clients),
        "clients_served": len(served),
    }


def revenue_by_month(services: Sequence, appointments: Sequence, year: int) -> list[dict]:
    services_by_id = _index(services)
    totals = {month: 0.0 for month in range(1, 13)}
    for appt in appointments:
        if _is_completed(appt) and appt.appointment_date.year == year:
            totals[appt.appointment_date.month] += resolve_service(appt.service_id, services_by_id)[1]
    return [{"month": month, "revenue": round(value, 2)} for month, value in totals.items()]


def enrich_appointments(appointments: Sequence, clients: Sequence, services: Sequence) -> list[dict]:
    """Join appointments with client name, service name and current price."""
    clients_by_id = _index(clients)
    services_by_id = _index(services)
    rows = []
    for appt in appointments:
        client_name = resolve_client_name(appt.client_id, clients_by_id)
        service_name, price = resolve_service(appt.service_id, services_by_id)
        if client_name == CLIENT_NOT_FOUND or service_name == SERVICE_NOT_FOUND:
            logger.debug("Appointment %s has a dangling reference", appt.id)
        rows.append({
            **appt.model_dump(),
            "client_name": client_name,
            "service_name": service_name,
            "total_price": price,
        })
    return rows


def upcoming_appointments(
    appointments: Sequence,
    clients: Sequence,
    services: Sequence,
    now: datetime,
    limit: int = 10,
) -> list[dict]:
    """Non-canceled appointments at or after `now`, soonest first."""
    pending = [
        a for a in appointments
        if a.status != AppointmentStatus.CANCELED
        and datetime.combine(a.appointment_date, a.appointment_time) >= now
    ]
    pending.sort(key=lambda a: (a.appointment_date, a.appointment_time))
    return enrich_appointments(pending[:limit], clients, services)
