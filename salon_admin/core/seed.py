"""Seed example data for demos and local development."""

import logging
from datetime import date, time, timedelta

from salon_admin.models.appointment import AppointmentStatus
from salon_admin.schemas.appointment import AppointmentCreate
from salon_admin.schemas.client import ClientCreate
from salon_admin.schemas.product import ProductCreate
from salon_admin.schemas.service import ServiceCreate
from salon_admin.services import scheduler
from salon_admin.services.store import EntityStore

logger = logging.getLogger(__name__)

EXAMPLE_CLIENTS = [
    ClientCreate(full_name="Maria Silva", phone="11987654321", email="maria@example.com"),
    ClientCreate(full_name="Ana Souza", phone="11912345678", birth_date=date(1990, 5, 14)),
    ClientCreate(full_name="Juliana Costa", phone="11955554444", address="Rua das Flores, 120"),
]

EXAMPLE_SERVICES = [
    ServiceCreate(name="Haircut", category="Hair", duration_minutes=45, price=50),
    ServiceCreate(name="Manicure", category="Nails", duration_minutes=40, price=35),
    ServiceCreate(name="Facial Cleansing", category="Skin", duration_minutes=60, price=120),
]

EXAMPLE_PRODUCTS = [
    ProductCreate(name="Shampoo 500ml", category="Hair", quantity=12, minimum_stock=5, price=39.9),
    ProductCreate(name="Nail Polish Red", category="Nails", quantity=3, minimum_stock=5, price=12.5),
    ProductCreate(name="Facial Mask", category="Skin", quantity=0, minimum_stock=2, price=25),
]


async def seed_example_data(store: EntityStore, today: date | None = None) -> dict:
    """Create example clients, services, products and appointments.

    Every record is an independent create: a failure partway through leaves
    what was already created in place.
    """
    today = today or date.today()

    if await store.clients.list():
        logger.info("Store already has clients, skipping example data")
        return {"clients": 0, "services": 0, "products": 0, "appointments": 0}

    clients = [await store.clients.create(c) for c in EXAMPLE_CLIENTS]
    services = [await store.services.create(s) for s in EXAMPLE_SERVICES]
    products = [await store.products.create(p) for p in EXAMPLE_PRODUCTS]

    bookings = [
        (clients[0], services[0], today - timedelta(days=2), time(10, 0), AppointmentStatus.COMPLETED),
        (clients[1], services[1], today, time(14, 30), AppointmentStatus.CONFIRMED),
        (clients[2], services[2], today + timedelta(days=3), time(9, 0), AppointmentStatus.SCHEDULED),
    ]
    appointments = []
    for client, service, day, at, status in bookings:
        appt = await scheduler.schedule_appointment(store, AppointmentCreate(
            client_id=client.id,
            service_id=service.id,
            appointment_date=day,
            appointment_time=at,
        ))
        if status != scheduler.INITIAL_STATUS:
            appt = await scheduler.set_status(store, appt.id, status)
        appointments.append(appt)

    counts = {
        "clients": len(clients),
        "services": len(services),
        "products": len(products),
        "appointments": len(appointments),
    }
    logger.info("✅ Example data created: %s", counts)
    return counts
