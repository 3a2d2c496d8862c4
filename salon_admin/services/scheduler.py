"""Appointment booking and status transitions.

Every appointment starts as `scheduled`. Status changes go through
`ALLOWED_TRANSITIONS`; today every state may move to every other state,
including out of `completed` and `canceled`. Entering or leaving `completed`
changes the revenue reported for the appointment's month.
"""

import logging

from salon_admin.models.appointment import AppointmentStatus
from salon_admin.schemas.appointment import AppointmentCreate, AppointmentUpdate
from salon_admin.services.store import EntityNotFoundError, EntityStore

logger = logging.getLogger(__name__)

INITIAL_STATUS = AppointmentStatus.SCHEDULED

ALLOWED_TRANSITIONS: dict[AppointmentStatus, frozenset[AppointmentStatus]] = {
    status: frozenset(AppointmentStatus) for status in AppointmentStatus
}


class InvalidStatusTransitionError(Exception):
    def __init__(self, current: AppointmentStatus, requested: AppointmentStatus):
        self.current = current
        self.requested = requested
        super().__init__(f"Cannot change appointment status from {current.value} to {requested.value}")


def check_transition(current: AppointmentStatus, requested: AppointmentStatus) -> None:
    if requested not in ALLOWED_TRANSITIONS.get(current, frozenset()):
        raise InvalidStatusTransitionError(current, requested)


async def _ensure_references(store: EntityStore, client_id: int | None, service_id: int | None) -> None:
    if client_id is not None and await store.clients.get(client_id) is None:
        raise EntityNotFoundError("Client", client_id)
    if service_id is not None and await store.services.get(service_id) is None:
        raise EntityNotFoundError("Service", service_id)


async def schedule_appointment(store: EntityStore, data: AppointmentCreate):
    """Book an appointment for an existing client and service."""
    await _ensure_references(store, data.client_id, data.service_id)

    appointment = await store.appointments.create(data)

    logger.info(
        "Appointment %s booked: client %s, service %s on %s at %s",
        appointment.id, data.client_id, data.service_id,
        data.appointment_date, data.appointment_time.strftime("%H:%M"),
    )
    return appointment


async def set_status(store: EntityStore, appointment_id: int, new_status: AppointmentStatus):
    appointment = await store.appointments.get(appointment_id)
    if appointment is None:
        raise EntityNotFoundError("Appointment", appointment_id)

    check_transition(appointment.status, new_status)
    updated = await store.appointments.update(appointment_id, AppointmentUpdate(status=new_status))

    logger.info(
        "Appointment %s status %s -> %s",
        appointment_id, appointment.status.value, new_status.value,
    )
    return updated


async def update_appointment(store: EntityStore, appointment_id: int, data: AppointmentUpdate):
    """Edit an appointment. A status in the payload follows the transition table."""
    appointment = await store.appointments.get(appointment_id)
    if appointment is None:
        raise EntityNotFoundError("Appointment", appointment_id)

    changes = data.model_dump(exclude_unset=True)
    await _ensure_references(store, changes.get("client_id"), changes.get("service_id"))
    if "status" in changes:
        check_transition(appointment.status, changes["status"])

    return await store.appointments.update(appointment_id, data)
