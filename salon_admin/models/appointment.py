"""Appointment model for the booking calendar."""

from sqlalchemy import Column, Integer, Date, Time, DateTime, Text, Enum as SQLEnum
from datetime import datetime
import enum
from salon_admin.core.database import Base


class AppointmentStatus(str, enum.Enum):
    SCHEDULED = "scheduled"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELED = "canceled"


class Appointment(Base):
    __tablename__ = "appointments"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)

    # Plain ids, not foreign keys: deleting a client or service leaves the
    # appointment in place with a dangling reference.
    client_id = Column(Integer, nullable=False, index=True)
    service_id = Column(Integer, nullable=False, index=True)

    appointment_date = Column(Date, nullable=False, index=True)
    appointment_time = Column(Time, nullable=False)
    status = Column(
        SQLEnum(AppointmentStatus, values_callable=lambda e: [m.value for m in e]),
        default=AppointmentStatus.SCHEDULED,
        nullable=False,
        index=True,
    )
    observations = Column(Text, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)
