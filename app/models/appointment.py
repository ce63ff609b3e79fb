"""Appointment model for the calendar."""

from sqlalchemy import Column, String, DateTime, Integer, Enum as SQLEnum, Text
from datetime import datetime
import enum
from app.core.database import Base


class AppointmentStatus(str, enum.Enum):
    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


# Choices offered by the booking form; the store accepts any positive duration
APPOINTMENT_DURATIONS = (15, 30, 60, 90, 120)


class Appointment(Base):
    __tablename__ = "appointments"

    id = Column(String(64), primary_key=True)
    user_id = Column(String(128), nullable=False, index=True)
    lead_id = Column(String(64), nullable=False, index=True)
    business_id = Column(String(64), nullable=False, index=True)

    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    scheduled_at = Column(DateTime, nullable=False, index=True)  # naive UTC
    duration = Column(Integer, nullable=False, default=60)  # minutes
    status = Column(
        SQLEnum(AppointmentStatus, name="appointment_status", values_callable=lambda e: [m.value for m in e]),
        default=AppointmentStatus.SCHEDULED,
        nullable=False,
        index=True,
    )

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
