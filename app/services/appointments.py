"""Calendar screen: day buckets, upcoming list and booking."""

import logging
from collections import OrderedDict
from datetime import date, datetime
from typing import Iterable, Optional

from app.models.appointment import AppointmentStatus
from app.schemas.appointment import AppointmentCreate, AppointmentUpdate
from app.services.views import ScreenStore
from app.utils.dates import local_day, to_naive_utc

logger = logging.getLogger(__name__)


def appointments_for_date(appointments: Iterable, day: date, tz: Optional[str] = None) -> list:
    """Appointments whose start falls on ``day`` in local time."""
    return [a for a in appointments if local_day(a.scheduled_at, tz) == day]


def group_by_date(appointments: Iterable, tz: Optional[str] = None) -> "OrderedDict[date, list]":
    """Bucket appointments by local calendar day, keeping input order."""
    buckets: OrderedDict[date, list] = OrderedDict()
    for appointment in appointments:
        buckets.setdefault(local_day(appointment.scheduled_at, tz), []).append(appointment)
    return buckets


def upcoming_appointments(appointments: Iterable, now: datetime, limit: int = 5) -> list:
    """Scheduled appointments at or after ``now``, first ``limit`` in input order.

    Callers load appointments sorted by scheduled_at ascending.
    """
    now = to_naive_utc(now)
    upcoming = [
        a for a in appointments
        if to_naive_utc(a.scheduled_at) >= now and a.status == AppointmentStatus.SCHEDULED
    ]
    return upcoming[:limit]


def appointment_stats(appointments: Iterable, today: date, tz: Optional[str] = None) -> dict[str, int]:
    appointments = list(appointments)
    return {
        "total": len(appointments),
        "scheduled": sum(1 for a in appointments if a.status == AppointmentStatus.SCHEDULED),
        "completed": sum(1 for a in appointments if a.status == AppointmentStatus.COMPLETED),
        "today": len(appointments_for_date(appointments, today, tz)),
    }


class AppointmentStore(ScreenStore):
    name = "calendar"
    loads = {"appointments": {"scheduled_at": "asc"}, "leads": None, "businesses": None}

    async def create(self, user_id: str, data: AppointmentCreate):
        fields = data.model_dump()
        fields["status"] = AppointmentStatus.SCHEDULED
        await self._check_references(user_id, leads=data.lead_id, businesses=data.business_id)
        return await self._then_reload(user_id, self.repos.appointments.create(user_id, fields))

    async def update(self, user_id: str, appointment_id: str, data: AppointmentUpdate):
        fields = data.model_dump(exclude_unset=True)
        return await self._then_reload(
            user_id, self.repos.appointments.update(user_id, appointment_id, fields)
        )

    async def delete(self, user_id: str, appointment_id: str):
        return await self._then_reload(
            user_id, self.repos.appointments.delete(user_id, appointment_id)
        )
