"""Appointment (calendar) endpoints."""

import logging
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.core.config import settings
from app.core.deps import get_current_user_id, get_repositories
from app.models.appointment import APPOINTMENT_DURATIONS
from app.repositories.records import Repositories
from app.schemas.appointment import (
    AppointmentCreate,
    AppointmentListOut,
    AppointmentMutationOut,
    AppointmentRow,
    AppointmentStats,
    AppointmentUpdate,
)
from app.services import appointments as calendar
from app.services.lookups import business_name, lead_name
from app.services.views import MutationResult, Snapshot
from app.utils.dates import local_day, utcnow

router = APIRouter()
logger = logging.getLogger(__name__)


def _row(appointment, snapshot: Snapshot) -> AppointmentRow:
    return AppointmentRow(
        **appointment.model_dump(),
        lead_name=lead_name(snapshot.leads, appointment.lead_id),
        business_name=business_name(snapshot.businesses, appointment.business_id),
    )


def build_calendar(snapshot: Snapshot, day: Optional[date] = None) -> AppointmentListOut:
    now = utcnow()
    today = local_day(now)
    day = day or today

    on_day = calendar.appointments_for_date(snapshot.appointments, day)
    upcoming = calendar.upcoming_appointments(
        snapshot.appointments, now, settings.UPCOMING_APPOINTMENTS_LIMIT
    )
    return AppointmentListOut(
        date=day,
        appointments=[_row(a, snapshot) for a in on_day],
        upcoming=[_row(a, snapshot) for a in upcoming],
        stats=AppointmentStats(**calendar.appointment_stats(snapshot.appointments, today)),
        durations=list(APPOINTMENT_DURATIONS),
        degraded=snapshot.degraded,
    )


def _mutation_out(result: MutationResult) -> AppointmentMutationOut:
    return AppointmentMutationOut(record=result.record, view=build_calendar(result.view))


@router.get("/", response_model=AppointmentListOut)
async def list_appointments(
    day: Optional[date] = Query(None, alias="date", description="Calendar day; defaults to today"),
    user_id: str = Depends(get_current_user_id),
    repos: Repositories = Depends(get_repositories),
):
    """Appointments on the selected day, the next upcoming ones, and totals."""
    snapshot = await calendar.AppointmentStore(repos).load_or_empty(user_id)
    return build_calendar(snapshot, day)


@router.post("/", response_model=AppointmentMutationOut, status_code=201)
async def create_appointment(
    appointment: AppointmentCreate,
    user_id: str = Depends(get_current_user_id),
    repos: Repositories = Depends(get_repositories),
):
    """Book an appointment with a lead."""
    result = await calendar.AppointmentStore(repos).create(user_id, appointment)
    return _mutation_out(result)


@router.patch("/{appointment_id}", response_model=AppointmentMutationOut)
async def update_appointment(
    appointment_id: str,
    changes: AppointmentUpdate,
    user_id: str = Depends(get_current_user_id),
    repos: Repositories = Depends(get_repositories),
):
    """Reschedule, rename, complete or cancel an appointment."""
    result = await calendar.AppointmentStore(repos).update(user_id, appointment_id, changes)
    return _mutation_out(result)


@router.delete("/{appointment_id}", response_model=AppointmentMutationOut)
async def delete_appointment(
    appointment_id: str,
    user_id: str = Depends(get_current_user_id),
    repos: Repositories = Depends(get_repositories),
):
    result = await calendar.AppointmentStore(repos).delete(user_id, appointment_id)
    return _mutation_out(result)
