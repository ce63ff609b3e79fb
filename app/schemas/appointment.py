"""Pydantic schemas for Appointments."""

from datetime import datetime, date
from pydantic import BaseModel, Field, field_validator
from typing import Optional
from app.core.config import settings
from app.models.appointment import AppointmentStatus
from app.utils.dates import to_naive_utc


class AppointmentCreate(BaseModel):
    """Schema for creating an appointment."""
    lead_id: str = Field(..., min_length=1)
    business_id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    scheduled_at: datetime
    duration: int = Field(default_factory=lambda: settings.DEFAULT_APPOINTMENT_DURATION, gt=0)

    @field_validator("title")
    @classmethod
    def not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v

    @field_validator("scheduled_at")
    @classmethod
    def normalize_tz(cls, v: datetime) -> datetime:
        return to_naive_utc(v)


class AppointmentUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    scheduled_at: Optional[datetime] = None
    duration: Optional[int] = Field(None, gt=0)
    status: Optional[AppointmentStatus] = None

    @field_validator("scheduled_at", "duration", "status")
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError("may not be null")
        return v

    @field_validator("title")
    @classmethod
    def not_blank(cls, v: Optional[str]) -> str:
        if v is None:
            raise ValueError("may not be null")
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v

    @field_validator("scheduled_at")
    @classmethod
    def normalize_tz(cls, v: datetime) -> datetime:
        return to_naive_utc(v)


class AppointmentOut(BaseModel):
    """Schema for returning appointment details."""
    id: str
    user_id: str
    lead_id: str
    business_id: str
    title: str
    description: Optional[str] = None
    scheduled_at: datetime
    duration: int
    status: AppointmentStatus
    created_at: datetime

    class Config:
        from_attributes = True


class AppointmentRow(AppointmentOut):
    lead_name: str
    business_name: str


class AppointmentStats(BaseModel):
    total: int
    scheduled: int
    completed: int
    today: int


class AppointmentListOut(BaseModel):
    """Calendar view: the selected day's appointments plus upcoming ones."""
    date: date
    appointments: list[AppointmentRow]
    upcoming: list[AppointmentRow]
    stats: AppointmentStats
    durations: list[int]
    degraded: bool = False


class AppointmentMutationOut(BaseModel):
    record: Optional[AppointmentOut] = None
    view: AppointmentListOut
