"""Pydantic schemas for the dashboard and settings screens."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field
from app.schemas.interaction import InteractionRow


class DashboardStats(BaseModel):
    total_leads: int
    active_campaigns: int
    total_interactions: int
    conversion_rate: int = Field(description="Converted leads as a whole percentage")
    new_leads: int
    draft_campaigns: int
    calls_made: int
    conversions: int
    has_business: bool


class DashboardOut(BaseModel):
    stats: DashboardStats
    recent_interactions: list[InteractionRow]
    degraded: bool = False


class IntegrationSettingsUpdate(BaseModel):
    voice_enabled: Optional[bool] = None
    whatsapp_enabled: Optional[bool] = None
    email_enabled: Optional[bool] = None
    auto_followup: Optional[bool] = None
    followup_delay_hours: Optional[int] = Field(None, ge=1, le=168)


class IntegrationSettingsOut(BaseModel):
    user_id: str
    voice_enabled: bool
    whatsapp_enabled: bool
    email_enabled: bool
    auto_followup: bool
    followup_delay_hours: int
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
