"""Pydantic schemas for campaigns."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, field_validator
from app.models.campaign import CampaignStatus, DEFAULT_CAMPAIGN_SCRIPT
from app.utils.dates import to_naive_utc


class CampaignCreate(BaseModel):
    business_id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=255)
    script: str = DEFAULT_CAMPAIGN_SCRIPT
    scheduled_at: Optional[datetime] = None

    @field_validator("name", "script")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v

    @field_validator("scheduled_at", mode="before")
    @classmethod
    def empty_is_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("scheduled_at")
    @classmethod
    def normalize_tz(cls, v: Optional[datetime]) -> Optional[datetime]:
        return to_naive_utc(v) if v else v


class CampaignUpdate(BaseModel):
    """Free-form edit. Any valid status is accepted here; the guided
    start/pause/resume/complete actions enforce the lifecycle."""
    business_id: Optional[str] = None
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    script: Optional[str] = Field(None, min_length=1)
    status: Optional[CampaignStatus] = None
    scheduled_at: Optional[datetime] = None

    @field_validator("status")
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError("may not be null")
        return v

    @field_validator("business_id", "name", "script")
    @classmethod
    def not_blank(cls, v: Optional[str]) -> str:
        if v is None:
            raise ValueError("may not be null")
        if not v.strip():
            raise ValueError("must not be blank")
        return v

    @field_validator("scheduled_at", mode="before")
    @classmethod
    def empty_is_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("scheduled_at")
    @classmethod
    def normalize_tz(cls, v: Optional[datetime]) -> Optional[datetime]:
        return to_naive_utc(v) if v else v


class CampaignOut(BaseModel):
    id: str
    user_id: str
    business_id: str
    name: str
    script: str
    status: CampaignStatus
    scheduled_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class CampaignRow(CampaignOut):
    business_name: str
    lead_count: int
    success_rate: int
    badge_color: str
    actions: list[str] = []


class CampaignSummary(BaseModel):
    total: int
    active: int
    draft: int
    total_leads: int
    success_rate: int


class CampaignListOut(BaseModel):
    campaigns: list[CampaignRow]
    summary: CampaignSummary
    degraded: bool = False


class CampaignMutationOut(BaseModel):
    record: Optional[CampaignOut] = None
    view: CampaignListOut
