"""Pydantic schemas for the interaction log."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, field_validator
from app.models.interaction import InteractionType, InteractionStatus


class InteractionCreate(BaseModel):
    lead_id: str = Field(..., min_length=1)
    campaign_id: Optional[str] = None
    type: InteractionType
    status: InteractionStatus = InteractionStatus.PENDING
    content: Optional[str] = None
    response: Optional[str] = None
    duration: Optional[int] = Field(None, ge=0, description="Call length in seconds")

    @field_validator("campaign_id", "content", "response", mode="before")
    @classmethod
    def empty_is_none(cls, v):
        # An interaction without a campaign was a manual contact
        if isinstance(v, str) and not v.strip():
            return None
        return v


class InteractionOut(BaseModel):
    id: str
    user_id: str
    lead_id: str
    campaign_id: Optional[str] = None
    type: InteractionType
    status: InteractionStatus
    content: Optional[str] = None
    response: Optional[str] = None
    duration: Optional[int] = None
    created_at: datetime

    class Config:
        from_attributes = True


class InteractionRow(InteractionOut):
    lead_name: str
    campaign_name: str
    duration_display: str


class InteractionTotals(BaseModel):
    total: int
    completed: int
    pending: int
    failed: int
    calls: int
    whatsapp: int
    email: int
    completed_calls: int


class InteractionListOut(BaseModel):
    interactions: list[InteractionRow]
    totals: InteractionTotals
    degraded: bool = False


class InteractionMutationOut(BaseModel):
    record: Optional[InteractionOut] = None
    view: InteractionListOut
