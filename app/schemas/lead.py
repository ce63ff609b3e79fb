"""Pydantic schemas for Leads."""

from datetime import datetime
from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Optional
from app.models.lead import LeadStatus


class LeadCreate(BaseModel):
    """Schema for creating a lead."""
    business_id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=255)
    phone: str = Field(..., min_length=1, max_length=50)
    email: Optional[EmailStr] = None
    source: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("name", "phone")
    @classmethod
    def not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v

    @field_validator("email", "source", "notes", mode="before")
    @classmethod
    def empty_is_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


class LeadUpdate(BaseModel):
    """Schema for editing lead details."""
    business_id: Optional[str] = None
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    phone: Optional[str] = Field(None, min_length=1, max_length=50)
    email: Optional[EmailStr] = None
    status: Optional[LeadStatus] = None
    source: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("status")
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError("may not be null")
        return v

    @field_validator("business_id", "name", "phone")
    @classmethod
    def not_blank(cls, v: Optional[str]) -> str:
        if v is None:
            raise ValueError("may not be null")
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v

    @field_validator("email", "source", "notes", mode="before")
    @classmethod
    def empty_is_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


class LeadStatusUpdate(BaseModel):
    """Schema for updating lead status."""
    status: LeadStatus


class LeadOut(BaseModel):
    """Schema for returning lead details."""
    id: str
    user_id: str
    business_id: str
    name: str
    phone: str
    email: Optional[str] = None
    status: LeadStatus
    source: Optional[str] = None
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class LeadRow(LeadOut):
    """Lead as shown in the list, with display extras."""
    business_name: str
    badge_color: str


class LeadListOut(BaseModel):
    leads: list[LeadRow]
    status_counts: dict[str, int]
    total: int
    degraded: bool = False


class LeadMutationOut(BaseModel):
    """Result of a change plus the reloaded lead list."""
    record: Optional[LeadOut] = None
    view: LeadListOut
