"""Pydantic schemas for businesses."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, EmailStr, Field, field_validator


def _blank_to_none(v):
    if isinstance(v, str) and not v.strip():
        return None
    return v


class BusinessCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    service_type: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    phone: Optional[str] = Field(None, max_length=50)
    email: Optional[EmailStr] = None

    @field_validator("name", "service_type")
    @classmethod
    def not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v

    @field_validator("description", "phone", "email", mode="before")
    @classmethod
    def empty_is_none(cls, v):
        return _blank_to_none(v)


class BusinessUpdate(BaseModel):
    """Schema for updating business details. Omitted fields are left as they are."""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    service_type: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    phone: Optional[str] = Field(None, max_length=50)
    email: Optional[EmailStr] = None

    @field_validator("name", "service_type")
    @classmethod
    def not_blank(cls, v: Optional[str]) -> str:
        # Only an explicit null reaches here as None; omitted fields skip validation
        if v is None:
            raise ValueError("may not be null")
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v

    @field_validator("description", "phone", "email", mode="before")
    @classmethod
    def empty_is_none(cls, v):
        return _blank_to_none(v)


class BusinessOut(BaseModel):
    id: str
    user_id: str
    name: str
    service_type: str
    description: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class BusinessListOut(BaseModel):
    businesses: list[BusinessOut]
    service_types: list[str]
    degraded: bool = False


class BusinessMutationOut(BaseModel):
    record: Optional[BusinessOut] = None
    view: BusinessListOut
