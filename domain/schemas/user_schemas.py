from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Optional
from datetime import datetime
from uuid import UUID


class UserCreate(BaseModel):
    """Registration payload. Validation lives here, not in the handler or service."""

    email: EmailStr
    full_name: Optional[str] = Field(None, max_length=200)
    phone: Optional[str] = Field(
        None, description="E.164 style number, e.g. +15551234567"
    )

    @field_validator("full_name")
    @classmethod
    def strip_name(cls, v):
        if v is None:
            return v
        v = v.strip()
        return v or None

    @field_validator("phone")
    @classmethod
    def normalize_phone(cls, v):
        if v is None:
            return v
        digits = "".join(ch for ch in v if ch.isdigit())
        if not 7 <= len(digits) <= 15:
            raise ValueError("phone must contain between 7 and 15 digits")
        return f"+{digits}"


class UserResponse(BaseModel):
    user_id: UUID
    email: str
    full_name: Optional[str] = None
    phone: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
