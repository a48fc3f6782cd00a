from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from domain.enums import OrderStatus


class OrderCreate(BaseModel):
    """Schema for placing a new order"""

    user_id: UUID
    amount: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    currency: Optional[str] = Field(
        None,
        min_length=3,
        max_length=3,
        description="ISO-4217 code; falls back to the configured default currency",
    )

    @field_validator("currency")
    @classmethod
    def upper_currency(cls, v):
        if v is None:
            return v
        if not v.isalpha():
            raise ValueError("currency must be a three letter ISO-4217 code")
        return v.upper()


class OrderResponse(BaseModel):
    order_id: UUID
    user_id: UUID
    amount: Decimal
    currency: str
    status: OrderStatus
    gateway: Optional[str] = None
    transaction_id: Optional[str] = None
    created_at: Optional[datetime] = None
    paid_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
