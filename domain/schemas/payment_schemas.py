from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from domain.enums import OrderStatus


class ChargeResult(BaseModel):
    """What every payment gateway returns for a captured charge"""

    transaction_id: str
    gateway: str
    amount: Decimal
    currency: str
    captured_at: datetime

    model_config = {"frozen": True}


class PaymentRequest(BaseModel):
    gateway: Optional[str] = Field(
        None, description="Gateway name; the configured default is used when omitted"
    )


class PaymentReceipt(BaseModel):
    order_id: UUID
    status: OrderStatus
    gateway: str
    transaction_id: str
    amount: Decimal
    currency: str
    paid_at: Optional[datetime] = None


class GatewayInfo(BaseModel):
    name: str
    supported_currencies: List[str]
    default: bool = False
