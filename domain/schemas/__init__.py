"""
Domain schemas package - Pydantic models for validation and value objects.
"""

from domain.schemas.user_schemas import UserCreate, UserResponse
from domain.schemas.order_schemas import OrderCreate, OrderResponse
from domain.schemas.payment_schemas import (
    ChargeResult,
    PaymentRequest,
    PaymentReceipt,
    GatewayInfo,
)
from domain.schemas.notification_schemas import (
    NotificationTarget,
    OutboundMessage,
    NotificationRequest,
    NotificationResponse,
)

__all__ = [
    # User schemas
    "UserCreate",
    "UserResponse",
    # Order schemas
    "OrderCreate",
    "OrderResponse",
    # Payment schemas
    "ChargeResult",
    "PaymentRequest",
    "PaymentReceipt",
    "GatewayInfo",
    # Notification schemas
    "NotificationTarget",
    "OutboundMessage",
    "NotificationRequest",
    "NotificationResponse",
]
