"""
Domain enums for SolidShop application.
Contains all enumeration types used across the domain models.
"""

import enum


class OrderStatus(str, enum.Enum):
    """Lifecycle of an order"""

    PENDING = "pending"
    PROCESSING = "processing"
    PAID = "paid"
    FAILED = "failed"


class NotificationChannel(str, enum.Enum):
    """Delivery channels a notification can go out on"""

    EMAIL = "email"
    SMS = "sms"
