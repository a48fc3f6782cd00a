"""Services package - Business logic layer"""

from services.user_service import UserService
from services.order_service import OrderService
from services.payment_service import PaymentService
from services.notification_service import NotificationService

__all__ = [
    "UserService",
    "OrderService",
    "PaymentService",
    "NotificationService",
]
