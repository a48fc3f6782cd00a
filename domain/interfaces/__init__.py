"""
Domain interfaces (ports).

Services depend on these contracts; concrete implementations live in
``repositories`` and ``adapters`` and are bound in ``app.container``.
"""

from domain.interfaces.storage import UserRepository, OrderRepository
from domain.interfaces.payments import PaymentGateway
from domain.interfaces.notifications import EmailSender, SmsSender
from domain.interfaces.events import EventLogger

__all__ = [
    "UserRepository",
    "OrderRepository",
    "PaymentGateway",
    "EmailSender",
    "SmsSender",
    "EventLogger",
]
