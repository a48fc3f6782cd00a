"""
Storage contracts for users and orders.

Every implementation must behave the same way from the caller's side:
lookups of unknown ids return ``None``, writes against unknown ids raise
``NotFoundError``, duplicate e-mails and lost status races raise
``ConflictError``. Nothing else escapes.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from domain.enums import OrderStatus
from domain.models import Order, User


class UserRepository(ABC):
    """Persistence of user accounts"""

    @abstractmethod
    def add(self, email: str, full_name: Optional[str] = None, phone: Optional[str] = None) -> User:
        """Store a new user. Raises ConflictError if the e-mail is taken (case-insensitive)."""

    @abstractmethod
    def get(self, user_id: UUID) -> Optional[User]:
        """Return the user or None"""

    @abstractmethod
    def get_by_email(self, email: str) -> Optional[User]:
        """Return the user owning ``email`` (case-insensitive) or None"""

    @abstractmethod
    def list(self) -> List[User]:
        """All users, oldest first"""

    @abstractmethod
    def remove(self, user_id: UUID) -> bool:
        """Delete the user and their orders. Returns False when nothing was deleted."""


class OrderRepository(ABC):
    """Persistence of orders"""

    @abstractmethod
    def add(self, user_id: UUID, amount: Decimal, currency: str) -> Order:
        """Store a new pending order"""

    @abstractmethod
    def get(self, order_id: UUID) -> Optional[Order]:
        """Return the order or None"""

    @abstractmethod
    def list_for_user(self, user_id: UUID) -> List[Order]:
        """Orders of one user, newest first"""

    @abstractmethod
    def update_status(
        self,
        order_id: UUID,
        status: OrderStatus,
        gateway: Optional[str] = None,
        transaction_id: Optional[str] = None,
        expected: Optional[OrderStatus] = None,
    ) -> Order:
        """
        Move an order to ``status``.

        ``paid_at`` is stamped when the new status is PAID. With ``expected``
        the move only happens if the order is currently in that status; the
        check and the write are one atomic step, so concurrent callers
        cannot both win.

        Raises:
            NotFoundError: unknown order id
            ConflictError: ``expected`` given and the order is in another status
        """
