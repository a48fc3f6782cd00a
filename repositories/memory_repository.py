"""
In-memory repositories.

Drop-in replacements for the SQL repositories: same entity types, same
None-vs-error semantics, same ordering. Used by the ``memory`` storage
backend and by tests.
"""

import threading
from typing import Dict, List, Optional
from uuid import UUID, uuid4
from decimal import Decimal
from datetime import datetime, timezone

from domain.enums import OrderStatus
from domain.interfaces import OrderRepository, UserRepository
from domain.models import Order, User
from app.exceptions import ConflictError, NotFoundError


class InMemoryStore:
    """Shared state for the in-memory repositories, so deleting a user can cascade to orders"""

    def __init__(self):
        self.users: Dict[UUID, User] = {}
        self.orders: Dict[UUID, Order] = {}
        self.lock = threading.RLock()

    def clear(self) -> None:
        with self.lock:
            self.users.clear()
            self.orders.clear()


class InMemoryUserRepository(UserRepository):
    def __init__(self, store: Optional[InMemoryStore] = None):
        self.store = store or InMemoryStore()

    def add(self, email: str, full_name: Optional[str] = None, phone: Optional[str] = None) -> User:
        email = email.strip().lower()
        with self.store.lock:
            if self.get_by_email(email) is not None:
                raise ConflictError(
                    f"User with email {email} already exists", code="EMAIL_TAKEN"
                )
            user = User(
                user_id=uuid4(),
                email=email,
                full_name=full_name,
                phone=phone,
                created_at=datetime.now(timezone.utc),
            )
            self.store.users[user.user_id] = user
            return user

    def get(self, user_id: UUID) -> Optional[User]:
        return self.store.users.get(user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        wanted = email.strip().lower()
        with self.store.lock:
            for user in self.store.users.values():
                if user.email.lower() == wanted:
                    return user
        return None

    def list(self) -> List[User]:
        with self.store.lock:
            # dicts keep insertion order, which is creation order
            return list(self.store.users.values())

    def remove(self, user_id: UUID) -> bool:
        with self.store.lock:
            if self.store.users.pop(user_id, None) is None:
                return False
            for order_id in [
                o.order_id for o in self.store.orders.values() if o.user_id == user_id
            ]:
                del self.store.orders[order_id]
            return True


class InMemoryOrderRepository(OrderRepository):
    def __init__(self, store: Optional[InMemoryStore] = None):
        self.store = store or InMemoryStore()

    def add(self, user_id: UUID, amount: Decimal, currency: str) -> Order:
        order = Order(
            order_id=uuid4(),
            user_id=user_id,
            amount=Decimal(amount).quantize(Decimal("0.01")),
            currency=currency,
            status=OrderStatus.PENDING,
            created_at=datetime.now(timezone.utc),
        )
        with self.store.lock:
            self.store.orders[order.order_id] = order
        return order

    def get(self, order_id: UUID) -> Optional[Order]:
        return self.store.orders.get(order_id)

    def list_for_user(self, user_id: UUID) -> List[Order]:
        with self.store.lock:
            orders = [o for o in self.store.orders.values() if o.user_id == user_id]
        return list(reversed(orders))

    def update_status(
        self,
        order_id: UUID,
        status: OrderStatus,
        gateway: Optional[str] = None,
        transaction_id: Optional[str] = None,
        expected: Optional[OrderStatus] = None,
    ) -> Order:
        with self.store.lock:
            order = self.store.orders.get(order_id)
            if order is None:
                raise NotFoundError(f"Order {order_id} not found")
            if expected is not None and order.status != expected:
                raise ConflictError(
                    f"Order {order_id} is {order.status.value}, expected {expected.value}",
                    details={"status": order.status.value, "expected": expected.value},
                    code="STATUS_CONFLICT",
                )
            order.status = status
            if gateway is not None:
                order.gateway = gateway
            if transaction_id is not None:
                order.transaction_id = transaction_id
            if status == OrderStatus.PAID:
                order.paid_at = datetime.now(timezone.utc)
            return order
