from typing import List, Optional
from uuid import UUID
from decimal import Decimal, InvalidOperation
import logging

from domain.interfaces import EventLogger, OrderRepository, UserRepository
from domain.models import Order
from app.exceptions import NotFoundError, ServiceValidationError

logger = logging.getLogger("solidshop.orders")

CENT = Decimal("0.01")


class OrderService:
    def __init__(
        self,
        orders: OrderRepository,
        users: UserRepository,
        events: EventLogger,
        default_currency: str = "USD",
    ):
        self.orders = orders
        self.users = users
        self.events = events
        self.default_currency = default_currency

    def place(self, user_id: UUID, amount, currency: Optional[str] = None) -> Order:
        """
        Place a pending order for an existing user.

        Raises:
            NotFoundError: unknown user
            ServiceValidationError: amount not positive or currency malformed
        """
        if self.users.get(user_id) is None:
            raise NotFoundError(f"User {user_id} not found")

        try:
            amount = Decimal(str(amount)).quantize(CENT)
        except InvalidOperation:
            raise ServiceValidationError(f"Invalid amount {amount!r}")
        if not amount.is_finite():
            raise ServiceValidationError(f"Invalid amount {amount!r}")
        if amount <= 0:
            raise ServiceValidationError(
                "Amount must be greater than 0", details={"amount": str(amount)}
            )

        currency = (currency or self.default_currency).strip().upper()
        if len(currency) != 3 or not currency.isalpha():
            raise ServiceValidationError(
                f"Invalid currency {currency!r}", code="INVALID_CURRENCY"
            )

        order = self.orders.add(user_id=user_id, amount=amount, currency=currency)
        self.events.log(
            "order_placed",
            order_id=order.order_id,
            user_id=user_id,
            amount=amount,
            currency=currency,
        )
        logger.info(f"order_placed order_id={order.order_id} user_id={user_id}")
        return order

    def get(self, order_id: UUID) -> Order:
        order = self.orders.get(order_id)
        if order is None:
            raise NotFoundError(f"Order {order_id} not found")
        return order

    def list_for_user(self, user_id: UUID) -> List[Order]:
        if self.users.get(user_id) is None:
            raise NotFoundError(f"User {user_id} not found")
        return self.orders.list_for_user(user_id)
