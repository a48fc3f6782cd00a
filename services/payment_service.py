from uuid import UUID
import logging

from domain.enums import OrderStatus
from domain.interfaces import EventLogger, OrderRepository, PaymentGateway
from domain.models import Order
from app.exceptions import (
    ConflictError,
    NotFoundError,
    PaymentDeclinedError,
    ServiceValidationError,
)

logger = logging.getLogger("solidshop.payments")


class PaymentService:
    """
    Settles orders through whichever gateway it was constructed with.

    The service never inspects which gateway it holds; supporting another
    processor means registering another ``PaymentGateway``.
    """

    def __init__(self, gateway: PaymentGateway, orders: OrderRepository, events: EventLogger):
        self.gateway = gateway
        self.orders = orders
        self.events = events

    def pay(self, order_id: UUID) -> Order:
        """
        Charge a pending order.

        Returns:
            The order in PAID status with gateway and transaction id set

        Raises:
            NotFoundError: unknown order
            ConflictError: order is not pending, or another request is already paying it
            ServiceValidationError: gateway cannot take the order currency
            PaymentDeclinedError: gateway refused; the order is marked FAILED
        """
        order = self.orders.get(order_id)
        if order is None:
            raise NotFoundError(f"Order {order_id} not found")
        if order.status != OrderStatus.PENDING:
            raise ConflictError(
                f"Order {order_id} is {order.status.value}, only pending orders can be paid",
                code="ORDER_NOT_PENDING",
            )
        if not self.gateway.supports(order.currency):
            raise ServiceValidationError(
                f"Gateway {self.gateway.name} does not support {order.currency}",
                details={"gateway": self.gateway.name, "currency": order.currency},
                code="CURRENCY_NOT_SUPPORTED",
            )

        try:
            # Claim first: of two concurrent payers only one gets past here
            self.orders.update_status(
                order_id, OrderStatus.PROCESSING, expected=OrderStatus.PENDING
            )
        except ConflictError as exc:
            raise ConflictError(
                f"Order {order_id} is already being paid or settled",
                details=exc.details,
                code="ORDER_NOT_PENDING",
            ) from exc

        try:
            result = self.gateway.charge(order.amount, order.currency, reference=str(order_id))
        except PaymentDeclinedError as exc:
            self.orders.update_status(
                order_id,
                OrderStatus.FAILED,
                gateway=self.gateway.name,
                expected=OrderStatus.PROCESSING,
            )
            self.events.log(
                "payment_declined",
                order_id=order_id,
                gateway=self.gateway.name,
                reason=exc.code,
            )
            logger.warning(
                f"payment_declined order_id={order_id} gateway={self.gateway.name} reason={exc.code}"
            )
            raise
        except Exception:
            # Nothing was captured; release the claim so the order can be paid again
            self.orders.update_status(
                order_id, OrderStatus.PENDING, expected=OrderStatus.PROCESSING
            )
            logger.exception(f"payment_error order_id={order_id} gateway={self.gateway.name}")
            raise

        paid = self.orders.update_status(
            order_id,
            OrderStatus.PAID,
            gateway=result.gateway,
            transaction_id=result.transaction_id,
            expected=OrderStatus.PROCESSING,
        )
        self.events.log(
            "payment_captured",
            order_id=order_id,
            gateway=result.gateway,
            transaction_id=result.transaction_id,
            amount=result.amount,
            currency=result.currency,
        )
        logger.info(
            f"payment_captured order_id={order_id} gateway={result.gateway} "
            f"transaction_id={result.transaction_id}"
        )
        return paid
