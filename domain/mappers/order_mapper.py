"""
Order domain mappers.
Handles transformation between ORM models and payment DTOs.
"""

from domain.models import Order
from domain.schemas.payment_schemas import PaymentReceipt


class OrderMapper:
    """Mapper for order-related transformations."""

    @staticmethod
    def to_receipt(order: Order) -> PaymentReceipt:
        """
        Convert a settled Order into the receipt returned by the payments endpoint.

        Args:
            order: Order in PAID status

        Returns:
            PaymentReceipt DTO
        """
        return PaymentReceipt(
            order_id=order.order_id,
            status=order.status,
            gateway=order.gateway,
            transaction_id=order.transaction_id,
            amount=order.amount,
            currency=order.currency,
            paid_at=order.paid_at,
        )
