"""
Order Repository - SQL data access for orders
"""

from typing import List, Optional
from uuid import UUID, uuid4
from decimal import Decimal
from datetime import datetime, timezone
from sqlalchemy import update
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.enums import OrderStatus
from domain.interfaces import OrderRepository
from domain.models import Order
from app.exceptions import ConflictError, NotFoundError


class SqlOrderRepository(BaseRepository[Order], OrderRepository):
    """OrderRepository backed by a SQLAlchemy session"""

    id_field = "order_id"

    def __init__(self, db: Session):
        super().__init__(db, Order)

    def add(self, user_id: UUID, amount: Decimal, currency: str) -> Order:
        order = Order(
            order_id=uuid4(),
            user_id=user_id,
            amount=amount,
            currency=currency,
            status=OrderStatus.PENDING,
            created_at=datetime.now(timezone.utc),
        )
        return self.create(order)

    def get(self, order_id: UUID) -> Optional[Order]:
        return self.get_by_id(order_id)

    def list_for_user(self, user_id: UUID) -> List[Order]:
        return (
            self.db.query(Order)
            .filter(Order.user_id == user_id)
            .order_by(Order.created_at.desc())
            .all()
        )

    def update_status(
        self,
        order_id: UUID,
        status: OrderStatus,
        gateway: Optional[str] = None,
        transaction_id: Optional[str] = None,
        expected: Optional[OrderStatus] = None,
    ) -> Order:
        values = {"status": status}
        if gateway is not None:
            values["gateway"] = gateway
        if transaction_id is not None:
            values["transaction_id"] = transaction_id
        if status == OrderStatus.PAID:
            values["paid_at"] = datetime.now(timezone.utc)

        # Single UPDATE ... WHERE so the status check and the write cannot interleave
        stmt = update(Order).where(Order.order_id == order_id)
        if expected is not None:
            stmt = stmt.where(Order.status == expected)
        result = self.db.execute(
            stmt.values(**values).execution_options(synchronize_session=False)
        )
        self.db.commit()

        order = self.get_by_id(order_id)
        if order is None:
            raise NotFoundError(f"Order {order_id} not found")
        if result.rowcount == 0:
            raise ConflictError(
                f"Order {order_id} is {order.status.value}, expected {expected.value}",
                details={"status": order.status.value, "expected": expected.value},
                code="STATUS_CONFLICT",
            )
        return order
