"""
Order database model.
"""

from sqlalchemy import (
    Column,
    String,
    ForeignKey,
    Uuid,
    Enum as SQLEnum,
    Numeric,
    CheckConstraint,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid

from domain.models.database import Base
from domain.models.types import UTCDateTime
from domain.enums import OrderStatus


class Order(Base):
    """A single payable order"""

    __tablename__ = "customer_order"
    __table_args__ = (CheckConstraint("amount > 0", name="ck_order_amount_positive"),)

    order_id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(
        Uuid,
        ForeignKey("app_user.user_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    amount = Column(Numeric(10, 2), nullable=False)
    currency = Column(String(3), nullable=False)
    status = Column(SQLEnum(OrderStatus), nullable=False, default=OrderStatus.PENDING)
    gateway = Column(String(64))
    transaction_id = Column(String(128))
    created_at = Column(UTCDateTime, server_default=func.now())
    paid_at = Column(UTCDateTime)

    # Relationships
    user = relationship("User", back_populates="orders")
