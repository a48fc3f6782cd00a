"""
User database model.
"""

from sqlalchemy import Column, Text, String, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid

from domain.models.database import Base
from domain.models.types import UTCDateTime


class User(Base):
    """Customer account; also the source of a notification target"""

    __tablename__ = "app_user"

    user_id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    email = Column(String(320), unique=True, nullable=False)
    full_name = Column(Text)
    phone = Column(String(32))
    created_at = Column(UTCDateTime, server_default=func.now())

    # Relationships
    orders = relationship(
        "Order", back_populates="user", cascade="all, delete-orphan"
    )
