"""
Domain models package - SQLAlchemy ORM models.
"""

from domain.models.database import (
    Base,
    create_db_engine,
    create_session_factory,
    init_database,
)
from domain.models.types import UTCDateTime
from domain.models.user import User
from domain.models.order import Order

__all__ = [
    # Database
    "Base",
    "create_db_engine",
    "create_session_factory",
    "init_database",
    "UTCDateTime",
    # Entities
    "User",
    "Order",
]
