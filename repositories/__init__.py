"""
Repositories package - Data access layer.
SQL and in-memory implementations of the storage contracts in ``domain.interfaces``.
"""

from repositories.base import BaseRepository
from repositories.user_repository import SqlUserRepository
from repositories.order_repository import SqlOrderRepository
from repositories.memory_repository import (
    InMemoryStore,
    InMemoryUserRepository,
    InMemoryOrderRepository,
)

__all__ = [
    "BaseRepository",
    "SqlUserRepository",
    "SqlOrderRepository",
    "InMemoryStore",
    "InMemoryUserRepository",
    "InMemoryOrderRepository",
]
