"""API routes package"""

from . import users, orders, notifications, health

__all__ = ["users", "orders", "notifications", "health"]
