"""Event logging contract used by every service."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class EventLogger(Protocol):
    def log(self, event: str, **fields: Any) -> None:
        """Record a business event with structured fields"""
        ...
