"""
Adapters package - Concrete implementations of the domain interfaces:
payment gateways, notification senders and event log sinks.
"""

from adapters import payment_gateways, notification_channels, event_loggers

__all__ = [
    "payment_gateways",
    "notification_channels",
    "event_loggers",
]
