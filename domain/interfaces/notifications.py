"""
Notification contracts, one per capability.

A provider that can only send SMS implements ``SmsSender`` and nothing else.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class EmailSender(Protocol):
    def send_email(self, to: str, subject: str, body: str) -> None:
        ...


@runtime_checkable
class SmsSender(Protocol):
    def send_sms(self, to: str, message: str) -> None:
        ...
