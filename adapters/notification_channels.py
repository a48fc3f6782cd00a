"""
Notification senders.

Each class implements exactly one of ``EmailSender`` / ``SmsSender``. The
outbox senders record messages for inspection; the log senders only write
to the application log. No message leaves the process.
"""

import logging
import threading
from collections import deque
from datetime import datetime, timezone
from typing import Deque, List, Optional

from domain.enums import NotificationChannel
from domain.schemas.notification_schemas import OutboundMessage

logger = logging.getLogger("solidshop.notifications")


class Outbox:
    """Thread-safe record of delivered messages, keeping only the most recent ``max_messages``"""

    def __init__(self, max_messages: int = 1000):
        self._messages: Deque[OutboundMessage] = deque(maxlen=max_messages)
        self._lock = threading.Lock()

    def append(self, message: OutboundMessage) -> None:
        with self._lock:
            self._messages.append(message)

    def messages(self, channel: Optional[NotificationChannel] = None) -> List[OutboundMessage]:
        with self._lock:
            if channel is None:
                return list(self._messages)
            return [m for m in self._messages if m.channel == channel]

    def clear(self) -> None:
        with self._lock:
            self._messages.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._messages)


class OutboxEmailSender:
    def __init__(self, outbox: Outbox, sender: str):
        self.outbox = outbox
        self.sender = sender

    def send_email(self, to: str, subject: str, body: str) -> None:
        self.outbox.append(
            OutboundMessage(
                channel=NotificationChannel.EMAIL,
                recipient=to,
                subject=subject,
                body=body,
                sent_at=datetime.now(timezone.utc),
            )
        )
        logger.info(f"email_queued from={self.sender} to={to} subject={subject!r}")


class LogEmailSender:
    def __init__(self, sender: str):
        self.sender = sender

    def send_email(self, to: str, subject: str, body: str) -> None:
        logger.info(
            f"email_logged from={self.sender} to={to} subject={subject!r} chars={len(body)}"
        )


class OutboxSmsSender:
    def __init__(self, outbox: Outbox):
        self.outbox = outbox

    def send_sms(self, to: str, message: str) -> None:
        self.outbox.append(
            OutboundMessage(
                channel=NotificationChannel.SMS,
                recipient=to,
                body=message,
                sent_at=datetime.now(timezone.utc),
            )
        )
        logger.info(f"sms_queued to={to}")


class LogSmsSender:
    def send_sms(self, to: str, message: str) -> None:
        logger.info(f"sms_logged to={to} chars={len(message)}")
