from typing import List, Optional
import logging

from domain.enums import NotificationChannel
from domain.interfaces import EmailSender, EventLogger, SmsSender
from domain.models import User
from domain.schemas.notification_schemas import NotificationTarget
from app.exceptions import ServiceValidationError

logger = logging.getLogger("solidshop.notifications")


class NotificationService:
    """Fans a message out to every channel a target can be reached on"""

    def __init__(
        self,
        email: EmailSender,
        sms: Optional[SmsSender],
        events: EventLogger,
    ):
        self.email = email
        self.sms = sms
        self.events = events

    @staticmethod
    def target_for(user: User) -> NotificationTarget:
        return NotificationTarget(name=user.full_name, email=user.email, phone=user.phone)

    def notify(self, target: NotificationTarget, subject: str, message: str) -> List[NotificationChannel]:
        """
        Deliver ``message`` to the target.

        E-mail is used when the target has an address; SMS when it has a
        phone number and an SMS sender is bound.

        Raises:
            ServiceValidationError: no channel could reach the target
        """
        channels: List[NotificationChannel] = []

        if target.email:
            self.email.send_email(to=target.email, subject=subject, body=message)
            channels.append(NotificationChannel.EMAIL)

        if target.phone and self.sms is not None:
            self.sms.send_sms(to=target.phone, message=f"{subject}: {message}")
            channels.append(NotificationChannel.SMS)

        if not channels:
            raise ServiceValidationError(
                "Target has no reachable notification channel",
                code="NO_CHANNEL",
            )

        self.events.log(
            "notification_sent",
            recipient=target.email or target.phone,
            channels=[c.value for c in channels],
        )
        logger.info(f"notification_sent channels={[c.value for c in channels]}")
        return channels
