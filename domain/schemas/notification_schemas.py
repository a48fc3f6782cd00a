from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime

from domain.enums import NotificationChannel


class NotificationTarget(BaseModel):
    """Where a notification can be delivered. Never persisted."""

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None

    model_config = {"frozen": True}


class OutboundMessage(BaseModel):
    channel: NotificationChannel
    recipient: str
    subject: Optional[str] = None
    body: str
    sent_at: datetime

    model_config = {"frozen": True}


class NotificationRequest(BaseModel):
    subject: str = Field(..., min_length=1, max_length=200)
    message: str = Field(..., min_length=1, max_length=2000)


class NotificationResponse(BaseModel):
    channels: List[NotificationChannel]
