"""Notification outbox inspection"""

from fastapi import APIRouter, Depends, Query
import logging
from typing import List, Optional

from api.dependencies import get_container
from app.container import Container
from domain.enums import NotificationChannel
from domain.schemas import OutboundMessage

router = APIRouter(prefix="/notifications", tags=["Notifications"])
logger = logging.getLogger("solidshop.api.notifications")


@router.get("/outbox", response_model=List[OutboundMessage])
def list_outbox(
    channel: Optional[NotificationChannel] = Query(None),
    container: Container = Depends(get_container),
):
    """Messages recorded by the outbox senders, oldest first."""
    return container.outbox.messages(channel)
