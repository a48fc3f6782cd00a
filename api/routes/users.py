"""User management routes"""

from fastapi import APIRouter, Depends, status
import logging
from uuid import UUID
from typing import List

from api.dependencies import get_notification_service, get_order_service, get_user_service
from api.responses import ERROR_RESPONSES
from domain.schemas import (
    UserCreate,
    UserResponse,
    OrderResponse,
    NotificationRequest,
    NotificationResponse,
)
from services import NotificationService, OrderService, UserService

router = APIRouter(prefix="/users", tags=["Users"], responses=ERROR_RESPONSES)
logger = logging.getLogger("solidshop.api.users")


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register_user(payload: UserCreate, service: UserService = Depends(get_user_service)):
    """Register a user; the service stores it and sends the welcome e-mail."""
    return service.register(payload.email, payload.full_name, payload.phone)


@router.get("", response_model=List[UserResponse])
def list_users(service: UserService = Depends(get_user_service)):
    return service.list()


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: UUID, service: UserService = Depends(get_user_service)):
    return service.get(user_id)


@router.delete("/{user_id}")
def delete_user(user_id: UUID, service: UserService = Depends(get_user_service)):
    """Delete a user and all their orders."""
    service.delete(user_id)
    return {"status": "ok", "deleted": str(user_id)}


@router.get("/{user_id}/orders", response_model=List[OrderResponse])
def list_user_orders(user_id: UUID, orders: OrderService = Depends(get_order_service)):
    """Orders of a user, newest first."""
    return orders.list_for_user(user_id)


@router.post("/{user_id}/notifications", response_model=NotificationResponse)
def notify_user(
    user_id: UUID,
    payload: NotificationRequest,
    users: UserService = Depends(get_user_service),
    notifications: NotificationService = Depends(get_notification_service),
):
    """Send a message to a user on every channel they can be reached on."""
    user = users.get(user_id)
    channels = notifications.notify(
        notifications.target_for(user), payload.subject, payload.message
    )
    return NotificationResponse(channels=channels)
