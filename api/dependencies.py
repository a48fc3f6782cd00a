"""
API dependencies for dependency injection.

Handlers ask for services; the container on ``app.state`` decides which
implementations back them.
"""

from typing import Generator, Optional

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from app.container import Container
from domain.schemas import PaymentRequest
from services import NotificationService, OrderService, PaymentService, UserService


def get_container(request: Request) -> Container:
    """
    Container dependency.

    Usage:
        @router.get("/example")
        def example(container: Container = Depends(get_container)):
            ...
    """
    return request.app.state.container


def get_db_session(
    container: Container = Depends(get_container),
) -> Generator[Optional[Session], None, None]:
    """Session from the container's engine; None when memory storage is bound"""
    if container.session_factory is None:
        yield None
        return
    db = container.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_user_service(
    container: Container = Depends(get_container),
    db: Session = Depends(get_db_session),
) -> UserService:
    return container.user_service(db)


def get_order_service(
    container: Container = Depends(get_container),
    db: Session = Depends(get_db_session),
) -> OrderService:
    return container.order_service(db)


def get_payment_service(
    payload: Optional[PaymentRequest] = None,
    container: Container = Depends(get_container),
    db: Session = Depends(get_db_session),
) -> PaymentService:
    """Payment service bound to the gateway named in the body, or the default one"""
    gateway_name = payload.gateway if payload else None
    return container.payment_service(db, gateway_name=gateway_name)


def get_notification_service(
    container: Container = Depends(get_container),
) -> NotificationService:
    return container.notification_service()
