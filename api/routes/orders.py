"""Order and payment routes"""

from fastapi import APIRouter, Depends, status
import logging
from uuid import UUID
from typing import List

from api.dependencies import get_container, get_order_service, get_payment_service
from api.responses import ERROR_RESPONSES, ErrorResponse
from app.container import Container
from domain.mappers import OrderMapper
from domain.schemas import (
    OrderCreate,
    OrderResponse,
    PaymentReceipt,
    GatewayInfo,
)
from services import OrderService, PaymentService

router = APIRouter(tags=["Orders"], responses=ERROR_RESPONSES)
logger = logging.getLogger("solidshop.api.orders")


@router.post("/orders", response_model=OrderResponse, status_code=status.HTTP_201_CREATED)
def place_order(payload: OrderCreate, service: OrderService = Depends(get_order_service)):
    return service.place(payload.user_id, payload.amount, payload.currency)


@router.get("/orders/{order_id}", response_model=OrderResponse)
def get_order(order_id: UUID, service: OrderService = Depends(get_order_service)):
    return service.get(order_id)


@router.post(
    "/orders/{order_id}/payments",
    response_model=PaymentReceipt,
    responses={402: {"model": ErrorResponse, "description": "Payment declined"}},
)
def pay_order(
    order_id: UUID,
    service: PaymentService = Depends(get_payment_service),
):
    """Charge a pending order through the requested (or default) gateway."""
    order = service.pay(order_id)
    return OrderMapper.to_receipt(order)


@router.get("/payments/gateways", response_model=List[GatewayInfo])
def list_gateways(container: Container = Depends(get_container)):
    """Registered payment gateways and the currencies each accepts."""
    default = container.settings.payment_gateway
    infos = []
    for name in container.registry.names():
        gateway = container.gateway(name)
        infos.append(
            GatewayInfo(
                name=name,
                supported_currencies=sorted(gateway.supported_currencies),
                default=name == default,
            )
        )
    return infos
