"""
Tests for payment gateways and their registry.

- Both built-in gateways honour the same charge contract
- The registry resolves names case-insensitively and rejects unknown ones
- A new gateway plugs in through registration alone
"""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from adapters.payment_gateways import (
    GatewayRegistry,
    PaypalGateway,
    StripeGateway,
    gateway_registry,
)
from app.exceptions import PaymentDeclinedError, ServiceValidationError
from domain.enums import OrderStatus
from domain.interfaces import PaymentGateway
from domain.schemas import ChargeResult
from services import PaymentService

from test_fixtures import kit, make_settings
from test_helpers import unique_email

LIMIT = Decimal("100.00")


@pytest.fixture(params=[StripeGateway, PaypalGateway], ids=["stripe", "paypal"])
def gateway(request) -> PaymentGateway:
    return request.param(max_charge_amount=LIMIT)


# =============================================================================
# SHARED CONTRACT
# =============================================================================


def test_charge_returns_result_for_supported_currency(gateway):
    result = gateway.charge(Decimal("42.00"), "usd", reference="order-1")

    assert isinstance(result, ChargeResult)
    assert result.gateway == gateway.name
    assert result.amount == Decimal("42.00")
    assert result.currency == "USD"
    assert result.transaction_id
    assert result.captured_at.tzinfo is not None


def test_transaction_ids_are_unique(gateway):
    ids = {gateway.charge(Decimal("1.00"), "USD", reference=str(i)).transaction_id for i in range(20)}
    assert len(ids) == 20


@pytest.mark.parametrize(
    "amount, currency, code",
    [
        (Decimal("0"), "USD", "INVALID_AMOUNT"),
        (Decimal("-3.00"), "USD", "INVALID_AMOUNT"),
        (Decimal("100.01"), "USD", "LIMIT_EXCEEDED"),
        (Decimal("1.00"), "XYZ", "CURRENCY_NOT_SUPPORTED"),
    ],
)
def test_charge_only_raises_payment_declined(gateway, amount, currency, code):
    with pytest.raises(PaymentDeclinedError) as exc:
        gateway.charge(amount, currency, reference="order-1")
    assert exc.value.code == code
    assert exc.value.http_status == 402


def test_charge_at_limit_is_accepted(gateway):
    assert gateway.charge(LIMIT, "EUR", reference="order-1").amount == LIMIT


def test_supports_is_case_insensitive(gateway):
    assert gateway.supports("usd")
    assert gateway.supports("GBP")
    assert not gateway.supports("XYZ")


def test_gateway_specific_currencies():
    assert StripeGateway(LIMIT).supports("JPY")
    assert not PaypalGateway(LIMIT).supports("JPY")


def test_transaction_id_formats():
    assert StripeGateway(LIMIT).charge(Decimal("1"), "USD", "r").transaction_id.startswith("ch_")
    assert PaypalGateway(LIMIT).charge(Decimal("1"), "USD", "r").transaction_id.startswith("PAYID-")


# =============================================================================
# REGISTRY
# =============================================================================


def test_default_registry_contents():
    assert gateway_registry.names() == ["paypal", "stripe"]
    assert "STRIPE" in gateway_registry
    assert "bitcoin" not in gateway_registry


def test_registry_create_uses_settings_limit():
    settings = make_settings(max_charge_amount=Decimal("50.00"))
    gateway = gateway_registry.create("Stripe", settings)

    assert isinstance(gateway, StripeGateway)
    assert gateway.max_charge_amount == Decimal("50.00")


def test_registry_unknown_name():
    with pytest.raises(ServiceValidationError) as exc:
        gateway_registry.create("bitcoin", make_settings())
    assert exc.value.code == "UNSUPPORTED_GATEWAY"
    assert exc.value.details == {"available": ["paypal", "stripe"]}


def test_new_gateway_needs_only_registration(kit):
    """
    A third gateway is added by registering a class.

    PaymentService settles an order through it without any change.
    """
    registry = GatewayRegistry()

    # no max_charge_amount in the constructor, so it brings its own factory
    @registry.register(factory=lambda s: VoucherGateway())
    class VoucherGateway(PaymentGateway):
        name = "voucher"
        supported_currencies = frozenset({"USD"})

        def charge(self, amount, currency, reference):
            return ChargeResult(
                transaction_id=f"V-{reference[:8]}",
                gateway=self.name,
                amount=amount,
                currency=currency,
                captured_at=datetime.now(timezone.utc),
            )

    assert registry.names() == ["voucher"]
    gateway = registry.create("voucher", make_settings())

    user = kit.user_service.register(unique_email())
    order = kit.order_service.place(user.user_id, "9.99")
    paid = PaymentService(gateway, kit.orders, kit.events).pay(order.order_id)

    assert paid.status == OrderStatus.PAID
    assert paid.gateway == "voucher"
    assert paid.transaction_id == f"V-{str(order.order_id)[:8]}"
