"""
Payment gateway adapters and the registry that maps names to them.

Neither gateway talks to a real processor; they validate the charge,
apply the shared decline rule and mint a processor-style transaction id.
"""

from typing import Callable, Dict, List, Optional, Type
from decimal import Decimal
from datetime import datetime, timezone
import logging
import uuid

from app.config import Settings
from app.exceptions import PaymentDeclinedError, ServiceValidationError
from domain.interfaces import PaymentGateway
from domain.schemas.payment_schemas import ChargeResult

logger = logging.getLogger("solidshop.payments.gateways")


class _LocalGateway(PaymentGateway):
    """Shared charge rules for the local stand-in gateways"""

    def __init__(self, max_charge_amount: Decimal):
        self.max_charge_amount = max_charge_amount

    def _new_transaction_id(self) -> str:
        raise NotImplementedError

    def charge(self, amount: Decimal, currency: str, reference: str) -> ChargeResult:
        currency = currency.upper()
        if amount <= 0:
            raise PaymentDeclinedError(
                "Charge amount must be positive",
                details={"amount": str(amount)},
                code="INVALID_AMOUNT",
            )
        if not self.supports(currency):
            raise PaymentDeclinedError(
                f"{self.name} does not accept {currency}",
                details={"currency": currency},
                code="CURRENCY_NOT_SUPPORTED",
            )
        if amount > self.max_charge_amount:
            logger.warning(
                f"charge_declined gateway={self.name} reference={reference} amount={amount}"
            )
            raise PaymentDeclinedError(
                f"Amount {amount} {currency} exceeds the single charge limit",
                details={"limit": str(self.max_charge_amount)},
                code="LIMIT_EXCEEDED",
            )

        result = ChargeResult(
            transaction_id=self._new_transaction_id(),
            gateway=self.name,
            amount=amount,
            currency=currency,
            captured_at=datetime.now(timezone.utc),
        )
        logger.info(
            f"charge_captured gateway={self.name} reference={reference} "
            f"transaction_id={result.transaction_id}"
        )
        return result


class StripeGateway(_LocalGateway):
    name = "stripe"
    supported_currencies = frozenset(
        {"USD", "EUR", "GBP", "CAD", "AUD", "JPY", "CHF", "SEK", "NOK", "DKK", "PLN"}
    )

    def _new_transaction_id(self) -> str:
        return f"ch_{uuid.uuid4().hex[:24]}"


class PaypalGateway(_LocalGateway):
    name = "paypal"
    supported_currencies = frozenset({"USD", "EUR", "GBP", "CAD", "AUD"})

    def _new_transaction_id(self) -> str:
        return f"PAYID-{uuid.uuid4().hex[:20].upper()}"


GatewayFactory = Callable[[Settings], PaymentGateway]


class GatewayRegistry:
    """Maps gateway names to factories. Adding a gateway is one ``register`` call."""

    def __init__(self):
        self._factories: Dict[str, GatewayFactory] = {}

    def register(self, name: Optional[str] = None, factory: Optional[GatewayFactory] = None):
        """
        Register a gateway class.

        Usable as a decorator (``@registry.register()``) or directly with an
        explicit factory taking the application settings.
        """

        def decorator(cls: Type[PaymentGateway]) -> Type[PaymentGateway]:
            key = (name or cls.name).lower()
            self._factories[key] = factory or (
                lambda s: cls(max_charge_amount=s.max_charge_amount)
            )
            return cls

        return decorator

    def names(self) -> List[str]:
        return sorted(self._factories)

    def __contains__(self, name: str) -> bool:
        return name.lower() in self._factories

    def create(self, name: str, settings: Settings) -> PaymentGateway:
        try:
            factory = self._factories[name.lower()]
        except KeyError:
            raise ServiceValidationError(
                f"Unsupported payment gateway '{name}'",
                details={"available": self.names()},
                code="UNSUPPORTED_GATEWAY",
            )
        return factory(settings)


gateway_registry = GatewayRegistry()
gateway_registry.register()(StripeGateway)
gateway_registry.register()(PaypalGateway)
