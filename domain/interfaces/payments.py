"""
Payment gateway contract.

New gateways are added by implementing this class and registering it with
``adapters.payment_gateways.gateway_registry``; ``PaymentService`` never
changes.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import ClassVar, FrozenSet

from domain.schemas.payment_schemas import ChargeResult


class PaymentGateway(ABC):
    name: ClassVar[str]
    supported_currencies: ClassVar[FrozenSet[str]]

    def supports(self, currency: str) -> bool:
        return currency.upper() in self.supported_currencies

    @abstractmethod
    def charge(self, amount: Decimal, currency: str, reference: str) -> ChargeResult:
        """
        Capture ``amount`` in ``currency``.

        Args:
            amount: positive amount with two decimal places
            currency: ISO-4217 code the gateway supports
            reference: caller's idempotency/reference key (the order id)

        Returns:
            ChargeResult describing the captured charge

        Raises:
            PaymentDeclinedError: the only error a gateway may raise
        """
