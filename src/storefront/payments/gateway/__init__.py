"""Payment gateway factory.

PaymentGatewayFactory picks an adapter by kind; new kinds are registered
rather than coded into the factory. get_gateway() / set_gateway() /
reset_gateway() manage the process default, which is chosen by the
STOREFRONT_PAYMENT_GATEWAY environment variable (``generic`` if unset).
"""

import os
from enum import Enum

from protean.exceptions import ValidationError

from storefront.payments.gateway.adapters import (
    CreditCardPaymentGateway,
    CryptoPaymentGateway,
    GenericPaymentGateway,
    PayPalPaymentGateway,
    StripePaymentGateway,
)
from storefront.payments.gateway.port import PaymentGateway


class PaymentGatewayType(Enum):
    GENERIC = "generic"
    CRYPTO = "crypto"
    CREDIT_CARD = "credit_card"
    PAYPAL = "paypal"
    STRIPE = "stripe"


class PaymentGatewayFactory:
    """Builds payment gateway adapters from a caller-supplied kind."""

    def __init__(self) -> None:
        self._adapters: dict[str, type[PaymentGateway]] = {
            PaymentGatewayType.GENERIC.value: GenericPaymentGateway,
            PaymentGatewayType.CRYPTO.value: CryptoPaymentGateway,
            PaymentGatewayType.CREDIT_CARD.value: CreditCardPaymentGateway,
            PaymentGatewayType.PAYPAL.value: PayPalPaymentGateway,
            PaymentGatewayType.STRIPE.value: StripePaymentGateway,
        }

    @staticmethod
    def _key(kind: "PaymentGatewayType | str") -> str:
        return kind.value if isinstance(kind, PaymentGatewayType) else str(kind).lower()

    @property
    def kinds(self) -> list[str]:
        return list(self._adapters)

    def register(self, kind: "PaymentGatewayType | str", adapter_cls: type[PaymentGateway]) -> None:
        """Make a new adapter available under ``kind``."""
        self._adapters[self._key(kind)] = adapter_cls

    def create(self, kind: "PaymentGatewayType | str") -> PaymentGateway:
        key = self._key(kind)
        if key not in self._adapters:
            raise ValidationError({"gateway": [f"Unknown payment gateway: {kind}"]})
        return self._adapters[key]()


_factory = PaymentGatewayFactory()
_current_gateway: PaymentGateway | None = None


def get_factory() -> PaymentGatewayFactory:
    """Return the process-wide gateway factory."""
    return _factory


def get_gateway() -> PaymentGateway:
    """Return the current payment gateway, building the configured one on first use."""
    global _current_gateway
    if _current_gateway is None:
        _current_gateway = _factory.create(os.getenv("STOREFRONT_PAYMENT_GATEWAY", PaymentGatewayType.GENERIC.value))
    return _current_gateway


def set_gateway(gateway: PaymentGateway) -> None:
    """Override the active payment gateway (useful for tests)."""
    global _current_gateway
    _current_gateway = gateway


def reset_gateway() -> None:
    """Reset to the configured default gateway."""
    global _current_gateway
    _current_gateway = None
