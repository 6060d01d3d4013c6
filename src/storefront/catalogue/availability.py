"""Product availability: listeners are told when a product comes and goes.

Fan-out is synchronous and follows registration order. A listener that
raises stops the fan-out and the error reaches the caller.
"""

from abc import ABC, abstractmethod

import structlog

from storefront.catalogue.product import Product

logger = structlog.get_logger(__name__)


class AvailabilityListener(ABC):
    """Abstract interface for anything interested in a product's availability."""

    @abstractmethod
    def on_availability_changed(self, product: Product, available: bool) -> None:
        """React to a product becoming available or unavailable."""
        ...


class ProductAvailability:
    """Tracks whether a product can be bought and who wants to know."""

    def __init__(self, product: Product, available: bool = True) -> None:
        self.product = product
        self.available = available
        self._listeners: list[AvailabilityListener] = []

    @property
    def listeners(self) -> list[AvailabilityListener]:
        return list(self._listeners)

    def add_listener(self, listener: AvailabilityListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: AvailabilityListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def set_availability(self, available: bool) -> int:
        """Update the flag and notify listeners if it changed.

        Returns the number of listeners notified.
        """
        if available == self.available:
            return 0

        self.available = available
        listeners = list(self._listeners)
        logger.info(
            "Product availability changed",
            product=self.product.name,
            available=available,
            listener_count=len(listeners),
        )

        for listener in listeners:
            listener.on_availability_changed(self.product, available)

        return len(listeners)
