"""Order persistence port and the adapter backed by the domain's repository.

OrderService depends on OrderRepository, never on a storage technology.
"""

from abc import ABC, abstractmethod

import structlog
from protean.utils.globals import current_domain

from storefront.ordering.order.order import Order

logger = structlog.get_logger(__name__)


class OrderRepository(ABC):
    """Abstract interface for storing placed orders."""

    @abstractmethod
    def create_order(self, cart, customer=None) -> Order:
        """Place and store an order for ``cart``."""
        ...


class DomainOrderRepository(OrderRepository):
    """Stores orders through the active domain's Order repository."""

    def create_order(self, cart, customer=None) -> Order:
        order = Order.place(cart, customer=customer)
        current_domain.repository_for(Order).add(order)

        logger.info(
            "Order placed",
            total=order.total,
            order_id=str(order.id),
            cart_id=str(cart.id),
            item_count=order.item_count,
        )
        return order
