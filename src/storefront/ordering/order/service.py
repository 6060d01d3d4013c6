"""Order processing application service."""

import structlog

from storefront.ordering.order.order import Order
from storefront.ordering.order.repository import OrderRepository

logger = structlog.get_logger(__name__)


class OrderService:
    def __init__(self, order_repository: OrderRepository) -> None:
        self.order_repository = order_repository

    def process_order(self, cart, customer=None) -> Order:
        logger.info("Processing order", cart_id=str(cart.id), total=cart.total_price())
        return self.order_repository.create_order(cart, customer=customer)
