"""Customer-side reaction to catalogue availability changes."""

import structlog

from storefront.catalogue.availability import AvailabilityListener
from storefront.catalogue.product import Product
from storefront.identity.customer import Customer

logger = structlog.get_logger(__name__)


class CustomerAvailabilityListener(AvailabilityListener):
    """Collects wish-list notices for a customer."""

    def __init__(self, customer: Customer) -> None:
        self.customer = customer
        self.notices: list[str] = []

    def on_availability_changed(self, product: Product, available: bool) -> None:
        if available:
            notice = f"{product.name} is back in stock"
        else:
            notice = f"{product.name} is no longer available"
        self.notices.append(notice)

        logger.info(
            "Customer notified of availability change",
            customer=self.customer.name,
            product=product.name,
            available=available,
        )
