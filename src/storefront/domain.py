"""Domain initialization and configuration."""

from protean.domain import Domain

from storefront.utils.logging import configure_logging

configure_logging()

# Domain Composition Root
storefront = Domain(name="storefront")
