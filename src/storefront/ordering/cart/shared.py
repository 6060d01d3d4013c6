"""Process-wide shared cart, for callers that want one.

ShoppingCart itself can be created freely; this module only hands out a
single lazily-created instance to whoever asks for it. Prefer passing a cart
explicitly from the composition root.
"""

import threading

import structlog

from storefront.ordering.cart.cart import ShoppingCart

logger = structlog.get_logger(__name__)

_lock = threading.Lock()
_shared_cart: ShoppingCart | None = None


def shared_cart() -> ShoppingCart:
    """Return the shared cart, creating it on first use."""
    global _shared_cart
    with _lock:
        if _shared_cart is None:
            _shared_cart = ShoppingCart.create()
            logger.debug("Shared cart created", cart_id=str(_shared_cart.id))
        return _shared_cart


def set_shared_cart(cart: ShoppingCart) -> None:
    """Install an explicitly built cart as the shared one."""
    global _shared_cart
    with _lock:
        _shared_cart = cart


def reset_shared_cart() -> None:
    """Forget the shared cart; the next call to shared_cart() builds a new one."""
    global _shared_cart
    with _lock:
        _shared_cart = None
