"""Marketplace API package."""

from marketplace.api.errors import register_error_handlers
from marketplace.api.routes import cart_router, order_router, product_router, user_router, vendor_router

__all__ = [
    "product_router",
    "vendor_router",
    "user_router",
    "cart_router",
    "order_router",
    "register_error_handlers",
]
