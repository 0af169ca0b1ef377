"""Storefront HTTP API package."""

from storefront.api.admin import admin_router
from storefront.api.application import create_app
from storefront.api.auth import auth_router
from storefront.api.errors import register_error_handlers
from storefront.api.routes import cart_router, order_router, shop_router

__all__ = [
    "admin_router",
    "auth_router",
    "cart_router",
    "create_app",
    "order_router",
    "register_error_handlers",
    "shop_router",
]
