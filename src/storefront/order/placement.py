"""Checkout: turn a user's cart into an order and empty the cart.

Both writes share the handler's unit of work: the order is only kept when
the cart is cleared too.
"""

import structlog
from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.order.order import Order
from storefront.product.product import Product
from storefront.user.user import User

logger = structlog.get_logger(__name__)


@storefront.command(part_of="Order")
class PlaceOrder:
    user_id = Identifier(required=True)


@storefront.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        user_repo = current_domain.repository_for(User)
        product_repo = current_domain.repository_for(Product)

        user = user_repo.get(command.user_id)

        # Any product that no longer resolves fails the whole checkout
        lines = [(product_repo.get(item.product_id), item.quantity) for item in user.cart_items]

        order = Order.place(user, lines)
        current_domain.repository_for(Order).add(order)

        user.clear_cart()
        user_repo.add(user)

        logger.info(
            "Order placed",
            order_id=str(order.id),
            user_id=str(user.id),
            item_count=order.item_count,
        )
        return str(order.id)
