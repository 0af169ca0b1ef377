"""Read side of the cart: lines joined with their catalog products."""

from dataclasses import dataclass

import structlog
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.product.product import Product
from storefront.user.user import User

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class CartLine:
    product: Product
    quantity: int


def populated_cart(user_id):
    """Return the user's cart lines with their products loaded."""
    user = current_domain.repository_for(User).get(user_id)
    product_repo = current_domain.repository_for(Product)

    lines = []
    for item in user.cart_items:
        try:
            product = product_repo.get(item.product_id)
        except ObjectNotFoundError:
            logger.warning("Cart line points at a missing product", user_id=str(user_id), product_id=str(item.product_id))
            continue
        lines.append(CartLine(product=product, quantity=item.quantity))
    return lines
