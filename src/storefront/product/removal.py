"""Deleting a product: command and handler.

The product disappears from the catalog and from every cart that held it,
in the same unit of work. Orders keep their own snapshots and are left
alone.
"""

import structlog
from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.product.product import NotProductOwner, Product
from storefront.user.user import User

logger = structlog.get_logger(__name__)


@storefront.command(part_of="Product")
class DeleteProduct:
    product_id = Identifier(required=True)
    user_id = Identifier(required=True)


@storefront.command_handler(part_of=Product)
class DeleteProductHandler:
    @handle(DeleteProduct)
    def delete_product(self, command):
        """Returns the image path the deleted product was using."""
        product_repo = current_domain.repository_for(Product)
        product = product_repo.get(command.product_id)

        if not product.is_owned_by(command.user_id):
            raise NotProductOwner(product_id=str(product.id), user_id=str(command.user_id))

        user_repo = current_domain.repository_for(User)
        holders = user_repo.holding_product(product.id)
        for user in holders:
            user.remove_from_cart(product.id)
            user_repo.add(user)

        product_repo._dao.delete(product)

        logger.info(
            "Product deleted",
            product_id=str(product.id),
            carts_updated=len(holders),
        )
        return product.image_url
