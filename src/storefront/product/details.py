"""Editing a product: command and handler.

Only the owner may edit. Anyone else gets a refusal, not an error, so the
caller can send them back to the shop front.
"""

from dataclasses import dataclass

import structlog
from protean import handle
from protean.fields import Float, Identifier, String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.product.product import Product

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class EditOutcome:
    updated: bool
    released_image_url: str | None = None


@storefront.command(part_of="Product")
class EditProduct:
    product_id = Identifier(required=True)
    user_id = Identifier(required=True)
    title = String(required=True, max_length=255)
    price = Float(required=True)
    description = String(required=True, max_length=400)
    image_url = String(max_length=500)


@storefront.command_handler(part_of=Product)
class EditProductHandler:
    @handle(EditProduct)
    def edit_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)

        if not product.is_owned_by(command.user_id):
            logger.info(
                "Product edit refused, user is not the owner",
                product_id=str(command.product_id),
                user_id=str(command.user_id),
            )
            return EditOutcome(updated=False)

        released = product.update_details(
            title=command.title,
            price=command.price,
            description=command.description,
            image_url=command.image_url,
        )
        repo.add(product)
        return EditOutcome(updated=True, released_image_url=released)
