"""Listing a new product: command and handler."""

from protean import handle
from protean.fields import Float, Identifier, String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.product.product import Product


@storefront.command(part_of="Product")
class ListProduct:
    owner_id = Identifier(required=True)
    title = String(required=True, max_length=255)
    price = Float(required=True)
    description = String(required=True, max_length=400)
    image_url = String(required=True, max_length=500)


@storefront.command_handler(part_of=Product)
class ListProductHandler:
    @handle(ListProduct)
    def list_product(self, command):
        product = Product.list_for_sale(
            owner_id=command.owner_id,
            title=command.title,
            price=command.price,
            description=command.description,
            image_url=command.image_url,
        )
        current_domain.repository_for(Product).add(product)
        return str(product.id)
