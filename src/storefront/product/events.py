"""Domain events for the Product aggregate."""

from protean.fields import DateTime, Float, Identifier, String

from storefront.domain import storefront


@storefront.event(part_of="Product")
class ProductListed:
    """A user put a new product in the catalog."""

    __version__ = 1

    product_id = Identifier(required=True)
    owner_id = Identifier(required=True)
    title = String(required=True, max_length=255)
    price = Float(required=True)
    listed_at = DateTime(required=True)


@storefront.event(part_of="Product")
class ProductDetailsUpdated:
    """The owner changed a product's title, price, description or image."""

    __version__ = 1

    product_id = Identifier(required=True)
    title = String(required=True, max_length=255)
    price = Float(required=True)
    image_url = String(required=True, max_length=500)
    previous_image_url = String(max_length=500)
    updated_at = DateTime(required=True)
