"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Order")
class OrderPlaced:
    """A cart was checked out into an order."""

    __version__ = 1

    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    email = String(required=True, max_length=254)
    line_count = Integer(required=True)
    item_count = Integer(required=True)
    total = Float(required=True)
    placed_at = DateTime(required=True)
