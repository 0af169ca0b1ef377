"""Order aggregate: an immutable record of a checkout.

Each line holds a copy of the product as it was when the order was placed,
so later edits or deletions in the catalog never reach past orders.
"""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String, ValueObject

from storefront.domain import storefront
from storefront.order.events import OrderPlaced


@storefront.value_object(part_of="Order")
class ProductSnapshot:
    product_id = Identifier(required=True)
    title = String(required=True, max_length=255)
    price = Float(required=True)
    description = String(max_length=400)
    image_url = String(max_length=500)
    owner_id = Identifier()

    @classmethod
    def of(cls, product):
        return cls(
            product_id=str(product.id),
            title=product.title,
            price=product.price,
            description=product.description,
            image_url=product.image_url,
            owner_id=str(product.owner_id),
        )


@storefront.entity(part_of="Order")
class OrderLine:
    product = ValueObject(ProductSnapshot, required=True)
    quantity = Integer(required=True, min_value=1)


@storefront.aggregate
class Order:
    user_id = Identifier(required=True)
    email = String(required=True, max_length=254)
    products = HasMany(OrderLine)
    placed_at = DateTime()

    @classmethod
    def place(cls, user, lines):
        """Build an order for ``user`` from ``(product, quantity)`` pairs."""
        if not lines:
            raise ValidationError({"cart": ["Cannot place an order with an empty cart"]})

        now = datetime.now(UTC)
        order = cls(user_id=str(user.id), email=user.email, placed_at=now)
        for product, quantity in lines:
            order.add_products(OrderLine(product=ProductSnapshot.of(product), quantity=quantity))

        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                user_id=order.user_id,
                email=order.email,
                line_count=len(order.products),
                item_count=order.item_count,
                total=order.total,
                placed_at=now,
            )
        )
        return order

    @property
    def item_count(self):
        return sum(line.quantity for line in self.products)

    @property
    def total(self):
        return round(sum(line.product.price * line.quantity for line in self.products), 2)
