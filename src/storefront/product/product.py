"""Product aggregate: a catalog entry owned by the user who listed it."""

import math
from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Identifier, String

from storefront.domain import storefront
from storefront.product.events import ProductDetailsUpdated, ProductListed


class NotProductOwner(Exception):
    """Raised when someone other than the owner tries to change a product."""

    def __init__(self, product_id, user_id):
        super().__init__(f"User {user_id} does not own product {product_id}")
        self.product_id = product_id
        self.user_id = user_id


def _trimmed(value):
    return value.strip() if isinstance(value, str) else value


@storefront.aggregate
class Product:
    title = String(required=True, min_length=3, max_length=255)
    price = Float(required=True)
    description = String(required=True, min_length=5, max_length=400)
    image_url = String(required=True, max_length=500)
    owner_id = Identifier(required=True)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def price_must_be_positive(self):
        if self.price is not None and (not math.isfinite(self.price) or self.price <= 0):
            raise ValidationError({"price": ["Price must be a positive number."]})

    @classmethod
    def list_for_sale(cls, owner_id, title, price, description, image_url):
        now = datetime.now(UTC)
        product = cls(
            owner_id=owner_id,
            title=_trimmed(title),
            price=price,
            description=_trimmed(description),
            image_url=image_url,
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductListed(
                product_id=str(product.id),
                owner_id=str(owner_id),
                title=product.title,
                price=product.price,
                listed_at=now,
            )
        )
        return product

    def is_owned_by(self, user_id):
        return user_id is not None and str(self.owner_id) == str(user_id)

    def update_details(self, title, price, description, image_url=None):
        """Replace the editable fields.

        Returns the image path that stopped being used, or None when the
        image was kept.
        """
        previous_image_url = None
        if image_url and image_url != self.image_url:
            previous_image_url = self.image_url

        self.title = _trimmed(title)
        self.price = price
        self.description = _trimmed(description)
        if previous_image_url:
            self.image_url = image_url

        now = datetime.now(UTC)
        self.updated_at = now

        self.raise_(
            ProductDetailsUpdated(
                product_id=str(self.id),
                title=self.title,
                price=self.price,
                image_url=self.image_url,
                previous_image_url=previous_image_url,
                updated_at=now,
            )
        )
        return previous_image_url
