"""Lookups on User beyond fetching by identifier."""

from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.user.user import CartItem, User, normalise_email

SCAN_BATCH_SIZE = 100


@storefront.repository(part_of=User)
class UserRepository:
    def _first(self, **filters):
        record = self._dao.query.filter(**filters).all().first
        # Reload through the repository so the cart is attached
        return self.get(record.id) if record else None

    def find_by_email(self, email):
        return self._first(email=normalise_email(email))

    def find_by_reset_token(self, token):
        if not token:
            return None
        return self._first(reset_token=token)

    def holding_product(self, product_id):
        """Users whose cart has a line for the given product.

        Only the matching cart lines are scanned, then their owners loaded.
        """
        lines = current_domain.repository_for(CartItem)._dao.query.filter(product_id=str(product_id))

        owner_ids = {}
        offset = 0
        while True:
            batch = lines.order_by("added_at").offset(offset).limit(SCAN_BATCH_SIZE).all()
            for line in batch.items:
                # HasMany links each line to its user through ``user_id``
                owner_ids.setdefault(str(line.user_id), None)

            offset += SCAN_BATCH_SIZE
            if offset >= batch.total:
                return [self.get(owner_id) for owner_id in owner_ids]
