"""Order history lookups."""

from storefront.domain import storefront
from storefront.order.order import Order


@storefront.repository(part_of=Order)
class OrderRepository:
    def placed_by(self, user_id):
        """Orders of one user, oldest first."""
        records = self._dao.query.filter(user_id=str(user_id)).order_by("placed_at").all().items
        return [self.get(record.id) for record in records]
