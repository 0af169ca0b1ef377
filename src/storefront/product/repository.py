"""Catalog queries: paginated listing and owner listings."""

import math
from dataclasses import dataclass

from storefront.domain import storefront
from storefront.product.product import Product


@dataclass(frozen=True)
class CatalogPage:
    """One page of products plus the numbers a pager needs."""

    items: list
    total: int
    current_page: int
    page_size: int

    @property
    def has_next_page(self) -> bool:
        return self.page_size * self.current_page < self.total

    @property
    def has_previous_page(self) -> bool:
        return self.current_page > 1

    @property
    def next_page(self) -> int:
        return self.current_page + 1

    @property
    def previous_page(self) -> int:
        return self.current_page - 1

    @property
    def last_page(self) -> int:
        return math.ceil(self.total / self.page_size)


@storefront.repository(part_of=Product)
class ProductRepository:
    def page(self, page=1, page_size=2):
        """Products in listing order, sliced to a 1-indexed page.

        Pages below 1 are treated as page 1.
        """
        current_page = max(int(page or 1), 1)
        page_size = max(int(page_size), 1)

        result = (
            self._dao.query.order_by("created_at")
            .offset((current_page - 1) * page_size)
            .limit(page_size)
            .all()
        )
        return CatalogPage(
            items=list(result.items),
            total=result.total,
            current_page=current_page,
            page_size=page_size,
        )

    def owned_by(self, owner_id):
        return self._dao.query.filter(owner_id=str(owner_id)).order_by("created_at").all().items
