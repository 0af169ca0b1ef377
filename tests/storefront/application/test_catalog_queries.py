import pytest
from protean import current_domain
from storefront.product.product import Product


@pytest.fixture()
def seller(make_user):
    return make_user(email="seller@example.com")


@pytest.fixture()
def five_products(seller, make_product):
    return [make_product(owner_id=seller.id, title=f"Product {i}") for i in range(1, 6)]


class TestCatalogPagination:
    def test_second_page_of_five_with_two_per_page(self, five_products):
        page = current_domain.repository_for(Product).page(page=2, page_size=2)

        assert [p.title for p in page.items] == ["Product 3", "Product 4"]
        assert page.total == 5
        assert page.has_next_page
        assert page.has_previous_page
        assert page.last_page == 3

    def test_last_page_holds_the_remainder(self, five_products):
        page = current_domain.repository_for(Product).page(page=3, page_size=2)

        assert [p.title for p in page.items] == ["Product 5"]
        assert not page.has_next_page

    @pytest.mark.parametrize("requested", [0, -4, None])
    def test_pages_below_one_are_clamped_to_the_first(self, five_products, requested):
        page = current_domain.repository_for(Product).page(page=requested, page_size=2)

        assert page.current_page == 1
        assert [p.title for p in page.items] == ["Product 1", "Product 2"]
        assert not page.has_previous_page

    def test_page_past_the_end_is_empty(self, five_products):
        page = current_domain.repository_for(Product).page(page=9, page_size=2)

        assert page.items == []
        assert page.total == 5


class TestOwnedProducts:
    def test_only_the_owners_products_are_listed(self, seller, five_products, make_user, make_product):
        other = make_user(email="other@example.com")
        make_product(owner_id=other.id, title="Not Mine")

        owned = current_domain.repository_for(Product).owned_by(seller.id)

        assert len(owned) == 5
        assert all(p.owner_id == str(seller.id) for p in owned)
