import pytest
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError
from storefront.cart.items import AddToCart
from storefront.order.order import Order
from storefront.order.placement import PlaceOrder
from storefront.product.details import EditProduct
from storefront.product.product import Product
from storefront.user.repository import UserRepository
from storefront.user.user import User


@pytest.fixture()
def seller(make_user):
    return make_user(email="seller@example.com")


@pytest.fixture()
def shopper(make_user):
    return make_user()


@pytest.fixture()
def mug(seller, make_product):
    return make_product(owner_id=seller.id, title="Blue Mug", price=12.5)


@pytest.fixture()
def plate(seller, make_product):
    return make_product(owner_id=seller.id, title="Flat Plate", price=8.0)


def _add(user, product, times=1):
    for _ in range(times):
        current_domain.process(AddToCart(user_id=user.id, product_id=product.id), asynchronous=False)


def _place(user):
    return current_domain.process(PlaceOrder(user_id=user.id), asynchronous=False)


class TestPlaceOrder:
    def test_checkout_snapshots_the_cart_and_empties_it(self, shopper, mug, plate):
        _add(shopper, mug, times=2)
        _add(shopper, plate)

        order_id = _place(shopper)

        order = current_domain.repository_for(Order).get(order_id)
        assert len(order.products) == 2
        assert sum(line.quantity for line in order.products) == 3
        assert order.user_id == str(shopper.id)
        assert order.email == shopper.email

        user = current_domain.repository_for(User).get(shopper.id)
        assert len(user.cart_items) == 0

    def test_order_keeps_its_snapshot_after_the_product_is_edited(self, seller, shopper, mug):
        _add(shopper, mug)
        order_id = _place(shopper)

        current_domain.process(
            EditProduct(
                product_id=mug.id,
                user_id=seller.id,
                title="Gold Mug",
                price=99.0,
                description="Now in gold",
            ),
            asynchronous=False,
        )

        order = current_domain.repository_for(Order).get(order_id)
        assert order.products[0].product.title == "Blue Mug"
        assert order.products[0].product.price == 12.5

    def test_empty_cart_is_refused(self, shopper):
        with pytest.raises(ValidationError):
            _place(shopper)

        assert current_domain.repository_for(Order).placed_by(shopper.id) == []

    def test_missing_product_fails_the_whole_checkout(self, shopper, mug, plate):
        _add(shopper, mug)
        _add(shopper, plate)

        # Bypass the delete command so the cart still points at the product
        product_repo = current_domain.repository_for(Product)
        product_repo._dao.delete(product_repo.get(plate.id))

        with pytest.raises(ObjectNotFoundError):
            _place(shopper)

        user = current_domain.repository_for(User).get(shopper.id)
        assert len(user.cart_items) == 2
        assert current_domain.repository_for(Order).placed_by(shopper.id) == []

    def test_failed_cart_clear_keeps_no_order(self, shopper, mug, monkeypatch):
        _add(shopper, mug, times=2)
        original_add = UserRepository.add

        def add_failing_on_empty_cart(repo, user, *args, **kwargs):
            if len(user.cart_items) == 0:
                raise RuntimeError("user store unavailable")
            return original_add(repo, user, *args, **kwargs)

        monkeypatch.setattr(UserRepository, "add", add_failing_on_empty_cart)

        with pytest.raises(RuntimeError):
            _place(shopper)

        assert current_domain.repository_for(Order).placed_by(shopper.id) == []
        user = current_domain.repository_for(User).get(shopper.id)
        assert [(str(i.product_id), i.quantity) for i in user.cart_items] == [(str(mug.id), 2)]


class TestOrderHistory:
    def test_orders_are_listed_oldest_first_and_only_for_their_owner(self, shopper, mug, plate, make_user):
        other = make_user(email="other@example.com")
        _add(shopper, mug)
        first = _place(shopper)
        _add(other, mug)
        _place(other)
        _add(shopper, plate)
        second = _place(shopper)

        orders = current_domain.repository_for(Order).placed_by(shopper.id)

        assert [str(o.id) for o in orders] == [first, second]
