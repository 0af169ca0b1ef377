from storefront.user.events import CartCleared, CartItemAdded, CartItemRemoved
from storefront.user.user import User


def _user():
    return User.register(email="shopper@example.com", password_hash="hash")


class TestAddToCart:
    def test_first_add_creates_a_line_with_quantity_one(self):
        user = _user()
        user.add_to_cart("prod-1")

        assert len(user.cart_items) == 1
        assert user.cart_items[0].product_id == "prod-1"
        assert user.cart_items[0].quantity == 1

    def test_adding_the_same_product_twice_merges_into_one_line(self):
        user = _user()
        user.add_to_cart("prod-1")
        user.add_to_cart("prod-1")

        assert len(user.cart_items) == 1
        assert user.cart_item_for("prod-1").quantity == 2

    def test_different_products_get_their_own_lines(self):
        user = _user()
        user.add_to_cart("prod-1")
        user.add_to_cart("prod-2")
        user.add_to_cart("prod-1")

        assert len(user.cart_items) == 2
        assert user.cart_item_for("prod-1").quantity == 2
        assert user.cart_item_for("prod-2").quantity == 1

    def test_add_raises_cart_item_added_with_running_quantity(self):
        user = _user()
        user.add_to_cart("prod-1")
        user.add_to_cart("prod-1")

        added = [e for e in user._events if isinstance(e, CartItemAdded)]
        assert [e.quantity for e in added] == [1, 2]


class TestRemoveFromCart:
    def test_remove_drops_the_line_whatever_its_quantity(self):
        user = _user()
        for _ in range(3):
            user.add_to_cart("prod-1")

        assert user.remove_from_cart("prod-1") is True
        assert user.cart_item_for("prod-1") is None
        assert len(user.cart_items) == 0

    def test_remove_leaves_other_lines_alone(self):
        user = _user()
        user.add_to_cart("prod-1")
        user.add_to_cart("prod-2")

        user.remove_from_cart("prod-1")

        assert [i.product_id for i in user.cart_items] == ["prod-2"]

    def test_removing_a_missing_product_is_a_no_op(self):
        user = _user()
        user.add_to_cart("prod-1")
        events_before = len(user._events)

        assert user.remove_from_cart("prod-404") is False
        assert len(user.cart_items) == 1
        assert len(user._events) == events_before

    def test_remove_raises_cart_item_removed(self):
        user = _user()
        user.add_to_cart("prod-1")
        user.remove_from_cart("prod-1")

        assert isinstance(user._events[-1], CartItemRemoved)


class TestClearCart:
    def test_clear_empties_every_line(self):
        user = _user()
        user.add_to_cart("prod-1")
        user.add_to_cart("prod-2")

        user.clear_cart()

        assert len(user.cart_items) == 0
        assert isinstance(user._events[-1], CartCleared)
        assert user._events[-1].items_removed == 2
