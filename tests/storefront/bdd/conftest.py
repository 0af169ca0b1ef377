"""Shared BDD fixtures and step definitions for the storefront."""

import pytest
from protean import current_domain
from pytest_bdd import given, parsers, then, when
from storefront.cart.items import AddToCart
from storefront.order.order import Order
from storefront.order.placement import PlaceOrder
from storefront.product.details import EditProduct
from storefront.product.product import Product
from storefront.user.user import User


# ---------------------------------------------------------------------------
# Scenario state
# ---------------------------------------------------------------------------
@pytest.fixture()
def catalog():
    """Product ids by title."""
    return {}


@pytest.fixture()
def placed():
    return {"order_id": None}


@pytest.fixture()
def outcome():
    """Container for results and refusals of When steps."""
    return {"result": None, "exc": None}


@pytest.fixture()
def seller(make_user):
    return make_user(email="seller@example.com")


def _cart(user):
    return current_domain.repository_for(User).get(user.id).cart_items


def _add(user, product_id):
    current_domain.process(AddToCart(user_id=user.id, product_id=product_id), asynchronous=False)


def _place(user):
    return current_domain.process(PlaceOrder(user_id=user.id), asynchronous=False)


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a seller has listed "{title}" for {price:f}'))
def seller_lists_product(seller, make_product, catalog, title, price):
    product = make_product(owner_id=seller.id, title=title, price=price)
    catalog[title] = str(product.id)


@given("a registered shopper", target_fixture="shopper")
def registered_shopper(make_user):
    return make_user(email="shopper@example.com")


@given(parsers.cfparse('the shopper has {count:d} of "{title}" in the cart'))
def shopper_has_items(shopper, catalog, count, title):
    for _ in range(count):
        _add(shopper, catalog[title])


@given("the shopper placed an order")
def shopper_placed_order(shopper, placed):
    placed["order_id"] = _place(shopper)


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse('the shopper adds "{title}" to the cart'))
def shopper_adds(shopper, catalog, title):
    _add(shopper, catalog[title])


@when("the shopper places an order")
def shopper_places_order(shopper, placed):
    placed["order_id"] = _place(shopper)


@when(parsers.cfparse('the seller renames "{title}" to "{new_title}" at {price:f}'))
def seller_renames(seller, catalog, title, new_title, price):
    current_domain.process(
        EditProduct(
            product_id=catalog[title],
            user_id=seller.id,
            title=new_title,
            price=price,
            description=f"{new_title} for every day",
        ),
        asynchronous=False,
    )


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the cart has {count:d} line"))
@then(parsers.cfparse("the cart has {count:d} lines"))
def cart_has_lines(shopper, count):
    assert len(_cart(shopper)) == count


@then(parsers.cfparse('the cart holds {count:d} of "{title}"'))
def cart_holds(shopper, catalog, count, title):
    item = next(i for i in _cart(shopper) if str(i.product_id) == catalog[title])
    assert item.quantity == count


@then("the cart is empty")
def cart_is_empty(shopper):
    assert len(_cart(shopper)) == 0


@then(parsers.cfparse("the order has {lines:d} lines with {items:d} items in total"))
def order_has_lines(placed, lines, items):
    order = current_domain.repository_for(Order).get(placed["order_id"])
    assert len(order.products) == lines
    assert sum(line.quantity for line in order.products) == items


@then(parsers.cfparse('the order still lists "{title}" at {price:f}'))
def order_still_lists(placed, title, price):
    order = current_domain.repository_for(Order).get(placed["order_id"])
    assert order.products[0].product.title == title
    assert order.products[0].product.price == price


@then(parsers.cfparse('"{title}" is still listed at {price:f}'))
def still_listed(catalog, title, price):
    product = current_domain.repository_for(Product).get(catalog[title])
    assert product.title == title
    assert product.price == price
