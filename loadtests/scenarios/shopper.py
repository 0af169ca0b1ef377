"""Shopper load test scenarios.

Two stateful SequentialTaskSet journeys: an anonymous visitor paging through
the catalog, and a registered shopper who fills a cart and checks out.
Steps execute in order and each depends on the previous step succeeding.
"""

import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import signup_data, valid_email, valid_password
from loadtests.helpers.response import extract_error_detail
from loadtests.helpers.state import ShopperState


class CatalogBrowsingJourney(SequentialTaskSet):
    """Home -> Next Page -> Product Detail.

    Models an anonymous visitor. Generates no events.
    """

    def on_start(self):
        self.state = ShopperState()
        self.last_page = 1

    @task
    def home(self):
        with self.client.get("/", catch_response=True, name="GET /") as resp:
            if resp.status_code != 200:
                resp.failure(f"Home failed: {resp.status_code} - {extract_error_detail(resp)}")
                self.interrupt()
                return
            body = resp.json()
            self.last_page = body["pagination"]["last_page"]
            self.state.seen_product_ids.extend(p["id"] for p in body["products"])

    @task
    def random_page(self):
        page = random.randint(1, max(self.last_page, 1))
        with self.client.get(
            f"/products?page={page}",
            catch_response=True,
            name="GET /products?page={n}",
        ) as resp:
            if resp.status_code == 200:
                self.state.seen_product_ids.extend(p["id"] for p in resp.json()["products"])
            else:
                resp.failure(f"Catalog page failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def product_detail(self):
        if not self.state.seen_product_ids:
            self.interrupt()
            return
        product_id = random.choice(self.state.seen_product_ids)
        with self.client.get(
            f"/products/{product_id}",
            catch_response=True,
            name="GET /products/{id}",
        ) as resp:
            # A seller may have deleted the product in the meantime
            if resp.status_code in (200, 404):
                resp.success()
            else:
                resp.failure(f"Product detail failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def done(self):
        self.interrupt()


class CheckoutJourney(SequentialTaskSet):
    """Signup -> Login -> Browse -> Add to Cart (x2) -> Remove -> Checkout -> Orders -> Logout.

    Models a new customer buying from the catalog.
    Generates events: UserRegistered, CartItemAdded (x2), CartItemRemoved,
    OrderPlaced, CartCleared.
    """

    def on_start(self):
        self.state = ShopperState(email=valid_email(), password=valid_password())

    @task
    def signup(self):
        with self.client.post(
            "/signup",
            json=signup_data(self.state.email, self.state.password),
            catch_response=True,
            name="POST /signup",
        ) as resp:
            if resp.status_code == 201:
                self.state.user_id = resp.json()["user_id"]
            else:
                resp.failure(f"Signup failed: {resp.status_code} - {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def login(self):
        with self.client.post(
            "/login",
            json={"email": self.state.email, "password": self.state.password},
            catch_response=True,
            name="POST /login",
        ) as resp:
            if resp.status_code == 200:
                self.state.token = resp.json()["token"]
            else:
                resp.failure(f"Login failed: {resp.status_code} - {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def browse(self):
        with self.client.get("/products", catch_response=True, name="GET /products") as resp:
            if resp.status_code != 200:
                resp.failure(f"Catalog failed: {resp.status_code} - {extract_error_detail(resp)}")
                self.interrupt()
                return
            self.state.seen_product_ids = [p["id"] for p in resp.json()["products"]]
        if not self.state.seen_product_ids:
            # Nothing listed yet, no cart to build
            self.interrupt()

    @task
    def add_first_item(self):
        self._add_to_cart(self.state.seen_product_ids[0])

    @task
    def add_second_item(self):
        self._add_to_cart(random.choice(self.state.seen_product_ids))

    @task
    def view_cart(self):
        with self.client.get(
            "/cart",
            headers=self.state.headers,
            catch_response=True,
            name="GET /cart",
        ) as resp:
            if resp.status_code == 200:
                self.state.cart_product_ids = [line["product"]["id"] for line in resp.json()["products"]]
            else:
                resp.failure(f"View cart failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def remove_item(self):
        if len(self.state.cart_product_ids) < 2:
            return
        product_id = self.state.cart_product_ids.pop()
        with self.client.post(
            "/cart-delete-item",
            json={"product_id": product_id},
            headers=self.state.headers,
            catch_response=True,
            name="POST /cart-delete-item",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Remove from cart failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def checkout(self):
        with self.client.post(
            "/create-order",
            headers=self.state.headers,
            catch_response=True,
            name="POST /create-order",
        ) as resp:
            if resp.status_code == 201:
                self.state.order_ids.append(resp.json()["order_id"])
                self.state.cart_product_ids.clear()
            elif resp.status_code == 422 and not self.state.cart_product_ids:
                # Every product in the cart was deleted by its seller
                resp.success()
            else:
                resp.failure(f"Checkout failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def list_orders(self):
        with self.client.get(
            "/orders",
            headers=self.state.headers,
            catch_response=True,
            name="GET /orders",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"List orders failed: {resp.status_code} - {extract_error_detail(resp)}")
            elif len(resp.json()["orders"]) != len(self.state.order_ids):
                resp.failure("Order history does not match placed orders")

    @task
    def logout(self):
        with self.client.post(
            "/logout",
            headers=self.state.headers,
            catch_response=True,
            name="POST /logout",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Logout failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def done(self):
        self.interrupt()

    def _add_to_cart(self, product_id: str):
        with self.client.post(
            "/cart",
            json={"product_id": product_id},
            headers=self.state.headers,
            catch_response=True,
            name="POST /cart",
        ) as resp:
            if resp.status_code == 404:
                resp.success()
            elif resp.status_code != 200:
                resp.failure(f"Add to cart failed: {resp.status_code} - {extract_error_detail(resp)}")


class ShopperUser(HttpUser):
    """Locust user simulating shopper traffic.

    Weighted distribution:
    - 70% Catalog Browsing (most visitors never buy)
    - 30% Checkout
    """

    wait_time = between(0.5, 2.0)
    tasks = {
        CatalogBrowsingJourney: 7,
        CheckoutJourney: 3,
    }
