"""Seller load test scenarios.

One stateful SequentialTaskSet journey covering the whole listing lifecycle:
list products with images, edit one, then delete it. Steps execute in order
and each depends on the previous step succeeding.
"""

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import (
    product_form_data,
    product_image,
    signup_data,
    valid_email,
    valid_password,
)
from loadtests.helpers.response import extract_error_detail
from loadtests.helpers.state import SellerState


class ListingLifecycleJourney(SequentialTaskSet):
    """Signup -> Login -> Add Product (x2) -> Own Products -> Edit -> Delete.

    Models a seller stocking their shop and correcting a listing.
    Generates events: UserRegistered, ProductListed (x2), ProductDetailsUpdated.
    """

    def on_start(self):
        self.state = SellerState(email=valid_email(), password=valid_password())

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
    def add_first_product(self):
        self._add_product()
        if not self.state.product_ids:
            self.interrupt()

    @task
    def add_second_product(self):
        self._add_product()

    @task
    def own_products(self):
        with self.client.get(
            "/admin/products",
            headers=self.state.headers,
            catch_response=True,
            name="GET /admin/products",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Own products failed: {resp.status_code} - {extract_error_detail(resp)}")
            elif len(resp.json()["products"]) != len(self.state.product_ids):
                resp.failure("Seller listing does not match added products")

    @task
    def open_edit_form(self):
        with self.client.get(
            f"/admin/edit-product/{self.state.product_ids[0]}?edit=true",
            headers=self.state.headers,
            catch_response=True,
            allow_redirects=False,
            name="GET /admin/edit-product/{id}",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Edit form failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def edit_product(self):
        form = product_form_data()
        form["product_id"] = self.state.product_ids[0]
        with self.client.post(
            "/admin/edit-product",
            data=form,
            files={"image": product_image()},
            headers=self.state.headers,
            catch_response=True,
            allow_redirects=False,
            name="POST /admin/edit-product",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Edit product failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def delete_product(self):
        product_id = self.state.product_ids.pop()
        with self.client.delete(
            f"/admin/product/{product_id}",
            headers=self.state.headers,
            catch_response=True,
            name="DELETE /admin/product/{id}",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Delete product failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def done(self):
        self.interrupt()

    def _add_product(self):
        with self.client.post(
            "/admin/add-product",
            data=product_form_data(),
            files={"image": product_image()},
            headers=self.state.headers,
            catch_response=True,
            name="POST /admin/add-product",
        ) as resp:
            if resp.status_code == 201:
                self.state.product_ids.append(resp.json()["product_id"])
            else:
                resp.failure(f"Add product failed: {resp.status_code} - {extract_error_detail(resp)}")


class SellerUser(HttpUser):
    """Locust user simulating seller activity."""

    wait_time = between(1.0, 3.0)
    tasks = [ListingLifecycleJourney]
