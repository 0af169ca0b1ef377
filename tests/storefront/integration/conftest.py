import pytest
from fastapi.testclient import TestClient
from storefront.api.application import create_app
from storefront.config import Settings


@pytest.fixture()
def png_bytes():
    return b"\x89PNG\r\n\x1a\n" + b"\x00" * 16


@pytest.fixture()
def settings(tmp_path):
    return Settings(
        secret_key="test-secret",
        image_dir=tmp_path / "public-images",
        base_url="http://shop.test",
    )


@pytest.fixture()
def client(settings):
    return TestClient(create_app(settings))


@pytest.fixture()
def signup(client):
    """Sign up through the API and return the auth headers of the new account."""

    def _signup(email="jane@example.com", password="secret1"):
        response = client.post(
            "/signup",
            json={"email": email, "password": password, "confirm_password": password},
        )
        assert response.status_code == 201
        login = client.post("/login", json={"email": email, "password": password})
        assert login.status_code == 200
        return {"Authorization": f"Bearer {login.json()['token']}"}

    return _signup


@pytest.fixture()
def add_product(client, png_bytes):
    """List a product through the admin form and return its id."""

    def _add_product(headers, title="Blue Mug", price="12.50", description="A sturdy blue mug"):
        response = client.post(
            "/admin/add-product",
            data={"title": title, "price": price, "description": description},
            files={"image": ("mug.png", png_bytes, "image/png")},
            headers=headers,
        )
        assert response.status_code == 201, response.text
        return response.json()["product_id"]

    return _add_product
