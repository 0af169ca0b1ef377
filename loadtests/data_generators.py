"""Faker-based data generators for Locust load test scenarios.

Each generator produces payloads that pass the storefront's validation rules
(well-formed email, alphanumeric password of at least 4 characters, title
of at least 3 characters, description between 5 and 400 characters) and
match the field names the API expects.
"""

import base64
import random
import uuid

from faker import Faker

fake = Faker()

# 1x1 transparent PNG
_PNG_PIXEL = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mNkYAAAAAYAAjCB0C8AAAAASUVORK5CYII="
)

# ---------- Accounts ----------


def valid_email() -> str:
    """Generate unique emails so repeated signups never collide."""
    local = "".join(ch for ch in fake.user_name() if ch.isalnum())[:20] or "shopper"
    return f"{local}.{uuid.uuid4().hex[:6]}@{fake.free_email_domain()}"


def valid_password() -> str:
    """Generate passwords matching ^[A-Za-z0-9]{4,}$."""
    return fake.password(length=10, special_chars=False)


def signup_data(email: str, password: str) -> dict:
    return {"email": email, "password": password, "confirm_password": password}


# ---------- Products ----------


def product_form_data() -> dict:
    """Generate multipart form fields for /admin/add-product."""
    return {
        "title": fake.catch_phrase()[:255],
        "price": f"{random.uniform(1, 500):.2f}",
        "description": fake.paragraph(nb_sentences=2)[:400].ljust(5, "."),
    }


def product_image() -> tuple[str, bytes, str]:
    """Return a (filename, content, content_type) tuple for a PNG upload."""
    return (f"{fake.slug()}.png", _PNG_PIXEL, "image/png")
