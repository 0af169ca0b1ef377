"""Pydantic request/response schemas for the storefront API.

These are external contracts, kept apart from the Protean commands they
are translated into.
"""

from datetime import datetime

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Products
# ---------------------------------------------------------------------------
class ProductSchema(BaseModel):
    id: str
    title: str
    price: float
    description: str
    image_url: str
    owner_id: str
    created_at: datetime | None = None


class PaginationSchema(BaseModel):
    current_page: int
    has_next_page: bool
    has_previous_page: bool
    next_page: int
    previous_page: int
    last_page: int
    total: int


class CatalogPageResponse(BaseModel):
    products: list[ProductSchema]
    pagination: PaginationSchema


class ProductListResponse(BaseModel):
    products: list[ProductSchema]


class ProductIdResponse(BaseModel):
    product_id: str


class ProductEditResponse(BaseModel):
    editing: bool = True
    product: ProductSchema


# ---------------------------------------------------------------------------
# Cart
# ---------------------------------------------------------------------------
class ProductRefRequest(BaseModel):
    product_id: str = Field(min_length=1)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "product_id": "0b7a6f0e-4f7b-4b4e-9f3c-2a0d8c1e5b11",
                }
            ]
        }
    }


class CartLineSchema(BaseModel):
    product: ProductSchema
    quantity: int = Field(ge=1)


class CartResponse(BaseModel):
    products: list[CartLineSchema]
    total_quantity: int
    total_price: float


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------
class ProductSnapshotSchema(BaseModel):
    product_id: str
    title: str
    price: float
    description: str | None = None
    image_url: str | None = None
    owner_id: str | None = None


class OrderLineSchema(BaseModel):
    product: ProductSnapshotSchema
    quantity: int


class OrderUserSchema(BaseModel):
    email: str
    user_id: str


class OrderSchema(BaseModel):
    id: str
    user: OrderUserSchema
    products: list[OrderLineSchema]
    total: float
    placed_at: datetime | None = None


class OrderListResponse(BaseModel):
    orders: list[OrderSchema]


class OrderIdResponse(BaseModel):
    order_id: str


# ---------------------------------------------------------------------------
# Accounts
# ---------------------------------------------------------------------------
class SignupRequest(BaseModel):
    email: str
    password: str
    confirm_password: str

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "email": "jane@example.com",
                    "password": "secret1",
                    "confirm_password": "secret1",
                }
            ]
        }
    }


class LoginRequest(BaseModel):
    email: str
    password: str


class ResetRequest(BaseModel):
    email: str


class NewPasswordRequest(BaseModel):
    user_id: str
    password_token: str
    password: str


class UserIdResponse(BaseModel):
    user_id: str


class SessionResponse(BaseModel):
    user_id: str
    token: str


class ResetTokenResponse(BaseModel):
    user_id: str
    password_token: str


# ---------------------------------------------------------------------------
# Shared
# ---------------------------------------------------------------------------
class MessageResponse(BaseModel):
    message: str


class StatusResponse(BaseModel):
    status: str = "ok"
