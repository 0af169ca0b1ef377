"""Turning aggregates and errors into response bodies."""

from fastapi.responses import JSONResponse
from protean.exceptions import ValidationError

from storefront.api.schemas import (
    OrderLineSchema,
    OrderSchema,
    OrderUserSchema,
    ProductSchema,
    ProductSnapshotSchema,
)


def product_schema(product) -> ProductSchema:
    return ProductSchema(
        id=str(product.id),
        title=product.title,
        price=product.price,
        description=product.description,
        image_url=product.image_url,
        owner_id=str(product.owner_id),
        created_at=product.created_at,
    )


def order_schema(order) -> OrderSchema:
    return OrderSchema(
        id=str(order.id),
        user=OrderUserSchema(email=order.email, user_id=str(order.user_id)),
        products=[
            OrderLineSchema(
                product=ProductSnapshotSchema(
                    product_id=str(line.product.product_id),
                    title=line.product.title,
                    price=line.product.price,
                    description=line.product.description,
                    image_url=line.product.image_url,
                    owner_id=str(line.product.owner_id) if line.product.owner_id else None,
                ),
                quantity=line.quantity,
            )
            for line in order.products
        ],
        total=order.total,
        placed_at=order.placed_at,
    )


def invalid_input(exc: ValidationError, old_input: dict | None = None) -> JSONResponse:
    """422 with field messages and the submitted values, so the form can be refilled."""
    return JSONResponse(
        status_code=422,
        content={
            "errors": {field: list(messages) for field, messages in dict(exc.messages).items()},
            "old_input": old_input or {},
        },
    )
