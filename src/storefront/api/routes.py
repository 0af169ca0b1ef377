"""FastAPI routes for shoppers: catalog, cart and orders."""

from fastapi import APIRouter, Depends
from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from storefront.api.dependencies import current_user, get_settings
from storefront.api.presenters import invalid_input, order_schema, product_schema
from storefront.api.schemas import (
    CartLineSchema,
    CartResponse,
    CatalogPageResponse,
    OrderIdResponse,
    OrderListResponse,
    PaginationSchema,
    ProductRefRequest,
    ProductSchema,
    StatusResponse,
)
from storefront.cart.items import AddToCart, RemoveFromCart
from storefront.cart.view import populated_cart
from storefront.config import Settings
from storefront.order.order import Order
from storefront.order.placement import PlaceOrder
from storefront.product.product import Product

# ---------------------------------------------------------------------------
# Shop Router
# ---------------------------------------------------------------------------
shop_router = APIRouter(tags=["shop"])


@shop_router.get("/", response_model=CatalogPageResponse)
@shop_router.get("/products", response_model=CatalogPageResponse)
async def list_products(page: int = 1, settings: Settings = Depends(get_settings)) -> CatalogPageResponse:
    catalog_page = current_domain.repository_for(Product).page(page=page, page_size=settings.items_per_page)
    return CatalogPageResponse(
        products=[product_schema(p) for p in catalog_page.items],
        pagination=PaginationSchema(
            current_page=catalog_page.current_page,
            has_next_page=catalog_page.has_next_page,
            has_previous_page=catalog_page.has_previous_page,
            next_page=catalog_page.next_page,
            previous_page=catalog_page.previous_page,
            last_page=catalog_page.last_page,
            total=catalog_page.total,
        ),
    )


@shop_router.get("/products/{product_id}", response_model=ProductSchema)
async def get_product(product_id: str) -> ProductSchema:
    product = current_domain.repository_for(Product).get(product_id)
    return product_schema(product)


# ---------------------------------------------------------------------------
# Cart Router
# ---------------------------------------------------------------------------
cart_router = APIRouter(tags=["cart"])


@cart_router.get("/cart", response_model=CartResponse)
async def get_cart(user=Depends(current_user)) -> CartResponse:
    lines = populated_cart(user.id)
    return CartResponse(
        products=[CartLineSchema(product=product_schema(line.product), quantity=line.quantity) for line in lines],
        total_quantity=sum(line.quantity for line in lines),
        total_price=round(sum(line.product.price * line.quantity for line in lines), 2),
    )


@cart_router.post("/cart", response_model=StatusResponse)
async def add_to_cart(body: ProductRefRequest, user=Depends(current_user)) -> StatusResponse:
    command = AddToCart(
        user_id=str(user.id),
        product_id=body.product_id,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@cart_router.post("/cart-delete-item", response_model=StatusResponse)
async def remove_from_cart(body: ProductRefRequest, user=Depends(current_user)) -> StatusResponse:
    command = RemoveFromCart(
        user_id=str(user.id),
        product_id=body.product_id,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(tags=["orders"])


@order_router.post("/create-order", status_code=201, response_model=OrderIdResponse)
async def create_order(user=Depends(current_user)) -> OrderIdResponse:
    try:
        order_id = current_domain.process(PlaceOrder(user_id=str(user.id)), asynchronous=False)
    except ValidationError as exc:
        return invalid_input(exc)
    return OrderIdResponse(order_id=order_id)


@order_router.get("/orders", response_model=OrderListResponse)
async def list_orders(user=Depends(current_user)) -> OrderListResponse:
    orders = current_domain.repository_for(Order).placed_by(user.id)
    return OrderListResponse(orders=[order_schema(order) for order in orders])
