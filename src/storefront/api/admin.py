"""FastAPI routes for sellers: listing, editing and deleting their products.

Product forms are multipart because they carry an image. Every field is
taken as a plain string so the domain decides what is valid and the
response can hand the submitted values back.
"""

import structlog
from fastapi import APIRouter, BackgroundTasks, Depends, File, Form, UploadFile
from fastapi.responses import JSONResponse, RedirectResponse
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain

from storefront.api.dependencies import current_user, get_settings
from storefront.api.presenters import invalid_input, product_schema
from storefront.api.schemas import (
    MessageResponse,
    ProductEditResponse,
    ProductIdResponse,
    ProductListResponse,
)
from storefront.assets import get_asset_store
from storefront.assets.cleanup import release_image
from storefront.config import Settings
from storefront.product.creation import ListProduct
from storefront.product.details import EditProduct
from storefront.product.images import check_image_upload
from storefront.product.product import NotProductOwner, Product
from storefront.product.removal import DeleteProduct

logger = structlog.get_logger(__name__)

admin_router = APIRouter(prefix="/admin", tags=["admin"])


async def _store_image(image: UploadFile | None, settings: Settings) -> str:
    """Validate an uploaded image and store it. Returns its public path."""
    content = await image.read() if image is not None else b""
    check_image_upload(
        image.content_type if image is not None else None,
        len(content),
        accepted_types=settings.accepted_image_types,
    )
    return get_asset_store().save(image.filename, content)


def _has_upload(image: UploadFile | None) -> bool:
    return image is not None and bool(image.filename)


def _price_or_none(price: str):
    return price.strip() or None


@admin_router.get("/products", response_model=ProductListResponse)
async def list_own_products(user=Depends(current_user)) -> ProductListResponse:
    products = current_domain.repository_for(Product).owned_by(user.id)
    return ProductListResponse(products=[product_schema(p) for p in products])


@admin_router.post("/add-product", status_code=201, response_model=ProductIdResponse)
async def add_product(
    title: str = Form(""),
    price: str = Form(""),
    description: str = Form(""),
    image: UploadFile | None = File(None),
    user=Depends(current_user),
    settings: Settings = Depends(get_settings),
):
    old_input = {"title": title, "price": price, "description": description}

    try:
        image_url = await _store_image(image, settings)
    except ValidationError as exc:
        return invalid_input(exc, old_input)

    try:
        command = ListProduct(
            owner_id=str(user.id),
            title=title,
            price=_price_or_none(price),
            description=description,
            image_url=image_url,
        )
        product_id = current_domain.process(command, asynchronous=False)
    except ValidationError as exc:
        release_image(image_url)
        return invalid_input(exc, old_input)

    return ProductIdResponse(product_id=product_id)


@admin_router.get("/edit-product/{product_id}", response_model=ProductEditResponse)
async def edit_product_form(product_id: str, edit: bool = False, user=Depends(current_user)):
    if not edit:
        return RedirectResponse(url="/", status_code=303)

    product = current_domain.repository_for(Product).get(product_id)
    if not product.is_owned_by(user.id):
        return RedirectResponse(url="/", status_code=303)

    return ProductEditResponse(product=product_schema(product))


@admin_router.post("/edit-product", response_model=ProductIdResponse)
async def edit_product(
    background_tasks: BackgroundTasks,
    product_id: str = Form(""),
    title: str = Form(""),
    price: str = Form(""),
    description: str = Form(""),
    image: UploadFile | None = File(None),
    user=Depends(current_user),
    settings: Settings = Depends(get_settings),
):
    old_input = {"product_id": product_id, "title": title, "price": price, "description": description}

    new_image_url = None
    if _has_upload(image):
        try:
            new_image_url = await _store_image(image, settings)
        except ValidationError as exc:
            return invalid_input(exc, old_input)

    try:
        command = EditProduct(
            product_id=product_id or None,
            user_id=str(user.id),
            title=title,
            price=_price_or_none(price),
            description=description,
            image_url=new_image_url,
        )
        outcome = current_domain.process(command, asynchronous=False)
    except ValidationError as exc:
        release_image(new_image_url)
        return invalid_input(exc, old_input)
    except ObjectNotFoundError:
        release_image(new_image_url)
        raise

    if not outcome.updated:
        release_image(new_image_url)
        return RedirectResponse(url="/", status_code=303)

    background_tasks.add_task(release_image, outcome.released_image_url)
    return ProductIdResponse(product_id=product_id)


@admin_router.delete("/product/{product_id}", response_model=MessageResponse)
async def delete_product(product_id: str, background_tasks: BackgroundTasks, user=Depends(current_user)):
    command = DeleteProduct(product_id=product_id, user_id=str(user.id))

    try:
        image_url = current_domain.process(command, asynchronous=False)
    except ObjectNotFoundError:
        return JSONResponse(status_code=404, content={"message": "Product not found!"})
    except NotProductOwner:
        return JSONResponse(status_code=403, content={"message": "You are not authorised to delete the product!"})
    except Exception:
        logger.exception("Deleting the product failed", product_id=product_id, user_id=str(user.id))
        return JSONResponse(status_code=500, content={"message": "Deleting the product failed!"})

    background_tasks.add_task(release_image, image_url)
    return MessageResponse(message="Success! Product Deleted")
