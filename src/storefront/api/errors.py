"""Exception handlers shared by every router."""

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.integrations.fastapi import register_exception_handlers

from storefront.api.presenters import invalid_input
from storefront.product.product import NotProductOwner

logger = structlog.get_logger(__name__)


async def _not_found(request: Request, exc: ObjectNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"message": "Page not found"})


async def _invalid(request: Request, exc: ValidationError) -> JSONResponse:
    return invalid_input(exc)


async def _not_owner(request: Request, exc: NotProductOwner) -> JSONResponse:
    return JSONResponse(status_code=403, content={"message": "You are not authorised to change this product!"})


async def _unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled error",
        method=request.method,
        path=request.url.path,
        error=str(exc),
        exc_info=exc,
    )
    return JSONResponse(status_code=500, content={"message": "Something went wrong, please try again later."})


def register_error_handlers(app: FastAPI) -> None:
    """Protean's defaults first, then the storefront's own response shapes."""
    register_exception_handlers(app)

    app.add_exception_handler(ObjectNotFoundError, _not_found)
    app.add_exception_handler(ValidationError, _invalid)
    app.add_exception_handler(NotProductOwner, _not_owner)
    app.add_exception_handler(Exception, _unexpected)
