"""FastAPI application factory."""

import time
from uuid import uuid4

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from storefront.api.admin import admin_router
from storefront.api.auth import auth_router
from storefront.api.errors import register_error_handlers
from storefront.api.routes import cart_router, order_router, shop_router
from storefront.assets import set_asset_store
from storefront.assets.local_store import LocalAssetStore
from storefront.config import Settings
from storefront.domain import storefront
from storefront.notification import configure_mail
from storefront.utils.logging import add_context, clear_context

access_logger = structlog.get_logger("storefront.access")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the web app around explicit settings (read from the environment when omitted)."""
    settings = settings or Settings.from_env()

    configure_mail(settings)
    set_asset_store(LocalAssetStore(root=settings.image_dir, url_prefix=settings.image_url_prefix))

    app = FastAPI(
        title="Storefront API",
        description="Online shop: catalog, cart, checkout and accounts",
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        """Push the storefront domain context and log the request once answered."""
        clear_context()
        add_context(request_id=request.headers.get("X-Request-ID") or uuid4().hex)
        started = time.perf_counter()

        with storefront.domain_context():
            response = await call_next(request)

        access_logger.info(
            "Request handled",
            method=request.method,
            path=request.url.path,
            status=response.status_code,
            duration_ms=round((time.perf_counter() - started) * 1000, 2),
        )
        return response

    register_error_handlers(app)

    app.include_router(shop_router)
    app.include_router(cart_router)
    app.include_router(order_router)
    app.include_router(admin_router)
    app.include_router(auth_router)

    settings.image_dir.mkdir(parents=True, exist_ok=True)
    app.mount(settings.image_url_prefix, StaticFiles(directory=settings.image_dir), name="images")

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app
