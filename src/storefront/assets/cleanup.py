"""Releasing images that no product uses any more.

Scheduled as a background task after the response is sent; failures are
logged and otherwise ignored.
"""

import structlog

from storefront.assets import get_asset_store

logger = structlog.get_logger(__name__)


def release_image(path: str | None) -> None:
    if not path:
        return

    try:
        get_asset_store().delete(path)
    except OSError as e:
        logger.error("Failed to release product image", path=path, error=str(e))
        return

    logger.info("Released product image", path=path)
