"""Storefront domain: catalog, carts, checkout and customer accounts.

Products are owned by the users who list them. Every user carries a cart
that checkout snapshots into an immutable order.
"""

import structlog
from protean.domain import Domain

from storefront.utils.logging import configure_logging

configure_logging()

storefront = Domain(name="storefront")

logger = structlog.get_logger(__name__)
