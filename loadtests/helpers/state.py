"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance maintains its own state, nothing is shared across
users. State keeps the credentials and ids returned by earlier steps so
follow-up requests can reference them.
"""

from dataclasses import dataclass, field


@dataclass
class AccountState:
    """Credentials of the simulated account."""

    email: str | None = None
    password: str | None = None
    user_id: str | None = None
    token: str | None = None

    @property
    def headers(self) -> dict:
        if self.token is None:
            return {}
        return {"Authorization": f"Bearer {self.token}"}


@dataclass
class ShopperState(AccountState):
    """Tracks a shopper browsing the catalog and checking out."""

    seen_product_ids: list[str] = field(default_factory=list)
    cart_product_ids: list[str] = field(default_factory=list)
    order_ids: list[str] = field(default_factory=list)


@dataclass
class SellerState(AccountState):
    """Tracks a seller managing their listings."""

    product_ids: list[str] = field(default_factory=list)
