"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance maintains its own state; nothing is shared across users.
State tracks ids returned by creation endpoints so follow-up operations can
reference them.
"""

from dataclasses import dataclass, field


@dataclass
class VendorState:
    """Tracks a simulated vendor and the products it listed."""

    vendor_id: str | None = None
    product_ids: list[str] = field(default_factory=list)

    @property
    def headers(self) -> dict:
        return {"X-User-Id": self.vendor_id or ""}


@dataclass
class ShopperState:
    """Tracks a simulated shopper's cart and orders."""

    user_id: str | None = None
    cart_product_ids: list[str] = field(default_factory=list)
    order_ids: list[str] = field(default_factory=list)

    @property
    def headers(self) -> dict:
        return {"X-User-Id": self.user_id or ""}
