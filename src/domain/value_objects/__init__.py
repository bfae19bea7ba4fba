"""値オブジェクトモジュール."""
from .cart_notification import CartNotification, truncate_product_name
from .cart_scope import (
    CART_STORAGE_BASE,
    CART_STORAGE_VERSION,
    DEFAULT_TENANT_ID,
    LEGACY_CART_STORAGE_KEY,
    CartScope,
)
from .line_key import LineKey
from .order_summary import OrderSummary, round_currency
from .points_discount_tier import PointsDiscountTier
from .product_category import UNCATEGORIZED, ProductCategory

__all__ = [
    "CART_STORAGE_BASE",
    "CART_STORAGE_VERSION",
    "CartNotification",
    "CartScope",
    "DEFAULT_TENANT_ID",
    "LEGACY_CART_STORAGE_KEY",
    "LineKey",
    "OrderSummary",
    "PointsDiscountTier",
    "ProductCategory",
    "UNCATEGORIZED",
    "round_currency",
    "truncate_product_name",
]
