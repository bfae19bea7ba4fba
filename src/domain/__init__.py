"""ドメイン層モジュール."""
from .entities import Cart, CartLine, DiscountCode, Product
from .enums import CartEventType, DiscountRejectionReason
from .ports import CartNotifier, CartStorage, DiscountRepository
from .services import (
    CartMergeService,
    CartPayloadCodec,
    CheckoutPricingService,
    CorruptCartPayloadError,
)
from .value_objects import (
    CartNotification,
    CartScope,
    LineKey,
    OrderSummary,
    PointsDiscountTier,
    ProductCategory,
)

__all__ = [
    # Enums
    "CartEventType",
    "DiscountRejectionReason",
    # Value Objects
    "CartNotification",
    "CartScope",
    "LineKey",
    "OrderSummary",
    "PointsDiscountTier",
    "ProductCategory",
    # Entities
    "Cart",
    "CartLine",
    "DiscountCode",
    "Product",
    # Ports
    "CartNotifier",
    "CartStorage",
    "DiscountRepository",
    # Services
    "CartMergeService",
    "CartPayloadCodec",
    "CheckoutPricingService",
    "CorruptCartPayloadError",
]
