"""ドメインサービスモジュール."""
from .cart_merge_service import CartMergeService
from .cart_payload_codec import CartPayloadCodec, CorruptCartPayloadError
from .checkout_pricing_service import (
    DEFAULT_SHIPPING_FEE,
    FREE_SHIPPING_THRESHOLD,
    CheckoutPricingService,
)

__all__ = [
    "CartMergeService",
    "CartPayloadCodec",
    "CheckoutPricingService",
    "CorruptCartPayloadError",
    "DEFAULT_SHIPPING_FEE",
    "FREE_SHIPPING_THRESHOLD",
]
