"""列挙型モジュール."""
from .cart_event_type import CartEventType
from .discount_rejection_reason import DiscountRejectionReason

__all__ = [
    "CartEventType",
    "DiscountRejectionReason",
]
