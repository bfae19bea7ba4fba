"""ポートモジュール."""
from .cart_notifier import CartNotifier
from .cart_storage import CartStorage
from .discount_repository import DiscountRepository

__all__ = [
    "CartNotifier",
    "CartStorage",
    "DiscountRepository",
]
