"""エンティティモジュール."""
from .cart import Cart
from .cart_line import CartLine
from .discount_code import DiscountCode, normalize_code
from .product import Product

__all__ = [
    "Cart",
    "CartLine",
    "DiscountCode",
    "Product",
    "normalize_code",
]
