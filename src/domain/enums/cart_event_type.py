"""カートイベント種別の列挙型."""
from enum import Enum


class CartEventType(Enum):
    """カート操作で発生する通知の種別."""

    ITEM_ADDED = "item_added"
    QUANTITY_INCREASED = "quantity_increased"
    CART_CLEARED = "cart_cleared"
