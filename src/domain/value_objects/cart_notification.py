"""カート通知を表現する値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass

from ..enums import CartEventType

PRODUCT_NAME_MAX_LENGTH = 30


def truncate_product_name(name: str, max_length: int = PRODUCT_NAME_MAX_LENGTH) -> str:
    """長い商品名を切り詰める."""
    if len(name) <= max_length:
        return name
    return name[:max_length] + "..."


@dataclass(frozen=True)
class CartNotification:
    """カート操作の結果としてユーザーに伝える通知."""

    event_type: CartEventType
    title: str
    description: str
    product_id: str | None = None
    quantity: int | None = None

    @classmethod
    def item_added(cls, product_id: str, product_name: str, quantity: int) -> CartNotification:
        """新しい行が追加された通知."""
        return cls(
            event_type=CartEventType.ITEM_ADDED,
            title="Item added to cart",
            description=f"{truncate_product_name(product_name)} added to your cart",
            product_id=product_id,
            quantity=quantity,
        )

    @classmethod
    def quantity_increased(
        cls, product_id: str, product_name: str, quantity: int
    ) -> CartNotification:
        """既存行の数量が増えた通知."""
        return cls(
            event_type=CartEventType.QUANTITY_INCREASED,
            title="Cart updated",
            description=f"{truncate_product_name(product_name)} quantity increased to {quantity}",
            product_id=product_id,
            quantity=quantity,
        )

    @classmethod
    def cleared(cls) -> CartNotification:
        """カートが空にされた通知."""
        return cls(
            event_type=CartEventType.CART_CLEARED,
            title="Cart cleared",
            description="All items have been removed from your cart",
        )
