"""カート行エンティティ."""
from __future__ import annotations

from dataclasses import dataclass, replace

from ..value_objects import LineKey
from .product import Product


@dataclass(frozen=True)
class CartLine:
    """カート内の1つの購入対象（商品 + バリエーション + 数量）."""

    product: Product
    quantity: int
    selected_color: str | None = None
    selected_size: str | None = None
    selected_type: str | None = None
    customization_id: str | None = None

    @property
    def key(self) -> LineKey:
        """同一性を判定する複合キー."""
        return LineKey.of(
            product_id=self.product.id,
            selected_color=self.selected_color,
            selected_size=self.selected_size,
            selected_type=self.selected_type,
            customization_id=self.customization_id,
        )

    def with_quantity(self, quantity: int) -> CartLine:
        """数量を置き換えた新しい行を返す."""
        return replace(self, quantity=quantity)

    def get_subtotal(self) -> float:
        """行の小計（単価 × 数量）."""
        return self.product.price * self.quantity
