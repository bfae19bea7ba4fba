"""カート集約ルート."""
from __future__ import annotations

from dataclasses import dataclass, field

from ..value_objects import CartScope, LineKey
from .cart_line import CartLine
from .product import Product


@dataclass
class Cart:
    """スコープごとに1つだけ有効な、順序付きのカート行コンテナ（集約ルート）."""

    scope: CartScope = field(default_factory=CartScope)
    _lines: list[CartLine] = field(default_factory=list)

    @classmethod
    def create(cls, scope: CartScope | None = None, lines: list[CartLine] | None = None) -> Cart:
        """新しいカートを作成する."""
        return cls(scope=scope or CartScope(), _lines=list(lines or []))

    def add_item(
        self,
        product: Product,
        quantity: int = 1,
        selected_color: str | None = None,
        selected_size: str | None = None,
        selected_type: str | None = None,
        customization_id: str | None = None,
    ) -> CartLine:
        """商品をカートに追加する.

        複合キーが一致する行があれば数量を加算し、なければ末尾に追加する。
        在庫による上限チェックはここでは行わない。
        """
        new_line = CartLine(
            product=product,
            quantity=quantity,
            selected_color=selected_color,
            selected_size=selected_size,
            selected_type=selected_type,
            customization_id=customization_id,
        )
        key = new_line.key
        for i, line in enumerate(self._lines):
            if line.key == key:
                updated = line.with_quantity(line.quantity + quantity)
                self._lines[i] = updated
                return updated
        self._lines.append(new_line)
        return new_line

    def remove_item(
        self,
        product_id: str,
        selected_color: str | None = None,
        selected_size: str | None = None,
        selected_type: str | None = None,
    ) -> int:
        """商品ID+バリエーションが一致する行を削除し、削除件数を返す.

        カスタマイズIDは比較しないため、一致する行はすべて削除される。
        """
        before = len(self._lines)
        self._lines = [
            line
            for line in self._lines
            if not line.key.matches_variant(product_id, selected_color, selected_size, selected_type)
        ]
        return before - len(self._lines)

    def update_quantity(
        self,
        product_id: str,
        quantity: int,
        selected_color: str | None = None,
        selected_size: str | None = None,
        selected_type: str | None = None,
    ) -> bool:
        """一致する行の数量を直接設定する.

        数量0でも行は削除しない。
        """
        updated = False
        for i, line in enumerate(self._lines):
            if line.key.matches_variant(product_id, selected_color, selected_size, selected_type):
                self._lines[i] = line.with_quantity(quantity)
                updated = True
        return updated

    def clear(self) -> None:
        """全行を削除する."""
        self._lines.clear()

    def find_line(self, key: LineKey) -> CartLine | None:
        """複合キーで行を検索する."""
        for line in self._lines:
            if line.key == key:
                return line
        return None

    def get_item_quantity(self, product_id: str) -> int:
        """商品IDだけで最初に一致した行の数量を返す（なければ0）."""
        for line in self._lines:
            if line.product.id == str(product_id):
                return line.quantity
        return 0

    def get_item_count(self) -> int:
        """数量の合計."""
        return sum(line.quantity for line in self._lines)

    def get_total(self) -> float:
        """合計金額（単価 × 数量の総和）."""
        return sum((line.get_subtotal() for line in self._lines), 0.0)

    def is_empty(self) -> bool:
        """カートが空か判定する."""
        return len(self._lines) == 0

    def get_lines(self) -> list[CartLine]:
        """行のリストを取得（防御的コピー）."""
        return list(self._lines)
