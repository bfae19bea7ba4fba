"""カート行の同一性キーを表現する値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LineKey:
    """商品ID・バリエーション・カスタマイズIDからなる複合キー.

    未指定の値は空文字として比較する。
    """

    product_id: str
    selected_color: str = ""
    selected_size: str = ""
    selected_type: str = ""
    customization_id: str = ""

    @classmethod
    def of(
        cls,
        product_id: str,
        selected_color: str | None = None,
        selected_size: str | None = None,
        selected_type: str | None = None,
        customization_id: str | None = None,
    ) -> LineKey:
        """省略可能な値を空文字に寄せてキーを生成する."""
        return cls(
            product_id=str(product_id),
            selected_color=selected_color or "",
            selected_size=selected_size or "",
            selected_type=selected_type or "",
            customization_id=customization_id or "",
        )

    def matches_variant(
        self,
        product_id: str,
        selected_color: str | None = None,
        selected_size: str | None = None,
        selected_type: str | None = None,
    ) -> bool:
        """カスタマイズIDを除いた商品ID+バリエーションで一致するか判定する."""
        return (
            self.product_id == str(product_id)
            and self.selected_color == (selected_color or "")
            and self.selected_size == (selected_size or "")
            and self.selected_type == (selected_type or "")
        )

    def __str__(self) -> str:
        """文字列表現."""
        return "-".join(
            [
                self.product_id,
                self.selected_color,
                self.selected_size,
                self.selected_type,
                self.customization_id,
            ]
        )
