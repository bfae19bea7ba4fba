"""注文金額サマリーを表現する値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal


def round_currency(value: float) -> float:
    """金額をセント単位に四捨五入する."""
    return float(Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class OrderSummary:
    """チェックアウト時の小計・送料・税・割引・合計."""

    subtotal: float
    shipping: float
    tax: float
    discount: float = 0.0
    points_used: int = 0
    discount_code: str | None = None

    def __post_init__(self) -> None:
        """バリデーション."""
        for name in ("subtotal", "shipping", "tax", "discount"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} cannot be negative")
        if self.points_used < 0:
            raise ValueError("points_used cannot be negative")
        if self.discount > self.subtotal:
            raise ValueError("discount cannot exceed subtotal")

    @property
    def total(self) -> float:
        """合計金額（小計 + 送料 + 税 - 割引）."""
        return round_currency(self.subtotal + self.shipping + self.tax - self.discount)

    @property
    def is_free_shipping(self) -> bool:
        """送料無料か判定する."""
        return self.shipping == 0

    def format_total(self) -> str:
        """表示用フォーマット（例: "$12.50"）."""
        return f"${self.total:,.2f}"
