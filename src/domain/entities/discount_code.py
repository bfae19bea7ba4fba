"""割引コードエンティティ."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone

from ..enums import DiscountRejectionReason
from ..value_objects import round_currency


def normalize_code(code: str) -> str:
    """割引コードを比較用に正規化する（前後空白除去 + 大文字化）."""
    return code.strip().upper()


@dataclass
class DiscountCode:
    """テナントが発行するパーセント割引コード."""

    discount_id: str
    code: str
    discount_percent: float
    description: str | None = None
    max_uses: int = 0
    current_uses: int = 0
    active: bool = True
    start_date: date | None = None
    end_date: date | None = None
    min_order_amount: float = 0
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        """バリデーション."""
        if not self.discount_id:
            raise ValueError("discount_id cannot be empty")
        self.code = normalize_code(self.code)
        if not self.code:
            raise ValueError("Discount code cannot be empty")
        if not 0 < self.discount_percent <= 100:
            raise ValueError(f"Invalid discount_percent: {self.discount_percent}")
        if self.max_uses < 0 or self.current_uses < 0:
            raise ValueError("Usage counters cannot be negative")

    def check_applicability(
        self, order_amount: float, today: date | None = None
    ) -> DiscountRejectionReason | None:
        """注文に適用できない理由を返す（適用可能ならNone）.

        開始日・終了日はどちらもその日を含む。max_usesが0なら無制限。
        """
        today = today or datetime.now(timezone.utc).date()
        if not self.active:
            return DiscountRejectionReason.INACTIVE
        if self.start_date is not None and today < self.start_date:
            return DiscountRejectionReason.NOT_YET_ACTIVE
        if self.end_date is not None and today > self.end_date:
            return DiscountRejectionReason.EXPIRED
        if self.has_reached_usage_limit():
            return DiscountRejectionReason.USAGE_LIMIT_REACHED
        if self.min_order_amount > 0 and order_amount < self.min_order_amount:
            return DiscountRejectionReason.BELOW_MINIMUM_ORDER
        return None

    def is_applicable(self, order_amount: float, today: date | None = None) -> bool:
        """注文に適用可能か判定する."""
        return self.check_applicability(order_amount, today) is None

    def has_reached_usage_limit(self) -> bool:
        """利用回数の上限に達しているか判定する."""
        return self.max_uses > 0 and self.current_uses >= self.max_uses

    def calculate_discount(self, subtotal: float) -> float:
        """小計に対する割引額を計算する."""
        return round_currency(subtotal * self.discount_percent / 100)

    def increment_usage(self) -> None:
        """利用回数を1増やす."""
        if self.has_reached_usage_limit():
            raise ValueError("Discount has already reached maximum uses")
        self.current_uses += 1
