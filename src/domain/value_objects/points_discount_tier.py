"""ポイント割引ティアを表現する値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PointsDiscountTier:
    """ポイントを消費して受けられる割引の段階."""

    points_required: int
    discount_percent: int
    discount_amount: float
    is_available: bool

    def __post_init__(self) -> None:
        """バリデーション."""
        if self.points_required < 0:
            raise ValueError("points_required cannot be negative")
        if not 0 < self.discount_percent <= 100:
            raise ValueError(f"Invalid discount_percent: {self.discount_percent}")
