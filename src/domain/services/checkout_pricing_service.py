"""チェックアウト金額計算ドメインサービス."""
import math

from ..value_objects import OrderSummary, PointsDiscountTier, round_currency

FREE_SHIPPING_THRESHOLD = 50
DEFAULT_SHIPPING_FEE = 5.99
POINTS_TIER_COUNT = 5


class CheckoutPricingService:
    """小計から送料・税・割引・合計を計算するサービス."""

    @staticmethod
    def calculate_shipping(subtotal: float, shipping_fee: float = DEFAULT_SHIPPING_FEE) -> float:
        """送料を計算する（閾値以上または送料0設定なら無料）."""
        if subtotal >= FREE_SHIPPING_THRESHOLD or shipping_fee == 0:
            return 0.0
        return round_currency(shipping_fee)

    @staticmethod
    def calculate_tax(subtotal: float, tax_rate: float) -> float:
        """税額を計算する（セント単位で四捨五入）."""
        if not tax_rate or math.isnan(tax_rate):
            return 0.0
        return round_currency(subtotal * tax_rate)

    @staticmethod
    def calculate_points_tiers(
        subtotal: float, points_per_product: int, available_points: int
    ) -> list[PointsDiscountTier]:
        """ポイント割引のティアを計算する.

        ティアiは points_per_product * i ポイントで (5 + 5i)% 割引。
        """
        tiers = []
        for i in range(1, POINTS_TIER_COUNT + 1):
            points_required = points_per_product * i
            discount_percent = 5 + i * 5
            tiers.append(
                PointsDiscountTier(
                    points_required=points_required,
                    discount_percent=discount_percent,
                    discount_amount=round_currency(subtotal * discount_percent / 100),
                    is_available=available_points >= points_required,
                )
            )
        return tiers

    @classmethod
    def summarize(
        cls,
        subtotal: float,
        shipping_fee: float = DEFAULT_SHIPPING_FEE,
        tax_rate: float = 0.0,
        discount: float = 0.0,
        points_used: int = 0,
        discount_code: str | None = None,
    ) -> OrderSummary:
        """注文金額サマリーを組み立てる."""
        return OrderSummary(
            subtotal=round_currency(subtotal),
            shipping=cls.calculate_shipping(subtotal, shipping_fee),
            tax=cls.calculate_tax(subtotal, tax_rate),
            discount=round_currency(discount),
            points_used=points_used,
            discount_code=discount_code,
        )
