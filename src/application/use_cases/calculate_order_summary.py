"""注文金額計算ユースケース."""
from datetime import date

from src.domain.enums import DiscountRejectionReason
from src.domain.ports import DiscountRepository
from src.domain.services import DEFAULT_SHIPPING_FEE, CheckoutPricingService
from src.domain.value_objects import OrderSummary, PointsDiscountTier, round_currency


class DiscountNotFoundError(Exception):
    """割引コードが見つからないエラー."""

    def __init__(self, code: str) -> None:
        self.code = code
        self.reason = DiscountRejectionReason.NOT_FOUND
        super().__init__(f"Discount not found: {code}")


class DiscountNotApplicableError(Exception):
    """割引コードが注文に適用できないエラー."""

    def __init__(self, code: str, reason: DiscountRejectionReason) -> None:
        self.code = code
        self.reason = reason
        super().__init__(f"Discount {code} is not applicable: {reason.value}")


class InsufficientPointsError(Exception):
    """ポイント残高がティアに足りないエラー."""

    def __init__(self, points_required: int) -> None:
        self.points_required = points_required
        super().__init__(f"Not enough points: {points_required} required")


class CalculateOrderSummaryUseCase:
    """カートの小計から注文金額サマリーを計算するユースケース."""

    def __init__(self, discount_repository: DiscountRepository) -> None:
        """初期化.

        Args:
            discount_repository: 割引コードリポジトリ
        """
        self._discount_repository = discount_repository

    def execute(
        self,
        subtotal: float,
        shipping_fee: float = DEFAULT_SHIPPING_FEE,
        tax_rate: float = 0.0,
        discount_code: str | None = None,
        points_tier: PointsDiscountTier | None = None,
        today: date | None = None,
    ) -> OrderSummary:
        """注文金額サマリーを計算する.

        Args:
            subtotal: カートの合計金額
            shipping_fee: テナントの送料設定
            tax_rate: テナントの税率（0.08 = 8%）
            discount_code: 入力された割引コード
            points_tier: 選択されたポイント割引ティア（割引額はsubtotalから再計算する）
            today: 判定日（テスト用、省略時は今日）

        Returns:
            注文金額サマリー

        Raises:
            DiscountNotFoundError: 割引コードが存在しない場合
            DiscountNotApplicableError: 割引コードが適用できない場合
            InsufficientPointsError: ポイントが足りない場合
        """
        discount = 0.0
        applied_code = None
        if discount_code:
            found = self._discount_repository.find_by_code(discount_code)
            if found is None:
                raise DiscountNotFoundError(discount_code)
            reason = found.check_applicability(subtotal, today)
            if reason is not None:
                raise DiscountNotApplicableError(found.code, reason)
            discount += found.calculate_discount(subtotal)
            applied_code = found.code

        points_used = 0
        if points_tier is not None:
            if not points_tier.is_available:
                raise InsufficientPointsError(points_tier.points_required)
            # 割引額はティアの割引率とこの小計から求める
            discount += round_currency(subtotal * points_tier.discount_percent / 100)
            points_used = points_tier.points_required

        # 割引の合計は小計を超えない
        discount = min(discount, subtotal)

        return CheckoutPricingService.summarize(
            subtotal=subtotal,
            shipping_fee=shipping_fee,
            tax_rate=tax_rate,
            discount=discount,
            points_used=points_used,
            discount_code=applied_code,
        )
