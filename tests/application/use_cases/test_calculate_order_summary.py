"""CalculateOrderSummaryUseCaseのテスト."""
from datetime import date

import pytest

from src.application.use_cases import (
    CalculateOrderSummaryUseCase,
    DiscountNotApplicableError,
    DiscountNotFoundError,
    InsufficientPointsError,
)
from src.domain.entities import DiscountCode
from src.domain.enums import DiscountRejectionReason
from src.domain.value_objects import PointsDiscountTier
from src.infrastructure.repositories import InMemoryDiscountRepository

TODAY = date(2026, 6, 15)


@pytest.fixture
def repository() -> InMemoryDiscountRepository:
    repository = InMemoryDiscountRepository()
    repository.save(DiscountCode(discount_id="d-1", code="SAVE10", discount_percent=10))
    repository.save(
        DiscountCode(
            discount_id="d-2",
            code="BIG20",
            discount_percent=20,
            min_order_amount=100,
        )
    )
    return repository


class TestCalculateOrderSummaryUseCase:
    """CalculateOrderSummaryUseCaseの単体テスト."""

    def test_割引なしのサマリー(self, repository) -> None:
        summary = CalculateOrderSummaryUseCase(repository).execute(40.0, today=TODAY)
        assert summary.subtotal == 40.0
        assert summary.shipping == 5.99
        assert summary.tax == 0.0
        assert summary.discount == 0.0
        assert summary.total == 45.99

    def test_小計50以上は送料無料(self, repository) -> None:
        summary = CalculateOrderSummaryUseCase(repository).execute(50.0, today=TODAY)
        assert summary.is_free_shipping is True
        assert summary.total == 50.0

    def test_税率を反映する(self, repository) -> None:
        summary = CalculateOrderSummaryUseCase(repository).execute(40.0, tax_rate=0.08, today=TODAY)
        assert summary.tax == 3.2
        assert summary.total == 49.19

    def test_割引コードを適用する(self, repository) -> None:
        summary = CalculateOrderSummaryUseCase(repository).execute(
            40.0, discount_code=" save10 ", today=TODAY
        )
        assert summary.discount == 4.0
        assert summary.discount_code == "SAVE10"
        assert summary.total == 41.99

    def test_存在しないコードはエラー(self, repository) -> None:
        with pytest.raises(DiscountNotFoundError) as exc_info:
            CalculateOrderSummaryUseCase(repository).execute(
                40.0, discount_code="NOPE", today=TODAY
            )
        assert exc_info.value.code == "NOPE"

    def test_最低注文金額未満はエラー(self, repository) -> None:
        with pytest.raises(DiscountNotApplicableError) as exc_info:
            CalculateOrderSummaryUseCase(repository).execute(
                40.0, discount_code="BIG20", today=TODAY
            )
        assert exc_info.value.reason == DiscountRejectionReason.BELOW_MINIMUM_ORDER

    def test_ポイント割引を適用する(self, repository) -> None:
        tier = PointsDiscountTier(
            points_required=100, discount_percent=10, discount_amount=4.0, is_available=True
        )
        summary = CalculateOrderSummaryUseCase(repository).execute(
            40.0, points_tier=tier, today=TODAY
        )
        assert summary.discount == 4.0
        assert summary.points_used == 100

    def test_割引コードとポイント割引は合算される(self, repository) -> None:
        tier = PointsDiscountTier(
            points_required=100, discount_percent=10, discount_amount=4.0, is_available=True
        )
        summary = CalculateOrderSummaryUseCase(repository).execute(
            40.0, discount_code="SAVE10", points_tier=tier, today=TODAY
        )
        assert summary.discount == 8.0
        assert summary.total == 37.99

    def test_ポイントが足りないティアはエラー(self, repository) -> None:
        tier = PointsDiscountTier(
            points_required=500, discount_percent=30, discount_amount=12.0, is_available=False
        )
        with pytest.raises(InsufficientPointsError) as exc_info:
            CalculateOrderSummaryUseCase(repository).execute(
                40.0, points_tier=tier, today=TODAY
            )
        assert exc_info.value.points_required == 500

    def test_存在しないコードのエラーは理由を持つ(self, repository) -> None:
        with pytest.raises(DiscountNotFoundError) as exc_info:
            CalculateOrderSummaryUseCase(repository).execute(
                40.0, discount_code="NOPE", today=TODAY
            )
        assert exc_info.value.reason == DiscountRejectionReason.NOT_FOUND
        assert exc_info.value.reason.get_message() == "This discount code doesn't exist."

    def test_ティアの割引額は渡された小計で計算し直す(self, repository) -> None:
        tier = PointsDiscountTier(
            points_required=500, discount_percent=30, discount_amount=300.0, is_available=True
        )
        summary = CalculateOrderSummaryUseCase(repository).execute(
            10.0, shipping_fee=0, points_tier=tier, today=TODAY
        )
        assert summary.discount == 3.0
        assert summary.total == 7.0

    def test_割引の合計は小計を超えない(self, repository) -> None:
        repository.save(DiscountCode(discount_id="d-3", code="ALL", discount_percent=100))
        tier = PointsDiscountTier(
            points_required=500, discount_percent=30, discount_amount=30.0, is_available=True
        )
        summary = CalculateOrderSummaryUseCase(repository).execute(
            100.0, discount_code="ALL", points_tier=tier, today=TODAY
        )
        assert summary.discount == 100.0
        assert summary.total == 0.0
        assert summary.format_total() == "$0.00"
