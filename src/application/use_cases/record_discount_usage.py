"""割引コード利用記録ユースケース."""
from src.domain.entities import DiscountCode
from src.domain.ports import DiscountRepository

from .calculate_order_summary import DiscountNotFoundError


class DiscountUsageLimitError(Exception):
    """割引コードの利用上限に達しているエラー."""

    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__(f"Discount has reached maximum uses: {code}")


class RecordDiscountUsageUseCase:
    """注文確定時に割引コードの利用回数を加算するユースケース."""

    def __init__(self, discount_repository: DiscountRepository) -> None:
        """初期化.

        Args:
            discount_repository: 割引コードリポジトリ
        """
        self._discount_repository = discount_repository

    def execute(self, code: str) -> DiscountCode:
        """利用回数を1増やして保存する.

        Raises:
            DiscountNotFoundError: 割引コードが存在しない場合
            DiscountUsageLimitError: 利用上限に達している場合
        """
        discount = self._discount_repository.find_by_code(code)
        if discount is None:
            raise DiscountNotFoundError(code)
        try:
            discount.increment_usage()
        except ValueError as e:
            raise DiscountUsageLimitError(discount.code) from e
        self._discount_repository.save(discount)
        return discount
