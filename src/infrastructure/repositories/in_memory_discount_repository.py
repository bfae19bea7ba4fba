"""割引コードリポジトリのインメモリ実装."""
from src.domain.entities import DiscountCode, normalize_code
from src.domain.ports import DiscountRepository


class InMemoryDiscountRepository(DiscountRepository):
    """割引コードリポジトリのインメモリ実装."""

    def __init__(self) -> None:
        """初期化."""
        self._discounts: dict[str, DiscountCode] = {}

    def save(self, discount: DiscountCode) -> None:
        """割引コードを保存する."""
        self._discounts[discount.discount_id] = discount

    def find_by_code(self, code: str) -> DiscountCode | None:
        """コード文字列で検索する."""
        normalized = normalize_code(code)
        for discount in self._discounts.values():
            if discount.code == normalized:
                return discount
        return None

    def find_all(self) -> list[DiscountCode]:
        """全件を作成日時の新しい順に取得する."""
        return sorted(self._discounts.values(), key=lambda d: d.created_at, reverse=True)

    def delete(self, discount_id: str) -> None:
        """割引コードを削除する."""
        self._discounts.pop(discount_id, None)
