"""割引コードリポジトリインターフェース."""
from abc import ABC, abstractmethod

from ..entities import DiscountCode


class DiscountRepository(ABC):
    """割引コードリポジトリのインターフェース."""

    @abstractmethod
    def save(self, discount: DiscountCode) -> None:
        """割引コードを保存する."""
        pass

    @abstractmethod
    def find_by_code(self, code: str) -> DiscountCode | None:
        """コード文字列で検索する（大文字小文字・前後空白は無視）."""
        pass

    @abstractmethod
    def find_all(self) -> list[DiscountCode]:
        """全件を作成日時の新しい順に取得する."""
        pass

    @abstractmethod
    def delete(self, discount_id: str) -> None:
        """割引コードを削除する."""
        pass
