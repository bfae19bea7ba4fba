"""カートストレージインターフェース."""
from abc import ABC, abstractmethod


class CartStorage(ABC):
    """シリアライズ済みカートを保持するキーバリューストアのインターフェース."""

    @abstractmethod
    def get_item(self, key: str) -> str | None:
        """キーの値を取得する（存在しない場合はNone）."""
        pass

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """キーに値を書き込む."""
        pass

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """キーを削除する（存在しなくてもエラーにしない）."""
        pass
