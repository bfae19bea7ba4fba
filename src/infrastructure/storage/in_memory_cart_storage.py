"""カートストレージのインメモリ実装."""
from src.domain.ports import CartStorage


class InMemoryCartStorage(CartStorage):
    """カートストレージのインメモリ実装."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        """初期化."""
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        """キーの値を取得する."""
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        """キーに値を書き込む."""
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        """キーを削除する."""
        self._items.pop(key, None)

    def keys(self) -> list[str]:
        """保持しているキーの一覧（テスト・デバッグ用）."""
        return list(self._items)
