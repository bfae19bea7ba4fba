"""InMemoryCartStorageのテスト."""
from src.infrastructure.storage import InMemoryCartStorage


class TestInMemoryCartStorage:
    """InMemoryCartStorageの単体テスト."""

    def test_書き込んだ値を取得できる(self) -> None:
        storage = InMemoryCartStorage()
        storage.set_item("k", "[]")
        assert storage.get_item("k") == "[]"

    def test_存在しないキーはNone(self) -> None:
        assert InMemoryCartStorage().get_item("missing") is None

    def test_削除したキーはNone(self) -> None:
        storage = InMemoryCartStorage({"k": "v"})
        storage.remove_item("k")
        assert storage.get_item("k") is None
        assert storage.keys() == []

    def test_存在しないキーの削除はエラーにならない(self) -> None:
        InMemoryCartStorage().remove_item("missing")

    def test_初期値は呼び出し元の辞書と共有しない(self) -> None:
        initial = {"k": "v"}
        storage = InMemoryCartStorage(initial)
        storage.set_item("k2", "v2")
        assert "k2" not in initial
