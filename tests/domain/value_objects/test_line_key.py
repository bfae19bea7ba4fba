"""LineKeyのテスト."""
from src.domain.value_objects import LineKey


class TestLineKey:
    """LineKeyの単体テスト."""

    def test_未指定の値は空文字として比較される(self) -> None:
        assert LineKey.of("p1") == LineKey.of("p1", "", "", "", "")
        assert LineKey.of("p1", None, None) == LineKey.of("p1", "", "")

    def test_サイズが違えば別のキー(self) -> None:
        assert LineKey.of("p1", "red", "M") != LineKey.of("p1", "red", "L")

    def test_カスタマイズIDが違えば別のキー(self) -> None:
        assert LineKey.of("p1", customization_id="c1") != LineKey.of("p1", customization_id="c2")

    def test_matches_variantはカスタマイズIDを無視する(self) -> None:
        key = LineKey.of("p1", "red", "M", "tee", "c1")
        assert key.matches_variant("p1", "red", "M", "tee") is True
        assert key.matches_variant("p1", "red", "L", "tee") is False
        assert key.matches_variant("p2", "red", "M", "tee") is False

    def test_文字列表現(self) -> None:
        assert str(LineKey.of("p1", "red", None, "tee")) == "p1-red--tee-"
