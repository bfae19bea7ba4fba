"""CartMergeServiceのテスト."""
from src.domain.entities import CartLine, Product
from src.domain.services import CartMergeService


def _line(product_id: str, quantity: int, stock: int | None = None, **kwargs) -> CartLine:
    return CartLine(product=Product(id=product_id, name=product_id, stock=stock), quantity=quantity, **kwargs)


def _summary(lines: list[CartLine]) -> list[tuple[str, int]]:
    return [(line.product.id, line.quantity) for line in lines]


class TestCartMergeService:
    """CartMergeServiceの単体テスト."""

    def test_同じ商品は数量を合計しユーザーの並びを優先する(self) -> None:
        guest = [_line("A", 2)]
        user = [_line("A", 1), _line("B", 1)]
        merged = CartMergeService.merge(user, guest)
        assert _summary(merged) == [("A", 3), ("B", 1)]

    def test_ゲストだけの商品は末尾に追加される(self) -> None:
        merged = CartMergeService.merge([_line("A", 1)], [_line("C", 2)])
        assert _summary(merged) == [("A", 1), ("C", 2)]

    def test_在庫数で頭打ちにする(self) -> None:
        merged = CartMergeService.merge([_line("A", 5, stock=7)], [_line("A", 5, stock=7)])
        assert _summary(merged) == [("A", 7)]

    def test_在庫不明なら頭打ちにしない(self) -> None:
        merged = CartMergeService.merge([_line("A", 5)], [_line("A", 5)])
        assert _summary(merged) == [("A", 10)]

    def test_在庫0の行は落とす(self) -> None:
        merged = CartMergeService.merge([_line("A", 1, stock=0), _line("B", 1)], [])
        assert _summary(merged) == [("B", 1)]

    def test_バリエーションが違えば別の行(self) -> None:
        merged = CartMergeService.merge([_line("A", 1, selected_size="M")], [_line("A", 1, selected_size="L")])
        assert len(merged) == 2

    def test_両方空なら空(self) -> None:
        assert CartMergeService.merge([], []) == []

    def test_ユーザーの商品スナップショットを残す(self) -> None:
        user_line = CartLine(product=Product(id="A", name="user copy"), quantity=1)
        guest_line = CartLine(product=Product(id="A", name="guest copy"), quantity=1)
        merged = CartMergeService.merge([user_line], [guest_line])
        assert merged[0].product.name == "user copy"
