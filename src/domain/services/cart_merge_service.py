"""ゲストカートとユーザーカートの統合ドメインサービス."""
from ..entities import CartLine
from ..value_objects import LineKey


class CartMergeService:
    """サインイン時にゲストのカートをユーザーのカートへ統合するサービス."""

    @staticmethod
    def merge(user_lines: list[CartLine], guest_lines: list[CartLine]) -> list[CartLine]:
        """2つのカートを複合キーで統合する.

        ユーザーの行を先に並べ、ゲストの行は同じキーなら数量を加算、なければ末尾に追加する。
        在庫数が分かっている商品は在庫数で頭打ちにし、0以下になった行は落とす。
        """
        merged: dict[LineKey, CartLine] = {}
        for line in [*user_lines, *guest_lines]:
            existing = merged.get(line.key)
            if existing is None:
                merged[line.key] = line
            else:
                merged[line.key] = existing.with_quantity(existing.quantity + line.quantity)

        result: list[CartLine] = []
        for line in merged.values():
            quantity = line.quantity
            if line.product.has_stock_limit():
                quantity = min(quantity, line.product.stock)
            if quantity <= 0:
                continue
            result.append(line if quantity == line.quantity else line.with_quantity(quantity))
        return result
