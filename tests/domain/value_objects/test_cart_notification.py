"""CartNotificationのテスト."""
from src.domain.enums import CartEventType
from src.domain.value_objects import CartNotification, truncate_product_name


class TestTruncateProductName:
    """truncate_product_nameの単体テスト."""

    def test_30文字以下はそのまま(self) -> None:
        name = "a" * 30
        assert truncate_product_name(name) == name

    def test_30文字を超えると切り詰める(self) -> None:
        assert truncate_product_name("a" * 31) == "a" * 30 + "..."


class TestCartNotification:
    """CartNotificationの単体テスト."""

    def test_item_added(self) -> None:
        notification = CartNotification.item_added("p1", "Classic Tee", 2)
        assert notification.event_type == CartEventType.ITEM_ADDED
        assert notification.title == "Item added to cart"
        assert notification.description == "Classic Tee added to your cart"
        assert notification.quantity == 2

    def test_quantity_increased(self) -> None:
        notification = CartNotification.quantity_increased("p1", "Classic Tee", 5)
        assert notification.event_type == CartEventType.QUANTITY_INCREASED
        assert notification.title == "Cart updated"
        assert notification.description == "Classic Tee quantity increased to 5"

    def test_長い商品名は切り詰めて表示(self) -> None:
        notification = CartNotification.item_added("p1", "x" * 40, 1)
        assert notification.description == "x" * 30 + "... added to your cart"

    def test_cleared(self) -> None:
        notification = CartNotification.cleared()
        assert notification.event_type == CartEventType.CART_CLEARED
        assert notification.title == "Cart cleared"
        assert notification.product_id is None
