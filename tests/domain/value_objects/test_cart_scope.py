"""CartScopeのテスト."""
import pytest

from src.domain.value_objects import DEFAULT_TENANT_ID, CartScope


class TestCartScope:
    """CartScopeの単体テスト."""

    def test_ユーザーのストレージキー(self) -> None:
        scope = CartScope.of("shop-1", "u-42")
        assert scope.storage_key() == "storefront_cart_v3_shop-1_user_u-42"

    def test_ゲストのストレージキー(self) -> None:
        scope = CartScope.of("shop-1", None)
        assert scope.storage_key() == "storefront_cart_v3_shop-1_guest"

    @pytest.mark.parametrize("tenant_id", [None, ""])
    def test_テナントIDが空ならdefault(self, tenant_id) -> None:
        scope = CartScope.of(tenant_id, None)
        assert scope.tenant_id == DEFAULT_TENANT_ID
        assert scope.storage_key() == "storefront_cart_v3_default_guest"

    def test_空文字のユーザーIDはゲスト扱い(self) -> None:
        scope = CartScope.of("shop-1", "")
        assert scope.is_guest is True
        assert scope.user_id is None

    def test_テナントが違えばキーも違う(self) -> None:
        """同じユーザーでもテナントをまたいでカートが混ざらないことを確認."""
        a = CartScope.of("shop-1", "u-1")
        b = CartScope.of("shop-2", "u-1")
        assert a.storage_key() != b.storage_key()

    def test_ユーザーとゲストでキーが違う(self) -> None:
        assert CartScope.of("t", "guest").storage_key() != CartScope.of("t", None).storage_key()

    def test_guest_scopeは同一テナントのゲスト(self) -> None:
        scope = CartScope.of("shop-1", "u-1")
        guest = scope.guest_scope()
        assert guest.tenant_id == "shop-1"
        assert guest.is_guest is True

    def test_等価性(self) -> None:
        assert CartScope.of("shop-1", "u-1") == CartScope.of("shop-1", "u-1")
        assert CartScope.of(None, None) == CartScope()
