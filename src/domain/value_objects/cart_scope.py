"""カートスコープを表現する値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass

CART_STORAGE_BASE = "storefront_cart"
CART_STORAGE_VERSION = "v3"
# スコープ導入前に使われていたキー（ゲストのマイグレーション時のみ参照）
LEGACY_CART_STORAGE_KEY = "storefront_cart_v2"
DEFAULT_TENANT_ID = "default"


@dataclass(frozen=True)
class CartScope:
    """カートを保持する (テナント, ユーザー or ゲスト) の組."""

    tenant_id: str = DEFAULT_TENANT_ID
    user_id: str | None = None

    def __post_init__(self) -> None:
        """正規化."""
        # テナントIDが空ならdefaultに寄せる
        if not self.tenant_id:
            object.__setattr__(self, "tenant_id", DEFAULT_TENANT_ID)
        if not self.user_id:
            object.__setattr__(self, "user_id", None)

    @classmethod
    def of(cls, tenant_id: str | None, user_id: str | None = None) -> CartScope:
        """テナントIDとユーザーIDからスコープを生成する."""
        return cls(tenant_id=tenant_id or DEFAULT_TENANT_ID, user_id=user_id)

    @property
    def is_guest(self) -> bool:
        """ゲストのスコープか判定する."""
        return self.user_id is None

    def storage_key(self) -> str:
        """永続化ストレージのキーを生成する.

        例: ``storefront_cart_v3_shop-1_user_u-42`` / ``storefront_cart_v3_shop-1_guest``
        """
        owner = f"user_{self.user_id}" if self.user_id is not None else "guest"
        return f"{CART_STORAGE_BASE}_{CART_STORAGE_VERSION}_{self.tenant_id}_{owner}"

    def guest_scope(self) -> CartScope:
        """同一テナントのゲストスコープを返す."""
        return CartScope(tenant_id=self.tenant_id)

    def __str__(self) -> str:
        """文字列表現."""
        return self.storage_key()
