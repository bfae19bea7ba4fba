"""カート状態マネージャー."""
from __future__ import annotations

import logging
from typing import Any

from src.domain.entities import Cart, CartLine, Product
from src.domain.ports import CartNotifier, CartStorage
from src.domain.services import CartMergeService, CartPayloadCodec
from src.domain.value_objects import (
    LEGACY_CART_STORAGE_KEY,
    CartNotification,
    CartScope,
    LineKey,
)

logger = logging.getLogger(__name__)


class CartStateManager:
    """現在のスコープ（テナント, ユーザー or ゲスト）のカートを保持するサービス.

    スコープが変わるとストレージから読み込み、ゲストからサインインした時は
    ゲストのカートをユーザーのカートへ統合する。カートが変わるたびに
    ストレージへ書き戻し、空になったらキーを削除する。

    ストレージの例外はログに記録して「データなし」として扱い、呼び出し元には投げない。
    """

    def __init__(
        self,
        storage: CartStorage,
        tenant_id: str | None = None,
        user_id: str | None = None,
        notifier: CartNotifier | None = None,
    ) -> None:
        """初期化.

        Args:
            storage: カートストレージ
            tenant_id: テナントID（未指定ならdefault）
            user_id: サインイン中のユーザーID（ゲストならNone）
            notifier: カート通知（未指定なら通知しない）
        """
        self._storage = storage
        self._notifier = notifier
        self._scope = CartScope.of(tenant_id, user_id)
        self._cart = Cart.create(self._scope)
        self._initialized = False
        # 統合直後の保存を1回だけ抑止するフラグ
        self._skip_next_save = False
        self._previous_user_id: str | None = None
        self._apply_scope(self._scope)

    @property
    def scope(self) -> CartScope:
        """現在のスコープ."""
        return self._scope

    @property
    def items(self) -> list[CartLine]:
        """カート行のリスト."""
        return self._cart.get_lines()

    @property
    def cart_items_count(self) -> int:
        """数量の合計."""
        return self._cart.get_item_count()

    @property
    def cart_total(self) -> float:
        """合計金額."""
        return self._cart.get_total()

    @property
    def is_cart_initialized(self) -> bool:
        """現在のスコープの読み込みが完了しているか."""
        return self._initialized

    def get_total(self) -> float:
        """合計金額を計算する."""
        return self._cart.get_total()

    # ------------------------------------------------------------------
    # スコープ変更
    # ------------------------------------------------------------------
    def change_scope(self, tenant_id: str | None, user_id: str | None) -> None:
        """テナント切替やサインイン/サインアウトを反映する."""
        scope = CartScope.of(tenant_id, user_id)
        if scope == self._scope and self._initialized:
            return
        self._apply_scope(scope)

    def _apply_scope(self, scope: CartScope) -> None:
        self._scope = scope
        if scope.user_id is not None and scope.user_id != self._previous_user_id:
            self._merge_guest_cart(scope)
        else:
            self._previous_user_id = scope.user_id
            self._load(scope)

    def _load(self, scope: CartScope) -> None:
        """スコープのカートをストレージから読み込む."""
        self._initialized = False
        key = scope.storage_key()
        try:
            raw = self._storage.get_item(key)
            if raw is not None:
                lines = CartPayloadCodec.decode(raw)
            elif scope.is_guest:
                lines = self._migrate_legacy_cart(key)
            else:
                lines = []
            self._cart = Cart.create(scope, lines)
        except Exception as e:
            logger.warning(f"Discarding unreadable cart {key}: {e}")
            self._cart = Cart.create(scope)
            self._discard(key)
        self._initialized = True

    def _migrate_legacy_cart(self, key: str) -> list[CartLine]:
        """スコープ導入前のキーからゲストのカートを移行する."""
        try:
            raw = self._storage.get_item(LEGACY_CART_STORAGE_KEY)
            if raw is None:
                return []
            lines = CartPayloadCodec.decode(raw)
        except Exception as e:
            logger.warning(f"Ignoring unreadable legacy cart: {e}")
            return []
        if lines:
            logger.info(f"Migrating legacy cart to {key}")
            self._write(key, lines)
        return lines

    def _merge_guest_cart(self, scope: CartScope) -> None:
        """ゲストのカートをサインインしたユーザーのカートへ統合する."""
        self._skip_next_save = True
        user_key = scope.storage_key()
        guest_key = scope.guest_scope().storage_key()
        # ユーザーのキーへの書き込みが済んだら、以降の失敗でも統合結果を保持する
        fallback_lines = self._cart.get_lines()
        try:
            user_lines = self._read_lines(user_key)
            guest_lines = self._read_lines(guest_key)
            merged = CartMergeService.merge(user_lines, guest_lines)
            self._write(user_key, merged)
            fallback_lines = merged
            self._storage.remove_item(guest_key)
            self._replace_cart(Cart.create(scope, merged))
            logger.info(
                f"Merged {len(guest_lines)} guest lines into {user_key} "
                f"({len(merged)} lines)"
            )
        except Exception as e:
            logger.error(f"Failed to merge guest cart into {user_key}: {e}")
            self._skip_next_save = False
            self._cart = Cart.create(scope, fallback_lines)
        finally:
            self._previous_user_id = scope.user_id
            self._initialized = True

    def _read_lines(self, key: str) -> list[CartLine]:
        """統合用にカートを読む（壊れていれば空として扱う）."""
        try:
            raw = self._storage.get_item(key)
            if raw is None:
                return []
            return CartPayloadCodec.decode(raw)
        except Exception as e:
            logger.warning(f"Treating unreadable cart {key} as empty: {e}")
            return []

    # ------------------------------------------------------------------
    # 永続化
    # ------------------------------------------------------------------
    def _replace_cart(self, cart: Cart) -> None:
        self._cart = cart
        self._on_cart_changed()

    def _on_cart_changed(self) -> None:
        """カート変更時の保存処理（抑止フラグが立っていれば1回だけ飛ばす）."""
        if self._skip_next_save:
            self._skip_next_save = False
            return
        if not self._initialized:
            return
        key = self._scope.storage_key()
        try:
            self._write(key, self._cart.get_lines())
        except Exception as e:
            logger.error(f"Failed to save cart {key}: {e}")

    def _write(self, key: str, lines: list[CartLine]) -> None:
        # 空のカートは [] を書かずにキーごと消す
        if lines:
            self._storage.set_item(key, CartPayloadCodec.encode(lines))
        else:
            self._storage.remove_item(key)

    def _discard(self, key: str) -> None:
        try:
            self._storage.remove_item(key)
        except Exception as e:
            logger.error(f"Failed to delete cart {key}: {e}")

    def _notify(self, notification: CartNotification) -> None:
        if self._notifier is not None:
            self._notifier.notify(notification)

    # ------------------------------------------------------------------
    # カート操作
    # ------------------------------------------------------------------
    def add_item(
        self,
        product: Product | dict[str, Any],
        quantity: int = 1,
        selected_color: str | None = None,
        selected_size: str | None = None,
        selected_type: str | None = None,
        customization_id: str | None = None,
    ) -> CartLine:
        """商品をカートに追加する（同じ複合キーなら数量を加算）."""
        snapshot = Product.from_record(product)
        key = LineKey.of(snapshot.id, selected_color, selected_size, selected_type, customization_id)
        existed = self._cart.find_line(key) is not None
        line = self._cart.add_item(
            snapshot,
            quantity=quantity,
            selected_color=selected_color,
            selected_size=selected_size,
            selected_type=selected_type,
            customization_id=customization_id,
        )
        self._on_cart_changed()

        if existed:
            self._notify(CartNotification.quantity_increased(snapshot.id, snapshot.name, line.quantity))
        else:
            self._notify(CartNotification.item_added(snapshot.id, snapshot.name, quantity))
        return line

    def remove_item(
        self,
        product_id: str,
        selected_color: str | None = None,
        selected_size: str | None = None,
        selected_type: str | None = None,
    ) -> int:
        """商品ID+バリエーションが一致する行を削除する."""
        removed = self._cart.remove_item(product_id, selected_color, selected_size, selected_type)
        self._on_cart_changed()
        return removed

    def update_quantity(
        self,
        product_id: str,
        quantity: int,
        selected_color: str | None = None,
        selected_size: str | None = None,
        selected_type: str | None = None,
    ) -> bool:
        """一致する行の数量を設定する（0でも行は残る）."""
        updated = self._cart.update_quantity(
            product_id, quantity, selected_color, selected_size, selected_type
        )
        self._on_cart_changed()
        return updated

    def clear_cart(self) -> None:
        """カートを空にして永続化キーを削除する."""
        self._cart.clear()
        self._discard(self._scope.storage_key())
        self._notify(CartNotification.cleared())

    def get_item_quantity(self, product_id: str) -> int:
        """商品IDだけで最初に一致した行の数量を返す."""
        return self._cart.get_item_quantity(product_id)
