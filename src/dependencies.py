"""依存性注入コンテナ."""
import os

from src.application import CartStateManager
from src.domain.ports import CartNotifier, CartStorage, DiscountRepository
from src.infrastructure import (
    InMemoryCartStorage,
    InMemoryDiscountRepository,
    LoggingCartNotifier,
)


def _use_dynamodb_cart() -> bool:
    """カートの永続化にDynamoDBを使用するか判定する."""
    # CART_TABLE_NAME が設定されていればDynamoDBを使用
    return os.environ.get("CART_TABLE_NAME") is not None


class Dependencies:
    """依存性を管理するコンテナ.

    CART_TABLE_NAME / DISCOUNT_TABLE_NAME 環境変数が設定されている場合はDynamoDB実装を使用。
    そうでない場合はインメモリ実装を使用（ローカル開発・テスト用）。
    """

    _cart_storage: CartStorage | None = None
    _cart_notifier: CartNotifier | None = None
    _discount_repository: DiscountRepository | None = None

    @classmethod
    def get_cart_storage(cls) -> CartStorage:
        """カートストレージを取得する."""
        if cls._cart_storage is None:
            if _use_dynamodb_cart():
                from src.infrastructure import DynamoDBCartStorage

                cls._cart_storage = DynamoDBCartStorage()
            else:
                cls._cart_storage = InMemoryCartStorage()
        return cls._cart_storage

    @classmethod
    def set_cart_storage(cls, storage: CartStorage) -> None:
        """カートストレージを設定する（テスト用）."""
        cls._cart_storage = storage

    @classmethod
    def get_cart_notifier(cls) -> CartNotifier:
        """カート通知を取得する."""
        if cls._cart_notifier is None:
            cls._cart_notifier = LoggingCartNotifier()
        return cls._cart_notifier

    @classmethod
    def set_cart_notifier(cls, notifier: CartNotifier) -> None:
        """カート通知を設定する（テスト用）."""
        cls._cart_notifier = notifier

    @classmethod
    def get_discount_repository(cls) -> DiscountRepository:
        """割引コードリポジトリを取得する."""
        if cls._discount_repository is None:
            if os.environ.get("DISCOUNT_TABLE_NAME") is not None:
                from src.infrastructure import DynamoDBDiscountRepository

                cls._discount_repository = DynamoDBDiscountRepository()
            else:
                cls._discount_repository = InMemoryDiscountRepository()
        return cls._discount_repository

    @classmethod
    def set_discount_repository(cls, repository: DiscountRepository) -> None:
        """割引コードリポジトリを設定する（テスト用）."""
        cls._discount_repository = repository

    @classmethod
    def create_cart_state_manager(
        cls, tenant_id: str | None = None, user_id: str | None = None
    ) -> CartStateManager:
        """現在のスコープに対するカート状態マネージャーを生成する."""
        return CartStateManager(
            storage=cls.get_cart_storage(),
            tenant_id=tenant_id,
            user_id=user_id,
            notifier=cls.get_cart_notifier(),
        )

    @classmethod
    def reset(cls) -> None:
        """全ての依存性をリセットする（テスト用）."""
        cls._cart_storage = None
        cls._cart_notifier = None
        cls._discount_repository = None
