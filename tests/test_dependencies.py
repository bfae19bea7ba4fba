"""Dependenciesのテスト."""
from unittest.mock import patch

import pytest

from src.application import CartStateManager
from src.dependencies import Dependencies
from src.infrastructure import (
    InMemoryCartStorage,
    InMemoryDiscountRepository,
    LoggingCartNotifier,
)


@pytest.fixture(autouse=True)
def reset_dependencies(monkeypatch):
    monkeypatch.delenv("CART_TABLE_NAME", raising=False)
    monkeypatch.delenv("DISCOUNT_TABLE_NAME", raising=False)
    Dependencies.reset()
    yield
    Dependencies.reset()


class TestDependencies:
    """Dependenciesの単体テスト."""

    def test_環境変数がなければインメモリ実装(self) -> None:
        assert isinstance(Dependencies.get_cart_storage(), InMemoryCartStorage)
        assert isinstance(Dependencies.get_discount_repository(), InMemoryDiscountRepository)
        assert isinstance(Dependencies.get_cart_notifier(), LoggingCartNotifier)

    def test_同じインスタンスを返す(self) -> None:
        assert Dependencies.get_cart_storage() is Dependencies.get_cart_storage()

    def test_CART_TABLE_NAMEがあればDynamoDB実装(self, monkeypatch) -> None:
        monkeypatch.setenv("CART_TABLE_NAME", "carts")
        with patch("src.infrastructure.DynamoDBCartStorage") as mock_storage:
            storage = Dependencies.get_cart_storage()
        assert storage is mock_storage.return_value

    def test_DISCOUNT_TABLE_NAMEがあればDynamoDB実装(self, monkeypatch) -> None:
        monkeypatch.setenv("DISCOUNT_TABLE_NAME", "discounts")
        with patch("src.infrastructure.DynamoDBDiscountRepository") as mock_repository:
            repository = Dependencies.get_discount_repository()
        assert repository is mock_repository.return_value

    def test_setで差し替えられる(self) -> None:
        storage = InMemoryCartStorage()
        Dependencies.set_cart_storage(storage)
        assert Dependencies.get_cart_storage() is storage

    def test_カート状態マネージャーを生成する(self) -> None:
        storage = InMemoryCartStorage()
        Dependencies.set_cart_storage(storage)

        manager = Dependencies.create_cart_state_manager("shop-1")
        manager.add_item({"id": "p1", "name": "Tee", "price": 10})

        assert isinstance(manager, CartStateManager)
        assert storage.get_item("storefront_cart_v3_shop-1_guest") is not None

    def test_resetで破棄される(self) -> None:
        storage = Dependencies.get_cart_storage()
        Dependencies.reset()
        assert Dependencies.get_cart_storage() is not storage
