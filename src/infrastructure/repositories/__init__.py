"""リポジトリ実装モジュール."""
from .dynamodb_discount_repository import DynamoDBDiscountRepository
from .in_memory_discount_repository import InMemoryDiscountRepository

__all__ = [
    "DynamoDBDiscountRepository",
    "InMemoryDiscountRepository",
]
