"""ストレージ実装モジュール."""
from .dynamodb_cart_storage import DynamoDBCartStorage
from .in_memory_cart_storage import InMemoryCartStorage

__all__ = [
    "DynamoDBCartStorage",
    "InMemoryCartStorage",
]
