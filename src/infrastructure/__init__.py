"""インフラストラクチャ層モジュール."""
from .notifiers import LoggingCartNotifier
from .repositories import DynamoDBDiscountRepository, InMemoryDiscountRepository
from .storage import DynamoDBCartStorage, InMemoryCartStorage

__all__ = [
    "DynamoDBCartStorage",
    "DynamoDBDiscountRepository",
    "InMemoryCartStorage",
    "InMemoryDiscountRepository",
    "LoggingCartNotifier",
]
