"""通知実装モジュール."""
from .logging_cart_notifier import LoggingCartNotifier

__all__ = ["LoggingCartNotifier"]
