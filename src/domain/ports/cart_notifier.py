"""カート通知インターフェース."""
from abc import ABC, abstractmethod

from ..value_objects import CartNotification


class CartNotifier(ABC):
    """カート操作の結果をユーザーに伝えるインターフェース."""

    @abstractmethod
    def notify(self, notification: CartNotification) -> None:
        """通知を送る."""
        pass
