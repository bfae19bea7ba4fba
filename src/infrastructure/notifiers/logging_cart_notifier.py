"""カート通知のロギング実装."""
import logging

from src.domain.ports import CartNotifier
from src.domain.value_objects import CartNotification

logger = logging.getLogger(__name__)


class LoggingCartNotifier(CartNotifier):
    """UIが接続されていない場合に通知をログへ流す実装."""

    def notify(self, notification: CartNotification) -> None:
        """通知をINFOレベルで記録する."""
        logger.info(f"{notification.title}: {notification.description}")
