"""変更通知フィードのインメモリ実装."""
import logging

from softshake.domain.enums import ChangeEvent
from softshake.domain.ports import ChangeListener, ChangeNotificationFeed, Unsubscribe

logger = logging.getLogger(__name__)


class InMemoryChangeFeed(ChangeNotificationFeed):
    """同一プロセス内で購読者を同期的に呼び出すフィード."""

    def __init__(self) -> None:
        """初期化."""
        self._listeners: dict[ChangeEvent, list[ChangeListener]] = {}

    def subscribe(self, event: ChangeEvent, listener: ChangeListener) -> Unsubscribe:
        """イベントを購読し、購読解除関数を返す."""
        self._listeners.setdefault(event, []).append(listener)

        def unsubscribe() -> None:
            listeners = self._listeners.get(event, [])
            if listener in listeners:
                listeners.remove(listener)

        return unsubscribe

    def publish(self, event: ChangeEvent) -> None:
        """イベントを購読者に通知する."""
        listeners = list(self._listeners.get(event, []))
        logger.info(f"Publishing {event.value} to {len(listeners)} listener(s)")
        for listener in listeners:
            listener(event)

    def count_listeners(self, event: ChangeEvent) -> int:
        """購読者数を取得する."""
        return len(self._listeners.get(event, []))
