"""変更通知フィードインターフェース."""
from abc import ABC, abstractmethod
from typing import Callable

from ..enums import ChangeEvent

ChangeListener = Callable[[ChangeEvent], None]
Unsubscribe = Callable[[], None]


class ChangeNotificationFeed(ABC):
    """「商品変更」「注文追加」を通知する外部プッシュ機構.

    通知は少なくとも1回届き、重複することがある。
    購読者はイベント種別だけを見て対象の一覧を再取得する。
    """

    @abstractmethod
    def subscribe(self, event: ChangeEvent, listener: ChangeListener) -> Unsubscribe:
        """イベントを購読し、購読解除関数を返す."""
        pass

    @abstractmethod
    def publish(self, event: ChangeEvent) -> None:
        """イベントを通知する."""
        pass
