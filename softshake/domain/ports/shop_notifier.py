"""店舗向け通知インターフェース."""
from abc import ABC, abstractmethod


class ShopNotifier(ABC):
    """管理画面・店舗スタッフへの通知."""

    @abstractmethod
    def notify_new_order(self) -> None:
        """新しい注文の受信を通知する."""
        pass

    @abstractmethod
    def notify_order_sent(self, order_number: str) -> None:
        """注文の完了（送り出し）を通知する."""
        pass

    @abstractmethod
    def notify_stock_update(self, name: str, in_stock: bool) -> None:
        """在庫状態の変更を通知する."""
        pass
