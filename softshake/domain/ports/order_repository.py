"""注文リポジトリインターフェース."""
from abc import ABC, abstractmethod

from ..entities import Order, OrderPayload
from ..enums import OrderStatus
from ..identifiers import OrderId


class OrderRepository(ABC):
    """注文リポジトリのインターフェース."""

    @abstractmethod
    def create_order(self, payload: OrderPayload) -> Order:
        """注文を登録する（ID・作成日時を採番し、ステータスはPENDING）."""
        pass

    @abstractmethod
    def update_order_status(self, order_id: OrderId, status: OrderStatus) -> None:
        """注文ステータスを更新する."""
        pass

    @abstractmethod
    def find_by_id(self, order_id: OrderId) -> Order | None:
        """注文IDで検索する."""
        pass

    @abstractmethod
    def list_orders(self, status: OrderStatus | None = None) -> list[Order]:
        """注文一覧を作成日時の新しい順で取得する."""
        pass
