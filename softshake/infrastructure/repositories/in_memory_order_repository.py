"""注文リポジトリのインメモリ実装."""
from datetime import datetime

from softshake.domain.entities import Order, OrderPayload
from softshake.domain.enums import OrderStatus
from softshake.domain.identifiers import OrderId
from softshake.domain.ports import OrderRepository, RepositoryError


class InMemoryOrderRepository(OrderRepository):
    """注文リポジトリのインメモリ実装."""

    def __init__(self) -> None:
        """初期化."""
        self._orders: dict[str, Order] = {}
        self._sequence: dict[str, int] = {}

    def create_order(self, payload: OrderPayload) -> Order:
        """注文を登録する."""
        order = Order.from_payload(payload)
        self._orders[order.order_id.value] = order
        self._sequence[order.order_id.value] = len(self._sequence)
        return order

    def update_order_status(self, order_id: OrderId, status: OrderStatus) -> None:
        """注文ステータスを更新する."""
        order = self._orders.get(order_id.value)
        if order is None:
            raise RepositoryError(f"Order not found: {order_id}")
        order.status = status
        order.updated_at = datetime.now()

    def find_by_id(self, order_id: OrderId) -> Order | None:
        """注文IDで検索する."""
        return self._orders.get(order_id.value)

    def list_orders(self, status: OrderStatus | None = None) -> list[Order]:
        """注文一覧を作成日時の新しい順で取得する."""
        orders = [
            o for o in self._orders.values()
            if status is None or o.status == status
        ]
        return sorted(
            orders,
            key=lambda o: (o.created_at, self._sequence[o.order_id.value]),
            reverse=True,
        )
