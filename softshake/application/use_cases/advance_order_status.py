"""注文ステータス前進ユースケース."""
import logging
from dataclasses import dataclass

from softshake.domain.entities import Order
from softshake.domain.enums import OrderStatus
from softshake.domain.ports import OrderRepository, ShopNotifier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AdvanceOrderStatusResult:
    """ステータス前進結果."""

    order: Order
    previous_status: OrderStatus
    changed: bool


class AdvanceOrderStatusUseCase:
    """注文ステータスを1段階進めるユースケース.

    永続化に成功してから画面上の注文に反映する。完了済みの注文は何もしない。
    """

    def __init__(self, order_repository: OrderRepository, notifier: ShopNotifier) -> None:
        """初期化."""
        self._order_repository = order_repository
        self._notifier = notifier

    def execute(self, order: Order) -> AdvanceOrderStatusResult:
        """注文ステータスを1段階進める.

        Raises:
            RepositoryError: ステータスの保存に失敗した場合（注文は変更されない）
        """
        previous = order.status
        if order.is_completed():
            return AdvanceOrderStatusResult(order=order, previous_status=previous, changed=False)

        next_status = order.get_next_status()
        self._order_repository.update_order_status(order.order_id, next_status)
        order.apply_status(next_status)
        logger.info(f"Order {order.order_id} status: {previous.value} -> {next_status.value}")

        if order.is_completed():
            self._notifier.notify_order_sent(order.get_order_number())

        return AdvanceOrderStatusResult(order=order, previous_status=previous, changed=True)
