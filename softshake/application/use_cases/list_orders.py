"""注文一覧取得ユースケース."""
import logging
from dataclasses import dataclass, field

from softshake.domain.entities import Order
from softshake.domain.enums import OrderStatus
from softshake.domain.ports import OrderRepository, RepositoryError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OrderListResult:
    """注文一覧取得結果."""

    orders: list[Order]
    status_counts: dict[OrderStatus, int] = field(default_factory=dict)
    total_count: int = 0
    is_available: bool = True

    def count_of(self, status: OrderStatus) -> int:
        """指定ステータスの注文数."""
        return self.status_counts.get(status, 0)


class ListOrdersUseCase:
    """管理画面の注文一覧を取得するユースケース."""

    def __init__(self, order_repository: OrderRepository) -> None:
        """初期化."""
        self._order_repository = order_repository

    def execute(
        self,
        status: OrderStatus | str | None = None,
        query: str = "",
    ) -> OrderListResult:
        """注文一覧を取得する.

        Args:
            status: 絞り込むステータス（None または "all" で全件、未知の値は0件）
            query: 氏名・電話番号・注文IDの部分一致検索語

        Returns:
            新しい順の注文一覧とステータス別件数
        """
        try:
            orders = self._order_repository.list_orders()
        except RepositoryError as e:
            logger.warning(f"Could not load orders: {e}")
            return OrderListResult(orders=[], is_available=False)

        counts = {s: 0 for s in OrderStatus}
        for order in orders:
            counts[order.status] += 1

        target = None
        if status not in (None, "all"):
            try:
                target = OrderStatus(status)
            except ValueError:
                logger.warning(f"Unknown status filter: {status}")
                return OrderListResult(
                    orders=[], status_counts=counts, total_count=len(orders)
                )

        query = (query or "").strip()
        filtered = [
            o for o in orders
            if (target is None or o.status == target) and o.matches_search(query)
        ]
        return OrderListResult(
            orders=filtered,
            status_counts=counts,
            total_count=len(orders),
        )
