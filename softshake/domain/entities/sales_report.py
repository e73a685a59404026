"""月次売上レポートエンティティ."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..enums import OrderStatus
from ..value_objects import Money

from .order import Order


@dataclass(frozen=True)
class ReportedOrder:
    """レポートに記録された注文のスナップショット."""

    order_id: str
    customer_name: str
    total_amount: Money
    status: OrderStatus
    created_at: datetime
    item_count: int

    @classmethod
    def from_order(cls, order: Order) -> ReportedOrder:
        """注文からスナップショットを生成する."""
        return cls(
            order_id=order.order_id.value,
            customer_name=order.customer.name,
            total_amount=order.total_amount,
            status=order.status,
            created_at=order.created_at,
            item_count=sum(item.quantity for item in order.items),
        )


@dataclass
class SalesReport:
    """年月単位の売上集計."""

    year: int
    month: int
    orders: list[ReportedOrder]
    total_sales: Money
    total_orders: int
    average_order_value: Money
    last_updated: datetime

    def __post_init__(self) -> None:
        """バリデーション."""
        if not 1 <= self.month <= 12:
            raise ValueError(f"Invalid month: {self.month}")

    @classmethod
    def build(
        cls, year: int, month: int, orders: list[ReportedOrder], now: datetime
    ) -> SalesReport:
        """注文リストから集計値を計算してレポートを生成する."""
        total_sales = Money.sum_of([o.total_amount for o in orders])
        return cls(
            year=year,
            month=month,
            orders=list(orders),
            total_sales=total_sales,
            total_orders=len(orders),
            average_order_value=total_sales.divide(len(orders)),
            last_updated=now,
        )

    def get_period_key(self) -> str:
        """期間キー（例: "2026-10"）."""
        return f"{self.year:04d}-{self.month:02d}"

    def contains(self, order_id: str) -> bool:
        """指定注文が記録済みか判定."""
        return any(o.order_id == order_id for o in self.orders)
