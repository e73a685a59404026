"""月次売上レポート集計ドメインサービス."""
from __future__ import annotations

from datetime import datetime

from ..entities import Order, ReportedOrder, SalesReport


class SalesReportCalculator:
    """保存済みレポートと当月の注文をマージして集計するサービス."""

    @staticmethod
    def is_in_period(order: Order, year: int, month: int) -> bool:
        """注文が指定年月に作成されたか判定."""
        return order.created_at.year == year and order.created_at.month == month

    @staticmethod
    def merge(
        year: int,
        month: int,
        existing: SalesReport | None,
        orders: list[Order],
        now: datetime,
    ) -> SalesReport:
        """既存レポートの注文に当月の新しい注文を加えて再集計する.

        同じ注文IDは既存レポート側を優先する。
        """
        merged: list[ReportedOrder] = list(existing.orders) if existing else []
        known = {o.order_id for o in merged}
        for order in orders:
            if not SalesReportCalculator.is_in_period(order, year, month):
                continue
            if order.order_id.value in known:
                continue
            merged.append(ReportedOrder.from_order(order))
            known.add(order.order_id.value)
        return SalesReport.build(year, month, merged, now)
