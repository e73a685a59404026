"""月次売上レポート生成ユースケース."""
import logging
from datetime import datetime

from softshake.domain.entities import SalesReport
from softshake.domain.ports import OrderRepository, SalesReportRepository
from softshake.domain.services import SalesReportCalculator

logger = logging.getLogger(__name__)


class GenerateMonthlyReportUseCase:
    """当月の売上レポートを更新するユースケース."""

    def __init__(
        self,
        order_repository: OrderRepository,
        sales_report_repository: SalesReportRepository,
    ) -> None:
        """初期化."""
        self._order_repository = order_repository
        self._sales_report_repository = sales_report_repository

    def execute(self, now: datetime | None = None) -> SalesReport:
        """既存レポートに当月の新しい注文を加えて保存する.

        Args:
            now: 基準日時（指定しない場合は現在日時）

        Returns:
            保存したレポート
        """
        now = now or datetime.now()
        existing = self._sales_report_repository.find_by_period(now.year, now.month)
        orders = self._order_repository.list_orders()

        report = SalesReportCalculator.merge(now.year, now.month, existing, orders, now)
        self._sales_report_repository.save(report)
        logger.info(
            f"Sales report {report.get_period_key()}: "
            f"{report.total_orders} orders, total {report.total_sales}"
        )
        return report
