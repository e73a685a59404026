"""DynamoDB 売上レポートリポジトリ実装."""
import logging
import os
from datetime import datetime

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from softshake.domain.entities import ReportedOrder, SalesReport
from softshake.domain.enums import OrderStatus
from softshake.domain.ports import RepositoryError, SalesReportRepository
from softshake.domain.value_objects import Money

logger = logging.getLogger(__name__)


class DynamoDBSalesReportRepository(SalesReportRepository):
    """DynamoDB 売上レポートリポジトリ（period = "YYYY-MM" をキーとする）."""

    def __init__(self, table_name: str | None = None) -> None:
        """初期化."""
        self._table_name = table_name or os.environ.get(
            "SALES_REPORT_TABLE_NAME", "softshake-sales-report"
        )
        self._dynamodb = boto3.resource("dynamodb")
        self._table = self._dynamodb.Table(self._table_name)

    def find_by_period(self, year: int, month: int) -> SalesReport | None:
        """年月で検索する."""
        try:
            response = self._table.get_item(Key={"period": f"{year:04d}-{month:02d}"})
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Failed to get sales report {year}-{month}: {e}")
            raise RepositoryError(f"Failed to get sales report: {e}") from e
        item = response.get("Item")
        if item is None:
            return None
        return self._from_dynamodb_item(item)

    def save(self, report: SalesReport) -> None:
        """レポートを登録・更新する."""
        try:
            self._table.put_item(Item=self._to_dynamodb_item(report))
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Failed to save sales report {report.get_period_key()}: {e}")
            raise RepositoryError(f"Failed to save sales report: {e}") from e

    @staticmethod
    def _to_dynamodb_item(report: SalesReport) -> dict:
        """SalesReport を DynamoDB アイテムに変換する."""
        return {
            "period": report.get_period_key(),
            "year": report.year,
            "month": report.month,
            "orders": [
                {
                    "order_id": o.order_id,
                    "customer_name": o.customer_name,
                    "total_amount": o.total_amount.value,
                    "status": o.status.value,
                    "created_at": o.created_at.isoformat(),
                    "item_count": o.item_count,
                }
                for o in report.orders
            ],
            "total_sales": report.total_sales.value,
            "total_orders": report.total_orders,
            "average_order_value": report.average_order_value.value,
            "last_updated": report.last_updated.isoformat(),
        }

    @staticmethod
    def _from_dynamodb_item(item: dict) -> SalesReport:
        """DynamoDB アイテムから SalesReport を復元する."""
        return SalesReport(
            year=int(item["year"]),
            month=int(item["month"]),
            orders=[
                ReportedOrder(
                    order_id=o["order_id"],
                    customer_name=o["customer_name"],
                    total_amount=Money.of(o["total_amount"]),
                    status=OrderStatus(o["status"]),
                    created_at=datetime.fromisoformat(o["created_at"]),
                    item_count=int(o["item_count"]),
                )
                for o in item.get("orders", [])
            ],
            total_sales=Money.of(item["total_sales"]),
            total_orders=int(item["total_orders"]),
            average_order_value=Money.of(item["average_order_value"]),
            last_updated=datetime.fromisoformat(item["last_updated"]),
        )
