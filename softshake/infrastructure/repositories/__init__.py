"""リポジトリ実装モジュール."""
from .in_memory_catalog_repository import InMemoryCatalogRepository
from .in_memory_order_repository import InMemoryOrderRepository
from .in_memory_sales_report_repository import InMemorySalesReportRepository

# DynamoDB 実装は boto3 に依存するため、
# 必要な場所で明示的にインポートする

__all__ = [
    "InMemoryCatalogRepository",
    "InMemoryOrderRepository",
    "InMemorySalesReportRepository",
]
