"""インフラストラクチャ層モジュール."""
from .notifications import InMemoryChangeFeed, LoggingShopNotifier
from .repositories import (
    InMemoryCatalogRepository,
    InMemoryOrderRepository,
    InMemorySalesReportRepository,
)

__all__ = [
    "InMemoryCatalogRepository",
    "InMemoryChangeFeed",
    "InMemoryOrderRepository",
    "InMemorySalesReportRepository",
    "LoggingShopNotifier",
]
