"""ポートモジュール."""
from .catalog_repository import CatalogRepository
from .change_notification_feed import ChangeListener, ChangeNotificationFeed, Unsubscribe
from .order_repository import OrderRepository
from .repository_error import RepositoryError
from .sales_report_repository import SalesReportRepository
from .shop_notifier import ShopNotifier

__all__ = [
    "CatalogRepository",
    "ChangeListener",
    "ChangeNotificationFeed",
    "OrderRepository",
    "RepositoryError",
    "SalesReportRepository",
    "ShopNotifier",
    "Unsubscribe",
]
