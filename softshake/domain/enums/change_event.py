"""変更通知イベントの列挙型."""
from enum import Enum


class ChangeEvent(Enum):
    """変更通知フィードのイベント種別."""

    PRODUCTS_CHANGED = "products_changed"
    ORDER_INSERTED = "order_inserted"
