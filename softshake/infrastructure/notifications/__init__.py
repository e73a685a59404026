"""通知実装モジュール."""
from .in_memory_change_feed import InMemoryChangeFeed
from .logging_notifier import LoggingShopNotifier

__all__ = [
    "InMemoryChangeFeed",
    "LoggingShopNotifier",
]
