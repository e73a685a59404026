"""ドメイン層モジュール."""
from .entities import Cart, Category, CustomizationOption, LineItem, Order, Product
from .enums import CategoryRule, DeliveryType, OptionKind, OrderStatus
from .identifiers import CategoryId, OptionId, OrderId, ProductId
from .ports import (
    CatalogRepository,
    ChangeNotificationFeed,
    OrderRepository,
    RepositoryError,
    SalesReportRepository,
    ShopNotifier,
)
from .services import (
    CustomizationRuleSet,
    CustomizationSession,
    LineItemBuilder,
)
from .value_objects import (
    CustomerInfo,
    Money,
    Selection,
    ValidationResult,
)

__all__ = [
    # Identifiers
    "CategoryId",
    "OptionId",
    "OrderId",
    "ProductId",
    # Enums
    "CategoryRule",
    "DeliveryType",
    "OptionKind",
    "OrderStatus",
    # Value Objects
    "CustomerInfo",
    "Money",
    "Selection",
    "ValidationResult",
    # Entities
    "Cart",
    "Category",
    "CustomizationOption",
    "LineItem",
    "Order",
    "Product",
    # Ports
    "CatalogRepository",
    "ChangeNotificationFeed",
    "OrderRepository",
    "RepositoryError",
    "SalesReportRepository",
    "ShopNotifier",
    # Services
    "CustomizationRuleSet",
    "CustomizationSession",
    "LineItemBuilder",
]
