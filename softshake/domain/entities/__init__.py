"""エンティティモジュール."""
from .cart import Cart
from .category import Category
from .customization_option import CustomizationOption
from .line_item import LineItem
from .order import Order, OrderItemLine, OrderPayload
from .product import Product
from .sales_report import ReportedOrder, SalesReport

__all__ = [
    "Cart",
    "Category",
    "CustomizationOption",
    "LineItem",
    "Order",
    "OrderItemLine",
    "OrderPayload",
    "Product",
    "ReportedOrder",
    "SalesReport",
]
