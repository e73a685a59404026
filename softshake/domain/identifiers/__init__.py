"""識別子モジュール."""
from .category_id import CategoryId
from .option_id import OptionId
from .order_id import OrderId
from .product_id import ProductId

__all__ = [
    "CategoryId",
    "OptionId",
    "OrderId",
    "ProductId",
]
