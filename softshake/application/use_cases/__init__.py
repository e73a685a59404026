"""ユースケースモジュール."""
from .add_to_cart import AddToCartResult, AddToCartUseCase, InvalidSelectionError
from .advance_order_status import AdvanceOrderStatusResult, AdvanceOrderStatusUseCase
from .generate_monthly_report import GenerateMonthlyReportUseCase
from .list_orders import ListOrdersUseCase, OrderListResult
from .load_catalog import CatalogResult, LoadCatalogUseCase
from .manage_products import DeleteProductUseCase, InvalidProductError, SaveProductUseCase
from .start_customization import (
    ProductNotFoundError,
    ProductOutOfStockError,
    StartCustomizationUseCase,
)
from .submit_order import (
    EmptyCartError,
    InvalidCheckoutError,
    OrderSubmissionError,
    SubmitOrderUseCase,
)
from .update_stock import (
    OptionNotFoundError,
    UpdateOptionStockUseCase,
    UpdateProductStockUseCase,
)

__all__ = [
    # Catalog Use Cases
    "CatalogResult",
    "LoadCatalogUseCase",
    "StartCustomizationUseCase",
    # Cart Use Cases
    "AddToCartResult",
    "AddToCartUseCase",
    "SubmitOrderUseCase",
    # Admin Use Cases
    "AdvanceOrderStatusResult",
    "AdvanceOrderStatusUseCase",
    "DeleteProductUseCase",
    "GenerateMonthlyReportUseCase",
    "ListOrdersUseCase",
    "OrderListResult",
    "SaveProductUseCase",
    "UpdateOptionStockUseCase",
    "UpdateProductStockUseCase",
    # Errors
    "EmptyCartError",
    "InvalidCheckoutError",
    "InvalidProductError",
    "InvalidSelectionError",
    "OptionNotFoundError",
    "OrderSubmissionError",
    "ProductNotFoundError",
    "ProductOutOfStockError",
]
