"""アプリケーション層モジュール."""
from .live_views import LiveCatalog, LiveOrderBoard
from .use_cases import (
    AddToCartResult,
    AddToCartUseCase,
    AdvanceOrderStatusUseCase,
    CatalogResult,
    EmptyCartError,
    GenerateMonthlyReportUseCase,
    InvalidCheckoutError,
    InvalidSelectionError,
    ListOrdersUseCase,
    LoadCatalogUseCase,
    OrderListResult,
    OrderSubmissionError,
    ProductNotFoundError,
    ProductOutOfStockError,
    StartCustomizationUseCase,
    SubmitOrderUseCase,
)

__all__ = [
    # Storefront Use Cases
    "LoadCatalogUseCase",
    "CatalogResult",
    "StartCustomizationUseCase",
    "AddToCartUseCase",
    "AddToCartResult",
    "SubmitOrderUseCase",
    # Admin Use Cases
    "ListOrdersUseCase",
    "OrderListResult",
    "AdvanceOrderStatusUseCase",
    "GenerateMonthlyReportUseCase",
    # Live Views
    "LiveCatalog",
    "LiveOrderBoard",
    # Errors
    "EmptyCartError",
    "InvalidCheckoutError",
    "InvalidSelectionError",
    "OrderSubmissionError",
    "ProductNotFoundError",
    "ProductOutOfStockError",
]
