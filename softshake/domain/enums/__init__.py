"""列挙型モジュール."""
from .category_rule import CategoryRule
from .change_event import ChangeEvent
from .customization_step import CustomizationStep
from .delivery_type import DeliveryType
from .option_kind import OptionKind
from .order_status import OrderStatus

__all__ = [
    "CategoryRule",
    "ChangeEvent",
    "CustomizationStep",
    "DeliveryType",
    "OptionKind",
    "OrderStatus",
]
