"""値オブジェクトモジュール."""
from .chosen_option import ChosenOption
from .cup_size import CupSize
from .customer_info import CustomerInfo
from .money import Money
from .selection import Selection
from .validation_result import ValidationResult

__all__ = [
    "ChosenOption",
    "CupSize",
    "CustomerInfo",
    "Money",
    "Selection",
    "ValidationResult",
]
