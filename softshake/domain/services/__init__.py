"""ドメインサービスモジュール."""
from .customization_rules import (
    CakeFlavorFillingRule,
    CustomizationContext,
    CustomizationRule,
    CustomizationRuleSet,
    DrinkVariationRule,
    FlavorMultiRule,
    IceCreamBucketRule,
    IceCreamCakeRule,
    IceCreamPotRule,
    PlainRule,
    RuleParameters,
    SelectionDetails,
    StepSpec,
    ToppingLimitedRule,
)
from .customization_session import CustomizationSession, SessionFinishedError
from .line_item_builder import LineItemBuilder
from .sales_report_calculator import SalesReportCalculator

__all__ = [
    "CakeFlavorFillingRule",
    "CustomizationContext",
    "CustomizationRule",
    "CustomizationRuleSet",
    "CustomizationSession",
    "DrinkVariationRule",
    "FlavorMultiRule",
    "IceCreamBucketRule",
    "IceCreamCakeRule",
    "IceCreamPotRule",
    "LineItemBuilder",
    "PlainRule",
    "RuleParameters",
    "SalesReportCalculator",
    "SelectionDetails",
    "SessionFinishedError",
    "StepSpec",
    "ToppingLimitedRule",
]
