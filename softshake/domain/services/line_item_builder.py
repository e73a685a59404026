"""カート明細ビルダー."""
from __future__ import annotations

from ..entities import LineItem
from ..value_objects import Selection

from .customization_rules import CustomizationContext, CustomizationRule


def _clean(text: str | None) -> str | None:
    if text is None or not text.strip():
        return None
    return text.strip()


class LineItemBuilder:
    """検証済みの選択内容をカート明細に変換するサービス."""

    @staticmethod
    def build(
        context: CustomizationContext,
        rule: CustomizationRule,
        selection: Selection,
        quantity: int = 1,
    ) -> LineItem:
        """明細を組み立てる（再検証はしない）."""
        details = rule.describe(context, selection)
        dated = rule.tag.is_date_bound()
        return LineItem(
            product_id=context.product.product_id,
            name=rule.label(context, selection),
            price=rule.base_price(context, selection),
            quantity=quantity,
            image_url=context.product.image_url,
            flavors=details.flavors,
            fillings=details.fillings,
            variation=details.variation,
            delivery_date=selection.delivery_date if dated else None,
            toppings=details.toppings,
            customer_name=_clean(selection.customer_name) if dated else None,
            customer_phone=_clean(selection.customer_phone) if dated else None,
        )
