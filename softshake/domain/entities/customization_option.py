"""カスタマイズオプションエンティティ."""
from __future__ import annotations

from dataclasses import dataclass, field, replace

from ..enums import OptionKind
from ..identifiers import CategoryId, OptionId, ProductId
from ..value_objects import ChosenOption, Money


@dataclass(frozen=True)
class CustomizationOption:
    """トッピング・フレーバー・フィリング・バリエーション.

    商品単位（product_id）かカテゴリ共通（category_id）のどちらか一方に属する。
    """

    option_id: OptionId
    name: str
    kind: OptionKind
    price: Money = field(default_factory=Money.zero)
    in_stock: bool = True
    product_id: ProductId | None = None
    category_id: CategoryId | None = None

    def __post_init__(self) -> None:
        """バリデーション."""
        if not self.name:
            raise ValueError("Option name cannot be empty")
        if (self.product_id is None) == (self.category_id is None):
            raise ValueError("Option must belong to exactly one product or category")

    def with_stock(self, in_stock: bool) -> CustomizationOption:
        """在庫フラグを変更したオプションを返す."""
        return replace(self, in_stock=in_stock)

    def to_chosen(self) -> ChosenOption:
        """明細用のスナップショットに変換する."""
        return ChosenOption(option_id=self.option_id, name=self.name, price=self.price)
