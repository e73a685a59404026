"""カテゴリルールの列挙型."""
from enum import Enum


class CategoryRule(Enum):
    """商品カテゴリごとのカスタマイズ・価格ルール."""

    PLAIN = "plain"
    FLAVOR_MULTI = "flavor-multi"
    TOPPING_LIMITED = "topping-limited"
    CAKE_FLAVOR_FILLING = "cake-flavor-filling"
    DRINK_VARIATION = "drink-variation"
    ICE_CREAM_CAKE = "ice-cream-cake"
    ICE_CREAM_POT = "ice-cream-pot"
    ICE_CREAM_BUCKET = "ice-cream-bucket"

    def is_date_bound(self) -> bool:
        """受け取り日の指定が必要なルールか判定."""
        return self in (CategoryRule.CAKE_FLAVOR_FILLING, CategoryRule.ICE_CREAM_CAKE)

    def get_display_name(self) -> str:
        """表示名を返す."""
        names = {
            CategoryRule.PLAIN: "Sabor único",
            CategoryRule.FLAVOR_MULTI: "Vários sabores",
            CategoryRule.TOPPING_LIMITED: "Açaí com adicionais",
            CategoryRule.CAKE_FLAVOR_FILLING: "Bolo personalizado",
            CategoryRule.DRINK_VARIATION: "Bebida",
            CategoryRule.ICE_CREAM_CAKE: "Bolo de sorvete",
            CategoryRule.ICE_CREAM_POT: "Pote de sorvete",
            CategoryRule.ICE_CREAM_BUCKET: "Balde de sorvete",
        }
        return names[self]
