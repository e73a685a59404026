"""LineItemBuilderのテスト."""
from datetime import date

from softshake.domain.entities import CustomizationOption, Product
from softshake.domain.enums import CategoryRule, OptionKind
from softshake.domain.identifiers import CategoryId, OptionId, ProductId
from softshake.domain.services import CustomizationContext, CustomizationRuleSet, LineItemBuilder
from softshake.domain.value_objects import Money, Selection


def _context(
    rule: CategoryRule,
    options: list[CustomizationOption],
    name: str,
    price: str,
    fixed_price: Money | None = None,
) -> CustomizationContext:
    product = Product(
        product_id=ProductId("p1"), name=name, price=Money.of(price), image_url="https://img/p1.png"
    )
    return CustomizationContext(
        product=product, rule=rule, options=tuple(options), fixed_price=fixed_price
    )


class TestLineItemBuilder:
    """LineItemBuilderの単体テスト."""

    def test_トッピング付きのaçaí明細(self) -> None:
        """基本価格とトッピングが分けて転記され、単価13.50になることを確認."""
        options = [
            CustomizationOption(OptionId("g"), "Granola", OptionKind.TOPPING, Money.of("1.50"), category_id=CategoryId("c")),
            CustomizationOption(OptionId("l"), "Leite condensado", OptionKind.TOPPING, Money.of("2.00"), category_id=CategoryId("c")),
        ]
        context = _context(CategoryRule.TOPPING_LIMITED, options, "Açaí 500ml", "10.00")
        rule = CustomizationRuleSet().for_tag(CategoryRule.TOPPING_LIMITED)
        selection = Selection.empty().toggle_option(OptionId("g")).toggle_option(OptionId("l"))

        item = LineItemBuilder.build(context, rule, selection)

        assert item.product_id == ProductId("p1")
        assert item.name == "Açaí 500ml"
        assert item.price == Money.of("10.00")
        assert [t.name for t in item.toppings] == ["Granola", "Leite condensado"]
        assert item.get_unit_price() == Money.of("13.50")
        assert item.image_url == "https://img/p1.png"
        assert item.quantity == 1

    def test_飲み物はバリエーション価格(self) -> None:
        """バリエーションの価格と名前が転記されることを確認."""
        options = [
            CustomizationOption(OptionId("v"), "500ml", OptionKind.VARIATION, Money.of("8.00"), product_id=ProductId("p1")),
        ]
        context = _context(CategoryRule.DRINK_VARIATION, options, "Suco", "5.00")
        rule = CustomizationRuleSet().for_tag(CategoryRule.DRINK_VARIATION)

        item = LineItemBuilder.build(context, rule, Selection.empty().with_variation(OptionId("v")))

        assert item.price == Money.of("8.00")
        assert item.variation == "500ml"
        assert item.name == "Suco - 500ml"

    def test_日付指定のない商品は受け取り情報を持たない(self) -> None:
        """PLAINの明細には受け取り日・注文者が転記されないことを確認."""
        options = [
            CustomizationOption(OptionId("m"), "Morango", OptionKind.FLAVOR, product_id=ProductId("p1")),
        ]
        context = _context(CategoryRule.PLAIN, options, "Picolé", "4.00")
        rule = CustomizationRuleSet().for_tag(CategoryRule.PLAIN)
        selection = (
            Selection.empty()
            .toggle_option(OptionId("m"))
            .with_delivery_date(date(2026, 10, 25))
            .with_customer("Maria", "119")
        )

        item = LineItemBuilder.build(context, rule, selection)

        assert item.flavors == ("Morango",)
        assert item.delivery_date is None
        assert item.customer_name is None

    def test_ケーキは受け取り情報を転記し空白を除く(self) -> None:
        """注文者の前後の空白が除かれ、空の電話番号はNoneになることを確認."""
        options = [
            CustomizationOption(OptionId("c"), "Chocolate", OptionKind.FLAVOR, product_id=ProductId("p1")),
            CustomizationOption(OptionId("b"), "Brigadeiro", OptionKind.FILLING, product_id=ProductId("p1")),
        ]
        context = _context(CategoryRule.CAKE_FLAVOR_FILLING, options, "Bolo", "80.00")
        rule = CustomizationRuleSet().for_tag(CategoryRule.CAKE_FLAVOR_FILLING)
        selection = (
            Selection.empty()
            .toggle_option(OptionId("c"))
            .toggle_filling(OptionId("b"))
            .with_delivery_date(date(2026, 10, 25))
            .with_customer("  Maria  ", " ")
        )

        item = LineItemBuilder.build(context, rule, selection)

        assert item.flavors == ("Chocolate",)
        assert item.fillings == ("Brigadeiro",)
        assert item.delivery_date == date(2026, 10, 25)
        assert item.customer_name == "Maria"
        assert item.customer_phone is None

    def test_ポットは固定価格(self) -> None:
        """呼び出し元の固定価格が明細の価格になることを確認."""
        options = [
            CustomizationOption(OptionId(str(i)), f"Sabor {i}", OptionKind.VARIATION, product_id=ProductId("p1"))
            for i in range(3)
        ]
        context = _context(CategoryRule.ICE_CREAM_POT, options, "Pote", "60.00", Money.of("75.00"))
        rule = CustomizationRuleSet().for_tag(CategoryRule.ICE_CREAM_POT)
        selection = Selection.empty()
        for i in range(3):
            selection = selection.toggle_option(OptionId(str(i)))

        item = LineItemBuilder.build(context, rule, selection, quantity=2)

        assert item.price == Money.of("75.00")
        assert item.get_line_total() == Money.of("150.00")
        assert item.flavors == ("Sabor 0", "Sabor 1", "Sabor 2")
