"""カテゴリ別カスタマイズルール.

各ルールはカテゴリごとの選択制約（ステップ・上下限・必須項目）と、
選択内容から単価・表示名を決める価格関数を提供する。
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date, timedelta

from ..entities import Category, CustomizationOption, Product
from ..enums import CategoryRule, CustomizationStep, OptionKind
from ..identifiers import OptionId
from ..value_objects import ChosenOption, Money, Selection, ValidationResult

MIN_LEAD_DAYS = 3
ICE_CREAM_BUCKET_PRICE = Money.of("75.00")
MAX_CAKE_FILLINGS = 2
ICE_CREAM_CAKE_FLAVORS = 2
MAX_POT_FLAVORS = 4


@dataclass(frozen=True)
class RuleParameters:
    """ルールの数値パラメータ."""

    min_lead_days: int = MIN_LEAD_DAYS
    bucket_price: Money = field(default_factory=lambda: ICE_CREAM_BUCKET_PRICE)

    def __post_init__(self) -> None:
        """バリデーション."""
        if self.min_lead_days < 0:
            raise ValueError("Minimum lead days cannot be negative")

    def earliest_date(self, today: date) -> date:
        """指定可能な最も早い受け取り日."""
        return today + timedelta(days=self.min_lead_days)


@dataclass(frozen=True)
class CustomizationContext:
    """ダイアログを開いた時点の商品と読み込み済みオプション."""

    product: Product
    rule: CategoryRule
    options: tuple[CustomizationOption, ...] = ()
    fixed_price: Money | None = None

    def find_option(self, option_id: OptionId) -> CustomizationOption | None:
        """オプションIDで検索する."""
        for option in self.options:
            if option.option_id == option_id:
                return option
        return None

    def options_of(self, kinds: tuple[OptionKind, ...]) -> list[CustomizationOption]:
        """指定種別のオプションを取得する（種別指定なしは全件）."""
        if not kinds:
            return list(self.options)
        return [o for o in self.options if o.kind in kinds]

    def names_of(self, option_ids: tuple[OptionId, ...]) -> list[str]:
        """オプションIDを名前に変換する（不明なIDは除外）."""
        names = []
        for option_id in option_ids:
            option = self.find_option(option_id)
            if option is not None:
                names.append(option.name)
        return names


@dataclass(frozen=True)
class StepSpec:
    """ステップごとの選択対象と上下限."""

    step: CustomizationStep
    target: str | None = None  # "option_ids" | "filling_ids" | "variation_id"
    kinds: tuple[OptionKind, ...] = ()
    single: bool = False
    minimum: int = 0
    maximum: int | None = None
    noun: str = "opção"


@dataclass(frozen=True)
class SelectionDetails:
    """明細に転記する選択内容."""

    flavors: tuple[str, ...] = ()
    fillings: tuple[str, ...] = ()
    variation: str | None = None
    toppings: tuple[ChosenOption, ...] = ()


class CustomizationRule:
    """カスタマイズルールの基底クラス."""

    tag: CategoryRule = CategoryRule.PLAIN
    steps: tuple[StepSpec, ...] = ()
    uses_category_options: bool = False

    def __init__(self, parameters: RuleParameters | None = None) -> None:
        """初期化."""
        self._parameters = parameters or RuleParameters()

    @property
    def parameters(self) -> RuleParameters:
        """ルールパラメータ."""
        return self._parameters

    def get_steps(self) -> list[CustomizationStep]:
        """ステップの順序を取得する."""
        return [spec.step for spec in self.steps]

    def get_step_spec(self, step: CustomizationStep) -> StepSpec:
        """ステップ定義を取得する."""
        for spec in self.steps:
            if spec.step == step:
                return spec
        raise ValueError(f"Step {step.value} is not part of rule {self.tag.value}")

    def step_limit(self, context: CustomizationContext, spec: StepSpec) -> int | None:
        """ステップで選択できる上限数（Noneは無制限）."""
        if spec.single:
            return 1
        return spec.maximum

    def max_selections(self, context: CustomizationContext) -> int | None:
        """主選択（最初のステップ）の上限数."""
        return self.step_limit(context, self.steps[0])

    def selectable_options(
        self, context: CustomizationContext, step: CustomizationStep
    ) -> list[CustomizationOption]:
        """ステップで表示するオプション."""
        spec = self.get_step_spec(step)
        if spec.target is None:
            return []
        return context.options_of(spec.kinds)

    def toggle(
        self,
        context: CustomizationContext,
        selection: Selection,
        step: CustomizationStep,
        option_id: OptionId,
    ) -> Selection:
        """オプションをトグルした選択を返す.

        選択済みは常に外す。在庫切れ・対象外・上限到達の追加は何もしない。
        """
        spec = self.get_step_spec(step)
        if spec.target is None:
            return selection

        option = context.find_option(option_id)
        if option is None or (spec.kinds and option.kind not in spec.kinds):
            return selection

        current = self._selected_ids(selection, spec)
        if option_id in current:
            return self._remove(selection, spec, option_id)
        if not option.in_stock:
            return selection

        if spec.target == "variation_id":
            return selection.with_variation(option_id)
        if spec.single:
            if spec.target == "filling_ids":
                return selection.choose_filling(option_id)
            return selection.choose_option(option_id)

        limit = self.step_limit(context, spec)
        if spec.target == "filling_ids":
            return selection.toggle_filling(option_id, limit)
        return selection.toggle_option(option_id, limit)

    def is_option_enabled(
        self,
        context: CustomizationContext,
        selection: Selection,
        step: CustomizationStep,
        option_id: OptionId,
    ) -> bool:
        """UIでオプションを選択可能として表示するか判定."""
        spec = self.get_step_spec(step)
        option = context.find_option(option_id)
        if spec.target is None or option is None:
            return False
        current = self._selected_ids(selection, spec)
        if option_id in current:
            return True
        if not option.in_stock:
            return False
        if spec.single:
            return True
        limit = self.step_limit(context, spec)
        return limit is None or len(current) < limit

    def validate_step(
        self,
        context: CustomizationContext,
        selection: Selection,
        step: CustomizationStep,
        today: date,
    ) -> ValidationResult:
        """ステップの入力が次へ進める状態か検証する."""
        spec = self.get_step_spec(step)
        errors: list[str] = []
        if spec.target is not None:
            errors.extend(self._validate_count(context, selection, spec))
        errors.extend(self._validate_details(selection, spec, today))
        return ValidationResult.from_errors(errors)

    def validate(
        self, context: CustomizationContext, selection: Selection, today: date
    ) -> ValidationResult:
        """選択内容全体の妥当性を検証する."""
        errors: list[str] = []
        for spec in self.steps:
            errors.extend(self.validate_step(context, selection, spec.step, today).errors)
        return ValidationResult.from_errors(errors)

    def base_price(self, context: CustomizationContext, selection: Selection) -> Money:
        """トッピングを含まない単価."""
        return context.product.price

    def resolve_price(self, context: CustomizationContext, selection: Selection) -> Money:
        """選択内容から確定する単価（トッピング込み）."""
        toppings = self.describe(context, selection).toppings
        return self.base_price(context, selection).add(
            Money.sum_of([t.price for t in toppings])
        )

    def describe(self, context: CustomizationContext, selection: Selection) -> SelectionDetails:
        """明細に転記する選択内容."""
        return SelectionDetails(flavors=tuple(context.names_of(selection.option_ids)))

    def label(self, context: CustomizationContext, selection: Selection) -> str:
        """明細の表示名."""
        names = context.names_of(selection.option_ids)
        if not names:
            return context.product.name
        return f"{context.product.name} - {' + '.join(names)}"

    @staticmethod
    def _selected_ids(selection: Selection, spec: StepSpec) -> tuple[OptionId, ...]:
        if spec.target == "option_ids":
            return selection.option_ids
        if spec.target == "filling_ids":
            return selection.filling_ids
        if spec.target == "variation_id" and selection.variation_id is not None:
            return (selection.variation_id,)
        return ()

    @staticmethod
    def _remove(selection: Selection, spec: StepSpec, option_id: OptionId) -> Selection:
        if spec.target == "variation_id":
            return replace(selection, variation_id=None)
        if spec.target == "filling_ids":
            return selection.toggle_filling(option_id)
        return selection.toggle_option(option_id)

    def _validate_count(
        self, context: CustomizationContext, selection: Selection, spec: StepSpec
    ) -> list[str]:
        selected = self._selected_ids(selection, spec)
        errors: list[str] = []
        valid_ids = {o.option_id for o in context.options_of(spec.kinds)}
        if any(option_id not in valid_ids for option_id in selected):
            errors.append(f"Seleção inválida de {spec.noun}")

        count = len(selected)
        limit = self.step_limit(context, spec)
        if limit is not None and spec.minimum == limit and count != limit:
            errors.append(f"Selecione exatamente {limit} {spec.noun}")
        elif count < spec.minimum:
            errors.append(f"Selecione pelo menos {spec.minimum} {spec.noun}")
        elif limit is not None and count > limit:
            errors.append(f"Selecione no máximo {limit} {spec.noun}")
        return errors

    def _validate_details(
        self, selection: Selection, spec: StepSpec, today: date
    ) -> list[str]:
        return []

    def _validate_date(self, selection: Selection, today: date) -> list[str]:
        if selection.delivery_date is None:
            return ["Informe a data de entrega"]
        earliest = self._parameters.earliest_date(today)
        if selection.delivery_date < earliest:
            return [f"A data deve ser a partir de {earliest:%d/%m/%Y}"]
        return []


class PlainRule(CustomizationRule):
    """1つのオプション（フレーバー）を必ず選ぶ単純な商品."""

    tag = CategoryRule.PLAIN
    steps = (
        StepSpec(
            CustomizationStep.CHOOSING_OPTIONS,
            target="option_ids",
            single=True,
            minimum=1,
            noun="sabor",
        ),
    )


class FlavorMultiRule(CustomizationRule):
    """1つ以上のフレーバーを選ぶ商品（上限なし、価格は基本価格）."""

    tag = CategoryRule.FLAVOR_MULTI
    steps = (
        StepSpec(
            CustomizationStep.CHOOSING_OPTIONS,
            target="option_ids",
            minimum=1,
            noun="sabor(es)",
        ),
    )


class ToppingLimitedRule(CustomizationRule):
    """サイズ別上限つきの有料トッピングを選ぶaçaí."""

    tag = CategoryRule.TOPPING_LIMITED
    uses_category_options = True
    steps = (
        StepSpec(
            CustomizationStep.CHOOSING_TOPPINGS,
            target="option_ids",
            noun="adicional(is)",
        ),
    )

    def step_limit(self, context: CustomizationContext, spec: StepSpec) -> int | None:
        """カップサイズに応じたトッピング上限."""
        return context.product.get_cup_size().max_toppings()

    def describe(self, context: CustomizationContext, selection: Selection) -> SelectionDetails:
        """選択トッピングを価格つきで転記する."""
        toppings = []
        for option_id in selection.option_ids:
            option = context.find_option(option_id)
            if option is not None:
                toppings.append(option.to_chosen())
        return SelectionDetails(toppings=tuple(toppings))

    def label(self, context: CustomizationContext, selection: Selection) -> str:
        """トッピングは明細に別掲するため商品名のみ."""
        return context.product.name


class CakeFlavorFillingRule(CustomizationRule):
    """フレーバー1つ・フィリング2つまで・受け取り情報つきのケーキ."""

    tag = CategoryRule.CAKE_FLAVOR_FILLING
    steps = (
        StepSpec(
            CustomizationStep.CHOOSING_FLAVOR,
            target="option_ids",
            kinds=(OptionKind.FLAVOR,),
            single=True,
            minimum=1,
            noun="sabor",
        ),
        StepSpec(
            CustomizationStep.CHOOSING_FILLINGS,
            target="filling_ids",
            kinds=(OptionKind.FILLING,),
            maximum=MAX_CAKE_FILLINGS,
            noun="recheio(s)",
        ),
        StepSpec(CustomizationStep.ENTERING_DETAILS),
    )

    def _validate_details(
        self, selection: Selection, spec: StepSpec, today: date
    ) -> list[str]:
        if spec.step != CustomizationStep.ENTERING_DETAILS:
            return []
        errors: list[str] = []
        if not selection.customer_name or not selection.customer_name.strip():
            errors.append("Informe o nome")
        if not selection.customer_phone or not selection.customer_phone.strip():
            errors.append("Informe o telefone")
        errors.extend(self._validate_date(selection, today))
        return errors

    def describe(self, context: CustomizationContext, selection: Selection) -> SelectionDetails:
        """フレーバーとフィリングを転記する."""
        return SelectionDetails(
            flavors=tuple(context.names_of(selection.option_ids)),
            fillings=tuple(context.names_of(selection.filling_ids)),
        )

    def label(self, context: CustomizationContext, selection: Selection) -> str:
        """商品名 - フレーバー - Recheio: フィリング."""
        text = context.product.name
        flavors = context.names_of(selection.option_ids)
        if flavors:
            text = f"{text} - {flavors[0]}"
        fillings = context.names_of(selection.filling_ids)
        if fillings:
            text = f"{text} - Recheio: {', '.join(fillings)}"
        return text


class DrinkVariationRule(CustomizationRule):
    """バリエーション1つを選び、その価格で基本価格を置き換える飲み物."""

    tag = CategoryRule.DRINK_VARIATION
    steps = (
        StepSpec(
            CustomizationStep.CHOOSING_VARIATION,
            target="variation_id",
            single=True,
            minimum=1,
            noun="variação",
        ),
    )

    def max_selections(self, context: CustomizationContext) -> int | None:
        """バリエーションは1つだけ."""
        return 1

    def base_price(self, context: CustomizationContext, selection: Selection) -> Money:
        """選択したバリエーションの価格."""
        if selection.variation_id is not None:
            option = context.find_option(selection.variation_id)
            if option is not None:
                return option.price
        return context.product.price

    def describe(self, context: CustomizationContext, selection: Selection) -> SelectionDetails:
        """バリエーション名を転記する."""
        names = context.names_of(
            (selection.variation_id,) if selection.variation_id is not None else ()
        )
        return SelectionDetails(variation=names[0] if names else None)

    def label(self, context: CustomizationContext, selection: Selection) -> str:
        """商品名 - バリエーション名."""
        variation = self.describe(context, selection).variation
        if variation is None:
            return context.product.name
        return f"{context.product.name} - {variation}"


class IceCreamCakeRule(CustomizationRule):
    """フレーバー2つ・フィリング1つ・受け取り日指定のアイスケーキ."""

    tag = CategoryRule.ICE_CREAM_CAKE
    uses_category_options = True
    steps = (
        StepSpec(
            CustomizationStep.CHOOSING_FLAVORS,
            target="option_ids",
            kinds=(OptionKind.FLAVOR,),
            minimum=ICE_CREAM_CAKE_FLAVORS,
            maximum=ICE_CREAM_CAKE_FLAVORS,
            noun="sabores",
        ),
        StepSpec(
            CustomizationStep.CHOOSING_FILLING,
            target="filling_ids",
            kinds=(OptionKind.FILLING,),
            single=True,
            minimum=1,
            noun="recheio",
        ),
        StepSpec(CustomizationStep.CHOOSING_DATE),
    )

    def _validate_details(
        self, selection: Selection, spec: StepSpec, today: date
    ) -> list[str]:
        if spec.step != CustomizationStep.CHOOSING_DATE:
            return []
        return self._validate_date(selection, today)

    def describe(self, context: CustomizationContext, selection: Selection) -> SelectionDetails:
        """フレーバーとフィリングを転記する."""
        return SelectionDetails(
            flavors=tuple(context.names_of(selection.option_ids)),
            fillings=tuple(context.names_of(selection.filling_ids)),
        )

    def label(self, context: CustomizationContext, selection: Selection) -> str:
        """商品名 (フレーバー + フレーバー) - Recheio: フィリング."""
        flavors = " + ".join(context.names_of(selection.option_ids))
        fillings = ", ".join(context.names_of(selection.filling_ids))
        return f"{context.product.name} ({flavors}) - Recheio: {fillings}"


class IceCreamPotRule(CustomizationRule):
    """1〜4フレーバーを選ぶ固定価格のアイスポット."""

    tag = CategoryRule.ICE_CREAM_POT
    steps = (
        StepSpec(
            CustomizationStep.CHOOSING_FLAVORS,
            target="option_ids",
            minimum=1,
            maximum=MAX_POT_FLAVORS,
            noun="sabor(es)",
        ),
    )

    def base_price(self, context: CustomizationContext, selection: Selection) -> Money:
        """呼び出し元が指定した固定価格（未指定は商品価格）."""
        if context.fixed_price is not None:
            return context.fixed_price
        return context.product.price


class IceCreamBucketRule(CustomizationRule):
    """店舗共通リストから1フレーバーを選ぶ固定価格のアイスバケツ."""

    tag = CategoryRule.ICE_CREAM_BUCKET
    uses_category_options = True
    steps = (
        StepSpec(
            CustomizationStep.CHOOSING_FLAVOR,
            target="option_ids",
            single=True,
            minimum=1,
            noun="sabor",
        ),
    )

    def base_price(self, context: CustomizationContext, selection: Selection) -> Money:
        """フレーバーに関わらず固定価格."""
        return self._parameters.bucket_price


class CustomizationRuleSet:
    """カテゴリルールタグからルールを解決する."""

    _RULE_CLASSES: tuple[type[CustomizationRule], ...] = (
        PlainRule,
        FlavorMultiRule,
        ToppingLimitedRule,
        CakeFlavorFillingRule,
        DrinkVariationRule,
        IceCreamCakeRule,
        IceCreamPotRule,
        IceCreamBucketRule,
    )

    def __init__(self, parameters: RuleParameters | None = None) -> None:
        """初期化."""
        self._parameters = parameters or RuleParameters()
        self._rules = {cls.tag: cls(self._parameters) for cls in self._RULE_CLASSES}

    @property
    def parameters(self) -> RuleParameters:
        """ルールパラメータ."""
        return self._parameters

    def for_tag(self, tag: CategoryRule) -> CustomizationRule:
        """タグに対応するルールを取得する."""
        return self._rules[tag]

    @staticmethod
    def resolve_tag(category: Category | None) -> CategoryRule:
        """カテゴリからタグを解決する（カテゴリ不明はPLAIN）."""
        if category is None:
            return CategoryRule.PLAIN
        return category.rule
