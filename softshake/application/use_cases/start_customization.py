"""カスタマイズ開始ユースケース."""
import logging
from datetime import date

from softshake.domain.entities import Category, CustomizationOption, Product
from softshake.domain.identifiers import ProductId
from softshake.domain.ports import CatalogRepository, RepositoryError
from softshake.domain.services import (
    CustomizationContext,
    CustomizationRule,
    CustomizationRuleSet,
    CustomizationSession,
)
from softshake.domain.value_objects import Money

logger = logging.getLogger(__name__)


class ProductNotFoundError(Exception):
    """商品が見つからないエラー."""

    def __init__(self, product_id: str) -> None:
        self.product_id = product_id
        super().__init__(f"Product not found: {product_id}")


class ProductOutOfStockError(Exception):
    """在庫切れの商品を選択したエラー."""

    def __init__(self, product: Product) -> None:
        self.product = product
        super().__init__(f"Product is out of stock: {product.name}")


class StartCustomizationUseCase:
    """商品のカスタマイズセッションを開始するユースケース.

    カテゴリからルールを1度だけ解決し、ルールが使うオプション一覧を読み込む。
    """

    def __init__(
        self,
        catalog_repository: CatalogRepository,
        rule_set: CustomizationRuleSet,
    ) -> None:
        """初期化."""
        self._catalog_repository = catalog_repository
        self._rule_set = rule_set

    def execute(
        self,
        product_id: str,
        fixed_price: Money | None = None,
        today: date | None = None,
    ) -> CustomizationSession:
        """カスタマイズセッションを開始する.

        Args:
            product_id: 商品ID
            fixed_price: 固定価格（アイスポット用、指定しない場合は商品価格）
            today: 受け取り日の基準日（指定しない場合は当日）

        Returns:
            カスタマイズセッション

        Raises:
            ProductNotFoundError: 商品が見つからない場合
            ProductOutOfStockError: 商品が在庫切れの場合
        """
        product = self._catalog_repository.find_product(ProductId(product_id))
        if product is None:
            raise ProductNotFoundError(product_id)
        if not product.in_stock:
            raise ProductOutOfStockError(product)

        category = self._find_category(product)
        rule = self._rule_set.for_tag(CustomizationRuleSet.resolve_tag(category))

        context = CustomizationContext(
            product=product,
            rule=rule.tag,
            options=tuple(self._load_options(product, category, rule)),
            fixed_price=fixed_price,
        )
        logger.info(f"Customization started: {product.name} ({rule.tag.value})")
        return CustomizationSession(context, rule, today)

    def _find_category(self, product: Product) -> Category | None:
        """商品のカテゴリを取得する（取得できない場合はNone）."""
        if product.category_id is None:
            return None
        try:
            return self._catalog_repository.find_category(product.category_id)
        except RepositoryError as e:
            logger.warning(f"Could not load category of {product.name}: {e}")
            return None

    def _load_options(
        self,
        product: Product,
        category: Category | None,
        rule: CustomizationRule,
    ) -> list[CustomizationOption]:
        """ルールに応じて商品単位かカテゴリ共通のオプションを読み込む."""
        owner = product.product_id
        if rule.uses_category_options and category is not None:
            owner = category.category_id
        try:
            return self._catalog_repository.list_options(owner)
        except RepositoryError as e:
            logger.warning(f"Could not load options for {product.name}: {e}")
            return []
