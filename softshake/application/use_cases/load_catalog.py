"""カタログ読み込みユースケース."""
import logging
from dataclasses import dataclass

from softshake.domain.entities import Category, Product
from softshake.domain.identifiers import CategoryId
from softshake.domain.ports import CatalogRepository, RepositoryError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CatalogResult:
    """カタログ読み込み結果.

    読み込みに失敗した場合は空リストで is_available=False を返す（再試行用）。
    """

    categories: list[Category]
    products: list[Product]
    is_available: bool = True


class LoadCatalogUseCase:
    """カテゴリと商品の一覧を読み込むユースケース."""

    def __init__(self, catalog_repository: CatalogRepository) -> None:
        """初期化."""
        self._catalog_repository = catalog_repository

    def execute(self, category_id: str | None = None) -> CatalogResult:
        """カタログを読み込む.

        Args:
            category_id: 絞り込むカテゴリID（指定しない場合は全商品）

        Returns:
            カタログ読み込み結果
        """
        cid = CategoryId(category_id) if category_id else None
        try:
            categories = self._catalog_repository.list_categories()
            products = self._catalog_repository.list_products(cid)
        except RepositoryError as e:
            logger.warning(f"Could not load catalog: {e}")
            return CatalogResult(categories=[], products=[], is_available=False)

        return CatalogResult(categories=categories, products=products)
