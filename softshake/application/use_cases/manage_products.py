"""商品管理ユースケース."""
import logging

from softshake.domain.entities import Product
from softshake.domain.enums import ChangeEvent
from softshake.domain.identifiers import CategoryId, ProductId
from softshake.domain.ports import CatalogRepository, ChangeNotificationFeed
from softshake.domain.value_objects import Money

from .start_customization import ProductNotFoundError

logger = logging.getLogger(__name__)


class InvalidProductError(Exception):
    """商品フォームの入力不備エラー."""

    pass


class SaveProductUseCase:
    """商品を登録・更新するユースケース."""

    def __init__(
        self,
        catalog_repository: CatalogRepository,
        change_feed: ChangeNotificationFeed,
    ) -> None:
        """初期化."""
        self._catalog_repository = catalog_repository
        self._change_feed = change_feed

    def execute(
        self,
        name: str,
        price: str,
        description: str = "",
        image_url: str = "",
        category_id: str | None = None,
        in_stock: bool = True,
        product_id: str | None = None,
    ) -> Product:
        """商品を登録・更新する.

        Args:
            product_id: 更新対象の商品ID（指定しない場合は新規登録）

        Raises:
            InvalidProductError: 入力が不正な場合
            ProductNotFoundError: 更新対象の商品が見つからない場合
        """
        try:
            money = Money.of(price)
            cid = CategoryId(category_id) if category_id else None
            if product_id is None:
                product = Product.create(
                    name=name,
                    price=money,
                    description=description,
                    image_url=image_url,
                    category_id=cid,
                    in_stock=in_stock,
                )
            else:
                pid = ProductId(product_id)
                if self._catalog_repository.find_product(pid) is None:
                    raise ProductNotFoundError(product_id)
                product = Product(
                    product_id=pid,
                    name=name,
                    price=money,
                    description=description,
                    image_url=image_url,
                    category_id=cid,
                    in_stock=in_stock,
                )
        except (TypeError, ValueError) as e:
            raise InvalidProductError(str(e)) from e

        self._catalog_repository.save_product(product)
        logger.info(f"Product saved: {product.name} ({product.product_id})")
        self._change_feed.publish(ChangeEvent.PRODUCTS_CHANGED)
        return product


class DeleteProductUseCase:
    """商品を削除するユースケース."""

    def __init__(
        self,
        catalog_repository: CatalogRepository,
        change_feed: ChangeNotificationFeed,
    ) -> None:
        """初期化."""
        self._catalog_repository = catalog_repository
        self._change_feed = change_feed

    def execute(self, product_id: str) -> None:
        """商品を削除する.

        Raises:
            ProductNotFoundError: 商品が見つからない場合
        """
        pid = ProductId(product_id)
        product = self._catalog_repository.find_product(pid)
        if product is None:
            raise ProductNotFoundError(product_id)

        self._catalog_repository.delete_product(pid)
        logger.info(f"Product deleted: {product.name} ({product_id})")
        self._change_feed.publish(ChangeEvent.PRODUCTS_CHANGED)
