"""在庫更新ユースケース."""
import logging

from softshake.domain.entities import CustomizationOption, Product
from softshake.domain.enums import ChangeEvent
from softshake.domain.identifiers import OptionId, ProductId
from softshake.domain.ports import CatalogRepository, ChangeNotificationFeed, ShopNotifier

from .start_customization import ProductNotFoundError

logger = logging.getLogger(__name__)


class OptionNotFoundError(Exception):
    """オプションが見つからないエラー."""

    def __init__(self, option_id: str) -> None:
        self.option_id = option_id
        super().__init__(f"Option not found: {option_id}")


class UpdateProductStockUseCase:
    """商品の在庫フラグを切り替えるユースケース.

    カートに入っている明細は変更しない。
    """

    def __init__(
        self,
        catalog_repository: CatalogRepository,
        change_feed: ChangeNotificationFeed,
        notifier: ShopNotifier,
    ) -> None:
        """初期化."""
        self._catalog_repository = catalog_repository
        self._change_feed = change_feed
        self._notifier = notifier

    def execute(self, product_id: str, in_stock: bool) -> Product:
        """商品の在庫フラグを更新する.

        Raises:
            ProductNotFoundError: 商品が見つからない場合
        """
        pid = ProductId(product_id)
        product = self._catalog_repository.find_product(pid)
        if product is None:
            raise ProductNotFoundError(product_id)

        self._catalog_repository.set_product_stock(pid, in_stock)
        logger.info(f"Product stock updated: {product.name} in_stock={in_stock}")
        self._change_feed.publish(ChangeEvent.PRODUCTS_CHANGED)
        self._notifier.notify_stock_update(product.name, in_stock)
        return product.with_stock(in_stock)


class UpdateOptionStockUseCase:
    """トッピング等のオプションの在庫フラグを切り替えるユースケース."""

    def __init__(
        self,
        catalog_repository: CatalogRepository,
        change_feed: ChangeNotificationFeed,
        notifier: ShopNotifier,
    ) -> None:
        """初期化."""
        self._catalog_repository = catalog_repository
        self._change_feed = change_feed
        self._notifier = notifier

    def execute(self, option_id: str, in_stock: bool) -> CustomizationOption:
        """オプションの在庫フラグを更新する.

        Raises:
            OptionNotFoundError: オプションが見つからない場合
        """
        oid = OptionId(option_id)
        option = self._catalog_repository.find_option(oid)
        if option is None:
            raise OptionNotFoundError(option_id)

        self._catalog_repository.set_option_stock(oid, in_stock)
        logger.info(f"Option stock updated: {option.name} in_stock={in_stock}")
        self._change_feed.publish(ChangeEvent.PRODUCTS_CHANGED)
        self._notifier.notify_stock_update(option.name, in_stock)
        return option.with_stock(in_stock)
