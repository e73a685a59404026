"""変更通知に追従する一覧ビュー."""
import logging

from softshake.domain.entities import Order, Product
from softshake.domain.enums import ChangeEvent, OrderStatus
from softshake.domain.ports import ChangeNotificationFeed, ShopNotifier, Unsubscribe

from .use_cases import CatalogResult, ListOrdersUseCase, LoadCatalogUseCase, OrderListResult

logger = logging.getLogger(__name__)


class LiveOrderBoard:
    """「注文追加」通知のたびに注文一覧を丸ごと再取得する管理画面ボード.

    通知は重複しうるため、差分適用はせず常に全件を取り直す。
    """

    def __init__(
        self,
        list_orders: ListOrdersUseCase,
        change_feed: ChangeNotificationFeed,
        notifier: ShopNotifier,
    ) -> None:
        """初期化."""
        self._list_orders = list_orders
        self._change_feed = change_feed
        self._notifier = notifier
        self._status: OrderStatus | str | None = None
        self._query = ""
        self._result = OrderListResult(orders=[])
        self._known_total = 0
        self._unsubscribe: Unsubscribe | None = None

    @property
    def result(self) -> OrderListResult:
        """直近の取得結果."""
        return self._result

    @property
    def orders(self) -> list[Order]:
        """表示中の注文."""
        return self._result.orders

    def start(self) -> None:
        """購読を開始して初回取得する."""
        if self._unsubscribe is None:
            self._unsubscribe = self._change_feed.subscribe(
                ChangeEvent.ORDER_INSERTED, self._on_order_inserted
            )
        self.refresh()

    def stop(self) -> None:
        """購読を解除する."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def set_filter(self, status: OrderStatus | str | None = None, query: str = "") -> None:
        """絞り込み条件を変更して再取得する."""
        self._status = status
        self._query = query
        self.refresh()

    def refresh(self) -> OrderListResult:
        """注文一覧を再取得する."""
        self._result = self._list_orders.execute(self._status, self._query)
        if self._result.is_available:
            self._known_total = self._result.total_count
        return self._result

    def _on_order_inserted(self, event: ChangeEvent) -> None:
        logger.info("Order inserted signal received, refreshing board")
        previous_total = self._known_total
        result = self.refresh()
        # 件数が増えた場合のみ通知する
        if result.is_available and result.total_count > previous_total:
            self._notifier.notify_new_order()


class LiveCatalog:
    """「商品変更」通知のたびに商品一覧を再取得するビュー."""

    def __init__(
        self,
        load_catalog: LoadCatalogUseCase,
        change_feed: ChangeNotificationFeed,
        category_id: str | None = None,
    ) -> None:
        """初期化."""
        self._load_catalog = load_catalog
        self._change_feed = change_feed
        self._category_id = category_id
        self._result = CatalogResult(categories=[], products=[])
        self._unsubscribe: Unsubscribe | None = None

    @property
    def result(self) -> CatalogResult:
        """直近の取得結果."""
        return self._result

    @property
    def products(self) -> list[Product]:
        """表示中の商品."""
        return self._result.products

    def start(self) -> None:
        """購読を開始して初回取得する."""
        if self._unsubscribe is None:
            self._unsubscribe = self._change_feed.subscribe(
                ChangeEvent.PRODUCTS_CHANGED, self._on_products_changed
            )
        self.refresh()

    def stop(self) -> None:
        """購読を解除する."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def select_category(self, category_id: str | None) -> None:
        """表示カテゴリを変更して再取得する."""
        self._category_id = category_id
        self.refresh()

    def refresh(self) -> CatalogResult:
        """カタログを再取得する."""
        self._result = self._load_catalog.execute(self._category_id)
        return self._result

    def _on_products_changed(self, event: ChangeEvent) -> None:
        self.refresh()
