"""ショップセッション（依存性コンテナ）."""
from __future__ import annotations

from .application import (
    AddToCartUseCase,
    AdvanceOrderStatusUseCase,
    GenerateMonthlyReportUseCase,
    LiveCatalog,
    LiveOrderBoard,
    ListOrdersUseCase,
    LoadCatalogUseCase,
    StartCustomizationUseCase,
    SubmitOrderUseCase,
)
from .application.use_cases import (
    DeleteProductUseCase,
    SaveProductUseCase,
    UpdateOptionStockUseCase,
    UpdateProductStockUseCase,
)
from .config import ShopConfig
from .domain.entities import Cart
from .domain.ports import (
    CatalogRepository,
    ChangeNotificationFeed,
    OrderRepository,
    SalesReportRepository,
    ShopNotifier,
)
from .domain.services import CustomizationRuleSet
from .infrastructure import (
    InMemoryCatalogRepository,
    InMemoryChangeFeed,
    InMemoryOrderRepository,
    InMemorySalesReportRepository,
    LoggingShopNotifier,
)


class ShopSession:
    """買い物セッション1つ分のカートと依存性を保持するコンテナ.

    ORDER_TABLE_NAME 環境変数が設定されている場合はDynamoDB実装を使用。
    そうでない場合はインメモリ実装を使用（ローカル開発・テスト用）。
    カートはセッション開始時に作成し、モジュール変数には置かない。
    """

    def __init__(
        self,
        config: ShopConfig | None = None,
        catalog_repository: CatalogRepository | None = None,
        order_repository: OrderRepository | None = None,
        sales_report_repository: SalesReportRepository | None = None,
        change_feed: ChangeNotificationFeed | None = None,
        notifier: ShopNotifier | None = None,
    ) -> None:
        """初期化."""
        self._config = config or ShopConfig.from_env()
        self._catalog_repository = catalog_repository
        self._order_repository = order_repository
        self._sales_report_repository = sales_report_repository
        self._change_feed = change_feed
        self._notifier = notifier
        self._rule_set = CustomizationRuleSet(self._config.get_rule_parameters())
        self._cart = Cart.create(self._config.delivery_fee)

    @property
    def config(self) -> ShopConfig:
        """店舗設定."""
        return self._config

    @property
    def cart(self) -> Cart:
        """セッションのカート."""
        return self._cart

    @property
    def rule_set(self) -> CustomizationRuleSet:
        """カスタマイズルールセット."""
        return self._rule_set

    def get_catalog_repository(self) -> CatalogRepository:
        """カタログリポジトリを取得する."""
        if self._catalog_repository is None:
            if self._config.use_dynamodb():
                from .infrastructure.repositories.dynamodb_catalog_repository import (
                    DynamoDBCatalogRepository,
                )

                self._catalog_repository = DynamoDBCatalogRepository(
                    self._config.catalog_table_name
                )
            else:
                self._catalog_repository = InMemoryCatalogRepository()
        return self._catalog_repository

    def get_order_repository(self) -> OrderRepository:
        """注文リポジトリを取得する."""
        if self._order_repository is None:
            if self._config.use_dynamodb():
                from .infrastructure.repositories.dynamodb_order_repository import (
                    DynamoDBOrderRepository,
                )

                self._order_repository = DynamoDBOrderRepository(
                    self._config.order_table_name
                )
            else:
                self._order_repository = InMemoryOrderRepository()
        return self._order_repository

    def get_sales_report_repository(self) -> SalesReportRepository:
        """売上レポートリポジトリを取得する."""
        if self._sales_report_repository is None:
            if self._config.use_dynamodb():
                from .infrastructure.repositories.dynamodb_sales_report_repository import (
                    DynamoDBSalesReportRepository,
                )

                self._sales_report_repository = DynamoDBSalesReportRepository(
                    self._config.sales_report_table_name
                )
            else:
                self._sales_report_repository = InMemorySalesReportRepository()
        return self._sales_report_repository

    def get_change_feed(self) -> ChangeNotificationFeed:
        """変更通知フィードを取得する."""
        if self._change_feed is None:
            self._change_feed = InMemoryChangeFeed()
        return self._change_feed

    def get_notifier(self) -> ShopNotifier:
        """店舗通知を取得する."""
        if self._notifier is None:
            self._notifier = LoggingShopNotifier()
        return self._notifier

    # 店頭

    def load_catalog(self) -> LoadCatalogUseCase:
        """カタログ読み込みユースケースを取得する."""
        return LoadCatalogUseCase(self.get_catalog_repository())

    def start_customization(self) -> StartCustomizationUseCase:
        """カスタマイズ開始ユースケースを取得する."""
        return StartCustomizationUseCase(self.get_catalog_repository(), self._rule_set)

    def add_to_cart(self) -> AddToCartUseCase:
        """カート追加ユースケースを取得する."""
        return AddToCartUseCase(self._cart)

    def submit_order(self) -> SubmitOrderUseCase:
        """注文送信ユースケースを取得する."""
        return SubmitOrderUseCase(
            self._cart, self.get_order_repository(), self.get_change_feed()
        )

    def live_catalog(self, category_id: str | None = None) -> LiveCatalog:
        """商品一覧ビューを生成する."""
        return LiveCatalog(self.load_catalog(), self.get_change_feed(), category_id)

    # 管理画面

    def list_orders(self) -> ListOrdersUseCase:
        """注文一覧取得ユースケースを取得する."""
        return ListOrdersUseCase(self.get_order_repository())

    def advance_order_status(self) -> AdvanceOrderStatusUseCase:
        """注文ステータス前進ユースケースを取得する."""
        return AdvanceOrderStatusUseCase(self.get_order_repository(), self.get_notifier())

    def live_order_board(self) -> LiveOrderBoard:
        """注文ボードを生成する."""
        return LiveOrderBoard(self.list_orders(), self.get_change_feed(), self.get_notifier())

    def update_product_stock(self) -> UpdateProductStockUseCase:
        """商品在庫更新ユースケースを取得する."""
        return UpdateProductStockUseCase(
            self.get_catalog_repository(), self.get_change_feed(), self.get_notifier()
        )

    def update_option_stock(self) -> UpdateOptionStockUseCase:
        """オプション在庫更新ユースケースを取得する."""
        return UpdateOptionStockUseCase(
            self.get_catalog_repository(), self.get_change_feed(), self.get_notifier()
        )

    def save_product(self) -> SaveProductUseCase:
        """商品保存ユースケースを取得する."""
        return SaveProductUseCase(self.get_catalog_repository(), self.get_change_feed())

    def delete_product(self) -> DeleteProductUseCase:
        """商品削除ユースケースを取得する."""
        return DeleteProductUseCase(self.get_catalog_repository(), self.get_change_feed())

    def generate_monthly_report(self) -> GenerateMonthlyReportUseCase:
        """月次売上レポート生成ユースケースを取得する."""
        return GenerateMonthlyReportUseCase(
            self.get_order_repository(), self.get_sales_report_repository()
        )
