"""変更通知に追従する一覧ビューのテスト."""
from unittest.mock import MagicMock

from softshake.application import LiveCatalog, LiveOrderBoard, ListOrdersUseCase, LoadCatalogUseCase
from softshake.domain.entities import LineItem, OrderPayload, Product
from softshake.domain.enums import ChangeEvent, OrderStatus
from softshake.domain.identifiers import ProductId
from softshake.domain.ports import ShopNotifier
from softshake.domain.value_objects import CustomerInfo, Money
from softshake.infrastructure import (
    InMemoryCatalogRepository,
    InMemoryChangeFeed,
    InMemoryOrderRepository,
)


def _payload(name: str) -> OrderPayload:
    return OrderPayload(
        customer=CustomerInfo(name=name, phone="11999999999"),
        items=(LineItem(product_id=ProductId("a500"), name="Açaí", price=Money.of("10.00")),),
        subtotal=Money.of("10.00"),
        delivery_fee=Money.zero(),
        total_amount=Money.of("10.00"),
    )


class TestLiveOrderBoard:
    """LiveOrderBoardの単体テスト."""

    def test_注文追加通知で再取得し通知する(self) -> None:
        """ORDER_INSERTED受信時に全件再取得と新規注文通知が行われることを確認."""
        repo = InMemoryOrderRepository()
        feed = InMemoryChangeFeed()
        notifier = MagicMock(spec=ShopNotifier)
        board = LiveOrderBoard(ListOrdersUseCase(repo), feed, notifier)
        board.start()
        assert board.orders == []

        repo.create_order(_payload("Maria"))
        feed.publish(ChangeEvent.ORDER_INSERTED)

        assert [o.customer.name for o in board.orders] == ["Maria"]
        notifier.notify_new_order.assert_called_once()

    def test_重複した通知でも一覧は重複しない(self) -> None:
        """同じ通知を2回受けても注文の表示と新規注文通知が1回だけであることを確認."""
        repo = InMemoryOrderRepository()
        feed = InMemoryChangeFeed()
        notifier = MagicMock(spec=ShopNotifier)
        board = LiveOrderBoard(ListOrdersUseCase(repo), feed, notifier)
        board.start()
        repo.create_order(_payload("Maria"))

        feed.publish(ChangeEvent.ORDER_INSERTED)
        feed.publish(ChangeEvent.ORDER_INSERTED)

        assert len(board.orders) == 1
        notifier.notify_new_order.assert_called_once()

    def test_絞り込み条件が再取得に使われる(self) -> None:
        """set_filterの条件が再取得でも維持されることを確認."""
        repo = InMemoryOrderRepository()
        feed = InMemoryChangeFeed()
        board = LiveOrderBoard(ListOrdersUseCase(repo), feed, MagicMock(spec=ShopNotifier))
        board.start()
        board.set_filter(OrderStatus.PENDING, "ana")

        repo.create_order(_payload("Ana"))
        repo.create_order(_payload("Bruno"))
        feed.publish(ChangeEvent.ORDER_INSERTED)

        assert [o.customer.name for o in board.orders] == ["Ana"]
        assert board.result.total_count == 2

    def test_停止後は通知を受けない(self) -> None:
        """stop後は購読が解除されることを確認."""
        feed = InMemoryChangeFeed()
        board = LiveOrderBoard(
            ListOrdersUseCase(InMemoryOrderRepository()), feed, MagicMock(spec=ShopNotifier)
        )
        board.start()
        board.start()
        assert feed.count_listeners(ChangeEvent.ORDER_INSERTED) == 1

        board.stop()
        assert feed.count_listeners(ChangeEvent.ORDER_INSERTED) == 0


class TestLiveCatalog:
    """LiveCatalogの単体テスト."""

    def test_商品変更通知で再取得する(self) -> None:
        """PRODUCTS_CHANGED受信時に商品一覧が更新されることを確認."""
        repo = InMemoryCatalogRepository()
        feed = InMemoryChangeFeed()
        catalog = LiveCatalog(LoadCatalogUseCase(repo), feed)
        catalog.start()
        assert catalog.products == []

        repo.save_product(Product(ProductId("p1"), "Shake", Money.of("12.00")))
        feed.publish(ChangeEvent.PRODUCTS_CHANGED)

        assert [p.name for p in catalog.products] == ["Shake"]

        catalog.stop()
        assert feed.count_listeners(ChangeEvent.PRODUCTS_CHANGED) == 0
