"""AdvanceOrderStatusUseCaseのテスト."""
from unittest.mock import MagicMock

import pytest

from softshake.application.use_cases import AdvanceOrderStatusUseCase
from softshake.domain.entities import LineItem, Order, OrderPayload
from softshake.domain.enums import OrderStatus
from softshake.domain.identifiers import ProductId
from softshake.domain.ports import OrderRepository, RepositoryError, ShopNotifier
from softshake.domain.value_objects import CustomerInfo, Money
from softshake.infrastructure.repositories import InMemoryOrderRepository


def _payload() -> OrderPayload:
    return OrderPayload(
        customer=CustomerInfo(name="Maria", phone="11999999999"),
        items=(LineItem(product_id=ProductId("a500"), name="Açaí", price=Money.of("10.00")),),
        subtotal=Money.of("10.00"),
        delivery_fee=Money.zero(),
        total_amount=Money.of("10.00"),
    )


class TestAdvanceOrderStatusUseCase:
    """AdvanceOrderStatusUseCaseの単体テスト."""

    def test_ステータスが1段階進む(self) -> None:
        """PENDINGからACCEPTEDに進み永続化されることを確認."""
        repo = InMemoryOrderRepository()
        order = repo.create_order(_payload())
        notifier = MagicMock(spec=ShopNotifier)

        result = AdvanceOrderStatusUseCase(repo, notifier).execute(order)

        assert result.changed
        assert result.previous_status == OrderStatus.PENDING
        assert order.status == OrderStatus.ACCEPTED
        assert repo.find_by_id(order.order_id).status == OrderStatus.ACCEPTED
        notifier.notify_order_sent.assert_not_called()

    def test_完了時に送信通知が出る(self) -> None:
        """DELIVERINGからCOMPLETEDに進むと送信通知が出ることを確認."""
        repo = InMemoryOrderRepository()
        order = repo.create_order(_payload())
        notifier = MagicMock(spec=ShopNotifier)
        use_case = AdvanceOrderStatusUseCase(repo, notifier)

        for _ in range(4):
            use_case.execute(order)

        assert order.status == OrderStatus.COMPLETED
        notifier.notify_order_sent.assert_called_once_with(order.get_order_number())

    def test_完了済みの注文は変化しない(self) -> None:
        """COMPLETEDの注文は保存も通知もされないことを確認."""
        order = Order.from_payload(_payload())
        order.status = OrderStatus.COMPLETED
        repo = MagicMock(spec=OrderRepository)
        notifier = MagicMock(spec=ShopNotifier)

        result = AdvanceOrderStatusUseCase(repo, notifier).execute(order)

        assert not result.changed
        assert order.status == OrderStatus.COMPLETED
        repo.update_order_status.assert_not_called()
        notifier.notify_order_sent.assert_not_called()

    def test_保存失敗時は注文が変わらない(self) -> None:
        """永続化に失敗した場合RepositoryErrorとなり画面上の注文が変わらないことを確認."""
        order = Order.from_payload(_payload())
        repo = MagicMock(spec=OrderRepository)
        repo.update_order_status.side_effect = RepositoryError("conflict")

        with pytest.raises(RepositoryError):
            AdvanceOrderStatusUseCase(repo, MagicMock(spec=ShopNotifier)).execute(order)

        assert order.status == OrderStatus.PENDING
