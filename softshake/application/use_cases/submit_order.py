"""注文送信ユースケース."""
import logging

from softshake.domain.entities import Cart, Order, OrderPayload
from softshake.domain.enums import ChangeEvent, DeliveryType
from softshake.domain.ports import ChangeNotificationFeed, OrderRepository, RepositoryError
from softshake.domain.value_objects import CustomerInfo

logger = logging.getLogger(__name__)


class EmptyCartError(Exception):
    """カートが空のエラー."""

    pass


class InvalidCheckoutError(Exception):
    """チェックアウトフォームの入力不備エラー."""

    pass


class OrderSubmissionError(Exception):
    """注文の登録に失敗したエラー（カートは保持される）."""

    pass


class SubmitOrderUseCase:
    """カートの内容を注文として登録するユースケース."""

    def __init__(
        self,
        cart: Cart,
        order_repository: OrderRepository,
        change_feed: ChangeNotificationFeed | None = None,
    ) -> None:
        """初期化."""
        self._cart = cart
        self._order_repository = order_repository
        self._change_feed = change_feed

    def execute(
        self,
        name: str,
        phone: str,
        delivery_type: DeliveryType | str = DeliveryType.PICKUP,
        address: str | None = None,
    ) -> Order:
        """注文を登録する.

        登録に成功した場合のみカートを空にする。

        Args:
            name: 注文者氏名
            phone: 電話番号
            delivery_type: 受け取り方法
            address: 配達先住所（配達時は必須）

        Returns:
            登録された注文

        Raises:
            EmptyCartError: カートが空の場合
            InvalidCheckoutError: フォームの入力が不正な場合
            OrderSubmissionError: 注文の登録に失敗した場合
        """
        if self._cart.is_empty():
            raise EmptyCartError("Cart is empty")

        try:
            customer = CustomerInfo(
                name=(name or "").strip(),
                phone=(phone or "").strip(),
                delivery_type=DeliveryType(delivery_type),
                address=address.strip() if address else None,
            )
        except ValueError as e:
            raise InvalidCheckoutError(str(e)) from e

        payload = OrderPayload(
            customer=customer,
            items=tuple(self._cart.get_items()),
            subtotal=self._cart.get_subtotal(),
            delivery_fee=self._cart.get_delivery_fee(customer.delivery_type),
            total_amount=self._cart.get_total(customer.delivery_type),
            delivery_date=self._cart.get_earliest_delivery_date(),
        )

        try:
            order = self._order_repository.create_order(payload)
        except RepositoryError as e:
            logger.error(f"Order submission failed for {customer.name}: {e}")
            raise OrderSubmissionError(str(e)) from e

        self._cart.clear()
        logger.info(f"Order submitted: {order.order_id} total={order.total_amount}")
        if self._change_feed is not None:
            self._change_feed.publish(ChangeEvent.ORDER_INSERTED)
        return order
