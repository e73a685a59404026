"""DynamoDB 注文リポジトリ実装."""
import logging
import os
from datetime import date, datetime

import boto3
from boto3.dynamodb.conditions import Attr
from botocore.exceptions import BotoCoreError, ClientError

from softshake.domain.entities import LineItem, Order, OrderPayload
from softshake.domain.enums import DeliveryType, OrderStatus
from softshake.domain.identifiers import OrderId
from softshake.domain.ports import OrderRepository, RepositoryError
from softshake.domain.value_objects import CustomerInfo, Money

logger = logging.getLogger(__name__)


class DynamoDBOrderRepository(OrderRepository):
    """DynamoDB 注文リポジトリ."""

    def __init__(self, table_name: str | None = None) -> None:
        """初期化."""
        self._table_name = table_name or os.environ.get(
            "ORDER_TABLE_NAME", "softshake-order"
        )
        self._dynamodb = boto3.resource("dynamodb")
        self._table = self._dynamodb.Table(self._table_name)

    def create_order(self, payload: OrderPayload) -> Order:
        """注文を登録する."""
        order = Order.from_payload(payload)
        try:
            self._table.put_item(
                Item=self._to_dynamodb_item(order),
                ConditionExpression="attribute_not_exists(order_id)",
            )
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Failed to create order {order.order_id}: {e}")
            raise RepositoryError(f"Failed to create order: {e}") from e
        logger.info(f"Order created: {order.order_id}")
        return order

    def update_order_status(self, order_id: OrderId, status: OrderStatus) -> None:
        """注文ステータスを更新する."""
        try:
            self._table.update_item(
                Key={"order_id": order_id.value},
                UpdateExpression="SET #status = :status, updated_at = :updated_at",
                ConditionExpression="attribute_exists(order_id)",
                ExpressionAttributeNames={"#status": "status"},
                ExpressionAttributeValues={
                    ":status": status.value,
                    ":updated_at": datetime.now().isoformat(),
                },
            )
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Failed to update status of order {order_id}: {e}")
            raise RepositoryError(f"Failed to update order status: {e}") from e

    def find_by_id(self, order_id: OrderId) -> Order | None:
        """注文IDで検索する."""
        try:
            response = self._table.get_item(Key={"order_id": order_id.value})
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Failed to get order {order_id}: {e}")
            raise RepositoryError(f"Failed to get order: {e}") from e
        item = response.get("Item")
        if item is None:
            return None
        return self._from_dynamodb_item(item)

    def list_orders(self, status: OrderStatus | None = None) -> list[Order]:
        """注文一覧を作成日時の新しい順で取得する."""
        scan_kwargs: dict = {}
        if status is not None:
            scan_kwargs["FilterExpression"] = Attr("status").eq(status.value)

        items: list[dict] = []
        try:
            while True:
                response = self._table.scan(**scan_kwargs)
                items.extend(response.get("Items", []))
                last_key = response.get("LastEvaluatedKey")
                if not last_key:
                    break
                scan_kwargs["ExclusiveStartKey"] = last_key
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Failed to list orders: {e}")
            raise RepositoryError(f"Failed to list orders: {e}") from e

        orders = [self._from_dynamodb_item(item) for item in items]
        return sorted(orders, key=lambda o: o.created_at, reverse=True)

    @staticmethod
    def _line_to_dynamodb(item: LineItem) -> dict:
        """明細を DynamoDB の Map に変換する（金額は Decimal）."""
        data = item.to_dict()
        data["price"] = item.price.value
        if item.toppings:
            data["toppings"] = [
                {"id": t.option_id.value, "name": t.name, "price": t.price.value}
                for t in item.toppings
            ]
        return data

    @staticmethod
    def _to_dynamodb_item(order: Order) -> dict:
        """Order を DynamoDB アイテムに変換する."""
        item: dict = {
            "order_id": order.order_id.value,
            "customer_name": order.customer.name,
            "customer_phone": order.customer.phone,
            "delivery_type": order.customer.delivery_type.value,
            "items": [DynamoDBOrderRepository._line_to_dynamodb(i) for i in order.items],
            "subtotal": order.subtotal.value,
            "delivery_fee": order.delivery_fee.value,
            "total_amount": order.total_amount.value,
            "status": order.status.value,
            "created_at": order.created_at.isoformat(),
        }
        if order.customer.address is not None:
            item["address"] = order.customer.address
        if order.delivery_date is not None:
            item["delivery_date"] = order.delivery_date.isoformat()
        if order.updated_at is not None:
            item["updated_at"] = order.updated_at.isoformat()
        return item

    @staticmethod
    def _from_dynamodb_item(item: dict) -> Order:
        """DynamoDB アイテムから Order を復元する."""
        delivery_date = item.get("delivery_date")
        updated_at = item.get("updated_at")
        return Order(
            order_id=OrderId(item["order_id"]),
            customer=CustomerInfo(
                name=item["customer_name"],
                phone=item["customer_phone"],
                delivery_type=DeliveryType(item.get("delivery_type", "pickup")),
                address=item.get("address"),
            ),
            items=[LineItem.from_dict(i) for i in item.get("items", [])],
            subtotal=Money.of(item["subtotal"]),
            delivery_fee=Money.of(item["delivery_fee"]),
            total_amount=Money.of(item["total_amount"]),
            status=OrderStatus(item["status"]),
            created_at=datetime.fromisoformat(item["created_at"]),
            delivery_date=date.fromisoformat(delivery_date) if delivery_date else None,
            updated_at=datetime.fromisoformat(updated_at) if updated_at else None,
        )
