"""注文エンティティ."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime

from ..enums import OrderStatus
from ..identifiers import OrderId
from ..value_objects import CustomerInfo, Money

from .line_item import LineItem


@dataclass(frozen=True)
class OrderPayload:
    """注文リポジトリに渡す登録内容（ID・日時・ステータスはリポジトリが付与）."""

    customer: CustomerInfo
    items: tuple[LineItem, ...]
    subtotal: Money
    delivery_fee: Money
    total_amount: Money
    delivery_date: date | None = None

    def __post_init__(self) -> None:
        """バリデーション."""
        if not self.items:
            raise ValueError("Order must contain at least one item")
        if self.subtotal.add(self.delivery_fee) != self.total_amount:
            raise ValueError("Total amount must equal subtotal plus delivery fee")


@dataclass(frozen=True)
class OrderItemLine:
    """注文詳細表示用の1行."""

    quantity: int
    name: str
    topping_names: tuple[str, ...]
    unit_price: Money
    line_total: Money


@dataclass
class Order:
    """確定した注文."""

    order_id: OrderId
    customer: CustomerInfo
    items: list[LineItem]
    subtotal: Money
    delivery_fee: Money
    total_amount: Money
    status: OrderStatus
    created_at: datetime
    delivery_date: date | None = None
    updated_at: datetime | None = field(default=None)

    @classmethod
    def from_payload(
        cls,
        payload: OrderPayload,
        order_id: OrderId | None = None,
        created_at: datetime | None = None,
    ) -> Order:
        """登録内容からPENDINGの注文を生成する."""
        now = created_at or datetime.now()
        return cls(
            order_id=order_id or OrderId.generate(),
            customer=payload.customer,
            items=list(payload.items),
            subtotal=payload.subtotal,
            delivery_fee=payload.delivery_fee,
            total_amount=payload.total_amount,
            status=OrderStatus.PENDING,
            created_at=now,
            delivery_date=payload.delivery_date,
            updated_at=now,
        )

    def get_next_status(self) -> OrderStatus:
        """次に進めるステータスを取得する."""
        return self.status.next()

    def apply_status(self, new_status: OrderStatus) -> None:
        """永続化済みのステータスを反映する（1段階ずつ前進のみ）."""
        if new_status == self.status:
            return
        if new_status != self.status.next():
            raise ValueError(
                f"Invalid status transition: {self.status.value} -> {new_status.value}"
            )
        self.status = new_status
        self.updated_at = datetime.now()

    def is_completed(self) -> bool:
        """完了済みか判定."""
        return self.status.is_terminal()

    def get_order_number(self) -> str:
        """画面表示用の注文番号."""
        return self.order_id.short()

    def matches_search(self, query: str) -> bool:
        """検索語が氏名・電話番号・注文IDのいずれかに含まれるか判定."""
        if not query:
            return True
        return (
            query.lower() in self.customer.name.lower()
            or query in self.customer.phone
            or query in self.order_id.value
        )

    def get_item_lines(self) -> list[OrderItemLine]:
        """注文詳細表示用の明細行を取得する."""
        return [
            OrderItemLine(
                quantity=item.quantity,
                name=item.name,
                topping_names=tuple(t.name for t in item.toppings),
                unit_price=item.get_unit_price(),
                line_total=item.get_line_total(),
            )
            for item in self.items
        ]
