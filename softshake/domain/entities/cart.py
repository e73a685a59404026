"""カート集約ルート."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone

from ..enums import DeliveryType
from ..identifiers import ProductId
from ..value_objects import Money

from .line_item import LineItem


def _is_valid_quantity(quantity: object) -> bool:
    return isinstance(quantity, int) and not isinstance(quantity, bool) and quantity >= 1


@dataclass
class Cart:
    """買い物セッション中の明細を保持するコンテナ（集約ルート）.

    どの操作も例外を送出しない。無効な入力は何もしない。
    """

    delivery_fee: Money = field(default_factory=Money.zero)
    _items: list[LineItem] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(cls, delivery_fee: Money | None = None) -> Cart:
        """新しい空のカートを作成する."""
        now = datetime.now(timezone.utc)
        return cls(
            delivery_fee=delivery_fee or Money.zero(),
            _items=[],
            created_at=now,
            updated_at=now,
        )

    def add_item(self, item: LineItem) -> LineItem:
        """明細を追加する.

        同じ構成の明細があれば数量を1増やし、新しい明細の他の内容は捨てる。
        """
        key = item.get_line_key()
        for i, existing in enumerate(self._items):
            if existing.get_line_key() == key:
                merged = existing.with_quantity(existing.quantity + 1)
                self._items[i] = merged
                self._touch()
                return merged

        added = item.with_quantity(1)
        self._items.append(added)
        self._touch()
        return added

    def remove_item(self, product_id: ProductId) -> int:
        """指定商品IDの明細をすべて削除し、削除件数を返す."""
        before = len(self._items)
        self._items = [item for item in self._items if item.product_id != product_id]
        removed = before - len(self._items)
        if removed:
            self._touch()
        return removed

    def remove_line(self, line_key: str) -> bool:
        """構成キーが一致する明細を1件削除する."""
        for i, item in enumerate(self._items):
            if item.get_line_key() == line_key:
                self._items.pop(i)
                self._touch()
                return True
        return False

    def update_quantity(self, product_id: ProductId, quantity: int) -> bool:
        """指定商品IDの明細の数量を変更する（整数でない・1未満は無視）."""
        if not _is_valid_quantity(quantity):
            return False
        updated = False
        for i, item in enumerate(self._items):
            if item.product_id == product_id:
                self._items[i] = item.with_quantity(quantity)
                updated = True
        if updated:
            self._touch()
        return updated

    def update_line_quantity(self, line_key: str, quantity: int) -> bool:
        """構成キーが一致する明細の数量を変更する（整数でない・1未満は無視）."""
        if not _is_valid_quantity(quantity):
            return False
        for i, item in enumerate(self._items):
            if item.get_line_key() == line_key:
                self._items[i] = item.with_quantity(quantity)
                self._touch()
                return True
        return False

    def clear(self) -> None:
        """全明細を削除する."""
        self._items.clear()
        self._touch()

    def get_subtotal(self) -> Money:
        """配達料を含まない合計金額."""
        return Money.sum_of([item.get_line_total() for item in self._items])

    def get_delivery_fee(self, delivery_type: DeliveryType) -> Money:
        """受け取り方法に応じた配達料."""
        if delivery_type == DeliveryType.DELIVERY:
            return self.delivery_fee
        return Money.zero()

    def get_total(self, delivery_type: DeliveryType = DeliveryType.PICKUP) -> Money:
        """配達料込みの合計金額（読み出しのたびに再計算）."""
        return self.get_subtotal().add(self.get_delivery_fee(delivery_type))

    def get_earliest_delivery_date(self) -> date | None:
        """日付指定のある明細のうち最も早い受け取り日."""
        dates = [item.delivery_date for item in self._items if item.delivery_date is not None]
        if not dates:
            return None
        return min(dates)

    def get_items(self) -> list[LineItem]:
        """明細のリストを取得（防御的コピー）."""
        return list(self._items)

    def find_items(self, product_id: ProductId) -> list[LineItem]:
        """指定商品IDの明細を取得する."""
        return [item for item in self._items if item.product_id == product_id]

    def get_item_count(self) -> int:
        """明細行数を取得する."""
        return len(self._items)

    def get_total_quantity(self) -> int:
        """全明細の数量合計を取得する."""
        return sum(item.quantity for item in self._items)

    def is_empty(self) -> bool:
        """カートが空か判定する."""
        return len(self._items) == 0

    def _touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)
