"""カート明細エンティティ."""
from __future__ import annotations

import json
from dataclasses import dataclass, replace
from datetime import date

from ..identifiers import OptionId, ProductId
from ..value_objects import ChosenOption, Money


@dataclass(frozen=True)
class LineItem:
    """価格と数量が確定したカートの1行.

    price はトッピングを含まない単価（バリエーション商品は上書き価格）、
    トッピング代は toppings から都度計算する。
    """

    product_id: ProductId
    name: str
    price: Money
    quantity: int = 1
    image_url: str = ""
    flavors: tuple[str, ...] = ()
    fillings: tuple[str, ...] = ()
    variation: str | None = None
    delivery_date: date | None = None
    toppings: tuple[ChosenOption, ...] = ()
    customer_name: str | None = None
    customer_phone: str | None = None

    def __post_init__(self) -> None:
        """バリデーション."""
        if not self.name:
            raise ValueError("Line item name cannot be empty")
        if self.quantity < 1:
            raise ValueError("Quantity must be at least 1")

    def get_toppings_price(self) -> Money:
        """トッピング代の合計."""
        return Money.sum_of([t.price for t in self.toppings])

    def get_unit_price(self) -> Money:
        """トッピング込みの単価."""
        return self.price.add(self.get_toppings_price())

    def get_line_total(self) -> Money:
        """この行の小計（単価 × 数量）."""
        return self.get_unit_price().multiply(self.quantity)

    def get_line_key(self) -> str:
        """同一構成判定用のキー（商品ID + 全カスタマイズ内容の正規化表現）."""
        key = {
            "product_id": self.product_id.value,
            "toppings": sorted(t.option_id.value for t in self.toppings),
            "flavors": sorted(self.flavors),
            "fillings": sorted(self.fillings),
            "variation": self.variation,
            "delivery_date": self.delivery_date.isoformat() if self.delivery_date else None,
            "customer_name": self.customer_name,
            "customer_phone": self.customer_phone,
        }
        return json.dumps(key, sort_keys=True, ensure_ascii=False)

    def with_quantity(self, quantity: int) -> LineItem:
        """数量を変更した明細を返す."""
        return replace(self, quantity=quantity)

    def to_dict(self) -> dict:
        """注文スナップショット用の辞書に変換する."""
        item: dict = {
            "id": self.product_id.value,
            "name": self.name,
            "price": str(self.price.value),
            "quantity": self.quantity,
            "image_url": self.image_url,
        }
        if self.flavors:
            item["flavors"] = list(self.flavors)
        if self.fillings:
            item["fillings"] = list(self.fillings)
        if self.variation is not None:
            item["variation"] = self.variation
        if self.delivery_date is not None:
            item["delivery_date"] = self.delivery_date.isoformat()
        if self.toppings:
            item["toppings"] = [t.to_dict() for t in self.toppings]
        if self.customer_name is not None:
            item["customer_name"] = self.customer_name
        if self.customer_phone is not None:
            item["customer_phone"] = self.customer_phone
        return item

    @classmethod
    def from_dict(cls, item: dict) -> LineItem:
        """注文スナップショットの辞書から復元する."""
        delivery_date = item.get("delivery_date")
        return cls(
            product_id=ProductId(item["id"]),
            name=item["name"],
            price=Money.of(item["price"]),
            quantity=int(item["quantity"]),
            image_url=item.get("image_url", ""),
            flavors=tuple(item.get("flavors", [])),
            fillings=tuple(item.get("fillings", [])),
            variation=item.get("variation"),
            delivery_date=date.fromisoformat(delivery_date) if delivery_date else None,
            toppings=tuple(
                ChosenOption(
                    option_id=OptionId(t["id"]),
                    name=t["name"],
                    price=Money.of(t["price"]),
                )
                for t in item.get("toppings", [])
            ),
            customer_name=item.get("customer_name"),
            customer_phone=item.get("customer_phone"),
        )
