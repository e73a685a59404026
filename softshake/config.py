"""店舗設定."""
from __future__ import annotations

import os
from dataclasses import dataclass, field

from .domain.services import RuleParameters
from .domain.services.customization_rules import ICE_CREAM_BUCKET_PRICE, MIN_LEAD_DAYS
from .domain.value_objects import Money

DEFAULT_DELIVERY_FEE = Money.of("2.00")


@dataclass(frozen=True)
class ShopConfig:
    """店舗全体で共有する設定値.

    配達料はカートの合計表示と注文登録の両方でこの値を使う。
    """

    delivery_fee: Money = field(default_factory=lambda: DEFAULT_DELIVERY_FEE)
    min_lead_days: int = MIN_LEAD_DAYS
    bucket_price: Money = field(default_factory=lambda: ICE_CREAM_BUCKET_PRICE)
    catalog_table_name: str = "softshake-catalog"
    order_table_name: str | None = None
    sales_report_table_name: str = "softshake-sales-report"

    @classmethod
    def from_env(cls) -> ShopConfig:
        """環境変数から設定を読み込む."""
        return cls(
            delivery_fee=Money.of(os.environ.get("DELIVERY_FEE", "2.00")),
            min_lead_days=int(os.environ.get("MIN_LEAD_DAYS", str(MIN_LEAD_DAYS))),
            bucket_price=Money.of(
                os.environ.get("ICE_CREAM_BUCKET_PRICE", str(ICE_CREAM_BUCKET_PRICE.value))
            ),
            catalog_table_name=os.environ.get("CATALOG_TABLE_NAME", "softshake-catalog"),
            order_table_name=os.environ.get("ORDER_TABLE_NAME"),
            sales_report_table_name=os.environ.get(
                "SALES_REPORT_TABLE_NAME", "softshake-sales-report"
            ),
        )

    def use_dynamodb(self) -> bool:
        """DynamoDBを使用するか判定する."""
        # ORDER_TABLE_NAME が設定されていればDynamoDBを使用
        return self.order_table_name is not None

    def get_rule_parameters(self) -> RuleParameters:
        """カスタマイズルールのパラメータを取得する."""
        return RuleParameters(
            min_lead_days=self.min_lead_days,
            bucket_price=self.bucket_price,
        )
