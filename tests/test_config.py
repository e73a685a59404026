"""ShopConfigのテスト."""
import pytest

from softshake.config import ShopConfig
from softshake.domain.value_objects import Money

_ENV_KEYS = (
    "DELIVERY_FEE",
    "MIN_LEAD_DAYS",
    "ICE_CREAM_BUCKET_PRICE",
    "CATALOG_TABLE_NAME",
    "ORDER_TABLE_NAME",
    "SALES_REPORT_TABLE_NAME",
)


@pytest.fixture
def clean_env(monkeypatch):
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


class TestShopConfig:
    """ShopConfigの単体テスト."""

    def test_デフォルト値(self, clean_env) -> None:
        """環境変数がない場合のデフォルト値を確認."""
        config = ShopConfig.from_env()
        assert config.delivery_fee == Money.of("2.00")
        assert config.min_lead_days == 3
        assert config.bucket_price == Money.of("75.00")
        assert config.catalog_table_name == "softshake-catalog"
        assert not config.use_dynamodb()

    def test_環境変数から読み込む(self, clean_env) -> None:
        """環境変数の値が設定に反映されることを確認."""
        clean_env.setenv("DELIVERY_FEE", "5.50")
        clean_env.setenv("MIN_LEAD_DAYS", "2")
        clean_env.setenv("ICE_CREAM_BUCKET_PRICE", "80")
        clean_env.setenv("ORDER_TABLE_NAME", "orders")

        config = ShopConfig.from_env()

        assert config.delivery_fee == Money.of("5.50")
        assert config.min_lead_days == 2
        assert config.bucket_price == Money.of("80.00")
        assert config.use_dynamodb()

    def test_ルールパラメータに反映される(self) -> None:
        """リードタイムとバケツ価格がルールパラメータに渡ることを確認."""
        params = ShopConfig(min_lead_days=5, bucket_price=Money.of("90.00")).get_rule_parameters()
        assert params.min_lead_days == 5
        assert params.bucket_price == Money.of("90.00")
