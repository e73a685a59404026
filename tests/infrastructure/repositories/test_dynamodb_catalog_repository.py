"""DynamoDBCatalogRepositoryのテスト."""
from decimal import Decimal
from unittest.mock import MagicMock, patch

import pytest
from botocore.exceptions import ClientError

from softshake.domain.entities import CustomizationOption, Product
from softshake.domain.enums import CategoryRule, OptionKind
from softshake.domain.identifiers import CategoryId, OptionId, ProductId
from softshake.domain.ports import RepositoryError
from softshake.domain.value_objects import Money
from softshake.infrastructure.repositories.dynamodb_catalog_repository import (
    DynamoDBCatalogRepository,
)


def _client_error(operation: str) -> ClientError:
    return ClientError(
        {"Error": {"Code": "ProvisionedThroughputExceededException", "Message": "slow down"}},
        operation,
    )


def _product_item(product_id: str, name: str, category_id: str | None = "acai") -> dict:
    item = {
        "pk": f"product#{product_id}",
        "entity_type": "product",
        "product_id": product_id,
        "name": name,
        "description": "",
        "price": Decimal("10.00"),
        "image_url": "",
        "in_stock": True,
    }
    if category_id is not None:
        item["category_id"] = category_id
    return item


@patch.object(DynamoDBCatalogRepository, "__init__", lambda self, table_name=None: None)
class TestDynamoDBCatalogRepository:
    """DynamoDBCatalogRepositoryの単体テスト."""

    def _repo(self) -> DynamoDBCatalogRepository:
        repo = DynamoDBCatalogRepository()
        repo._table = MagicMock()
        return repo

    def test_商品一覧は複数ページを結合する(self) -> None:
        """LastEvaluatedKeyがある間はqueryを繰り返すことを確認."""
        repo = self._repo()
        repo._table.query.side_effect = [
            {"Items": [_product_item("p2", "Shake")], "LastEvaluatedKey": {"pk": "product#p2"}},
            {"Items": [_product_item("p1", "Açaí 500ml")]},
        ]

        products = repo.list_products()

        assert [p.name for p in products] == ["Açaí 500ml", "Shake"]
        assert repo._table.query.call_count == 2
        second_call = repo._table.query.call_args_list[1].kwargs
        assert second_call["ExclusiveStartKey"] == {"pk": "product#p2"}
        assert second_call["IndexName"] == "entity_type-index"

    def test_カテゴリ指定でフィルタ式がつく(self) -> None:
        """カテゴリ指定時はFilterExpressionが渡されることを確認."""
        repo = self._repo()
        repo._table.query.return_value = {"Items": []}

        repo.list_products(CategoryId("acai"))

        assert "FilterExpression" in repo._table.query.call_args.kwargs

    def test_カテゴリを復元できる(self) -> None:
        """get_itemの結果からカテゴリが復元されることを確認."""
        repo = self._repo()
        repo._table.get_item.return_value = {
            "Item": {
                "pk": "category#acai",
                "category_id": "acai",
                "name": "Açaí",
                "slug": "acai",
                "rule": "topping-limited",
            }
        }

        category = repo.find_category(CategoryId("acai"))

        assert category.rule == CategoryRule.TOPPING_LIMITED
        repo._table.get_item.assert_called_once_with(Key={"pk": "category#acai"})

    def test_存在しない商品はNone(self) -> None:
        """Itemがない場合Noneが返ることを確認."""
        repo = self._repo()
        repo._table.get_item.return_value = {}
        assert repo.find_product(ProductId("missing")) is None

    def test_オプションは所有者キーで引く(self) -> None:
        """カテゴリ共通オプションはowner_key-indexで取得されることを確認."""
        repo = self._repo()
        repo._table.query.return_value = {
            "Items": [
                {
                    "pk": "option#g",
                    "option_id": "g",
                    "name": "Granola",
                    "kind": "topping",
                    "price": Decimal("1.5"),
                    "in_stock": False,
                    "category_id": "acai",
                    "owner_key": "category#acai",
                }
            ]
        }

        options = repo.list_options(CategoryId("acai"))

        assert options[0].price == Money.of("1.50")
        assert not options[0].in_stock
        assert repo._table.query.call_args.kwargs["IndexName"] == "owner_key-index"

    def test_在庫更新は存在条件つき(self) -> None:
        """在庫更新がattribute_exists条件つきのupdate_itemになることを確認."""
        repo = self._repo()
        repo.set_option_stock(OptionId("g"), False)
        kwargs = repo._table.update_item.call_args.kwargs
        assert kwargs["Key"] == {"pk": "option#g"}
        assert kwargs["ConditionExpression"] == "attribute_exists(pk)"
        assert kwargs["ExpressionAttributeValues"] == {":in_stock": False}

    def test_商品削除で商品固有のオプションも消える(self) -> None:
        """batch_writerで商品とオプションが削除されることを確認."""
        repo = self._repo()
        repo._table.query.return_value = {
            "Items": [
                {
                    "pk": "option#f",
                    "option_id": "f",
                    "name": "Flocos",
                    "kind": "flavor",
                    "product_id": "pote",
                    "owner_key": "product#pote",
                }
            ]
        }
        batch = repo._table.batch_writer.return_value.__enter__.return_value

        repo.delete_product(ProductId("pote"))

        deleted = [c.kwargs["Key"] for c in batch.delete_item.call_args_list]
        assert deleted == [{"pk": "option#f"}, {"pk": "product#pote"}]

    def test_ClientErrorはRepositoryErrorになる(self) -> None:
        """DynamoDBのエラーがRepositoryErrorに変換されることを確認."""
        repo = self._repo()
        repo._table.query.side_effect = _client_error("Query")
        with pytest.raises(RepositoryError, match="list categories"):
            repo.list_categories()


class TestDynamoDBCatalogSerialization:
    """DynamoDBシリアライズのテスト."""

    def test_商品をシリアライズできる(self) -> None:
        product = Product(
            ProductId("p1"), "Shake", Money.of("12.90"), category_id=CategoryId("shakes")
        )
        item = DynamoDBCatalogRepository._from_product(product)
        assert item["pk"] == "product#p1"
        assert item["entity_type"] == "product"
        assert item["price"] == Decimal("12.90")
        assert item["category_id"] == "shakes"
        assert DynamoDBCatalogRepository._to_product(item) == product

    def test_カテゴリなしの商品はcategory_idを持たない(self) -> None:
        item = DynamoDBCatalogRepository._from_product(
            Product(ProductId("p1"), "Picolé", Money.of("4.00"))
        )
        assert "category_id" not in item

    def test_商品単位のオプションの所有者キー(self) -> None:
        option = CustomizationOption(
            OptionId("f"), "Flocos", OptionKind.FLAVOR, product_id=ProductId("pote")
        )
        item = DynamoDBCatalogRepository._from_option(option)
        assert item["owner_key"] == "product#pote"
        assert DynamoDBCatalogRepository._to_option(item) == option
