"""DynamoDB カタログリポジトリ実装."""
import logging
import os

import boto3
from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import BotoCoreError, ClientError

from softshake.domain.entities import Category, CustomizationOption, Product
from softshake.domain.enums import CategoryRule, OptionKind
from softshake.domain.identifiers import CategoryId, OptionId, ProductId
from softshake.domain.ports import CatalogRepository, RepositoryError
from softshake.domain.value_objects import Money

logger = logging.getLogger(__name__)

CATEGORY = "category"
PRODUCT = "product"
OPTION = "option"


def _pk(entity_type: str, entity_id: str) -> str:
    return f"{entity_type}#{entity_id}"


class DynamoDBCatalogRepository(CatalogRepository):
    """DynamoDB カタログリポジトリ.

    カテゴリ・商品・オプションを1テーブルに格納する。
    pk は "<種別>#<ID>"、entity_type-index で種別ごとに、
    owner_key-index で所有者ごとのオプションを引く。
    """

    def __init__(self, table_name: str | None = None) -> None:
        """初期化."""
        self._table_name = table_name or os.environ.get(
            "CATALOG_TABLE_NAME", "softshake-catalog"
        )
        self._dynamodb = boto3.resource("dynamodb")
        self._table = self._dynamodb.Table(self._table_name)

    def list_categories(self) -> list[Category]:
        """カテゴリ一覧を名前順で取得する."""
        items = self._query_all(
            "list categories",
            IndexName="entity_type-index",
            KeyConditionExpression=Key("entity_type").eq(CATEGORY),
        )
        return sorted((self._to_category(i) for i in items), key=lambda c: c.name)

    def find_category(self, category_id: CategoryId) -> Category | None:
        """カテゴリIDで検索する."""
        item = self._get(_pk(CATEGORY, category_id.value), f"find category {category_id}")
        return self._to_category(item) if item is not None else None

    def list_products(self, category_id: CategoryId | None = None) -> list[Product]:
        """商品一覧を名前順で取得する."""
        query_kwargs = {
            "IndexName": "entity_type-index",
            "KeyConditionExpression": Key("entity_type").eq(PRODUCT),
        }
        if category_id is not None:
            query_kwargs["FilterExpression"] = Attr("category_id").eq(category_id.value)
        items = self._query_all("list products", **query_kwargs)
        return sorted((self._to_product(i) for i in items), key=lambda p: p.name)

    def find_product(self, product_id: ProductId) -> Product | None:
        """商品IDで検索する."""
        item = self._get(_pk(PRODUCT, product_id.value), f"find product {product_id}")
        return self._to_product(item) if item is not None else None

    def list_options(self, owner: ProductId | CategoryId) -> list[CustomizationOption]:
        """商品またはカテゴリに属するオプションを名前順で取得する."""
        owner_type = PRODUCT if isinstance(owner, ProductId) else CATEGORY
        items = self._query_all(
            f"list options of {owner}",
            IndexName="owner_key-index",
            KeyConditionExpression=Key("owner_key").eq(_pk(owner_type, owner.value)),
        )
        return sorted((self._to_option(i) for i in items), key=lambda o: o.name)

    def find_option(self, option_id: OptionId) -> CustomizationOption | None:
        """オプションIDで検索する."""
        item = self._get(_pk(OPTION, option_id.value), f"find option {option_id}")
        return self._to_option(item) if item is not None else None

    def save_product(self, product: Product) -> None:
        """商品を登録・更新する."""
        self._put(self._from_product(product), f"save product {product.product_id}")

    def delete_product(self, product_id: ProductId) -> None:
        """商品と商品単位のオプションを削除する."""
        options = self.list_options(product_id)
        try:
            with self._table.batch_writer() as batch:
                for option in options:
                    batch.delete_item(Key={"pk": _pk(OPTION, option.option_id.value)})
                batch.delete_item(Key={"pk": _pk(PRODUCT, product_id.value)})
        except (BotoCoreError, ClientError) as e:
            raise self._error(f"delete product {product_id}", e) from e

    def set_product_stock(self, product_id: ProductId, in_stock: bool) -> None:
        """商品の在庫フラグを更新する."""
        self._update_stock(_pk(PRODUCT, product_id.value), in_stock)

    def save_option(self, option: CustomizationOption) -> None:
        """オプションを登録・更新する."""
        self._put(self._from_option(option), f"save option {option.option_id}")

    def delete_option(self, option_id: OptionId) -> None:
        """オプションを削除する."""
        try:
            self._table.delete_item(Key={"pk": _pk(OPTION, option_id.value)})
        except (BotoCoreError, ClientError) as e:
            raise self._error(f"delete option {option_id}", e) from e

    def set_option_stock(self, option_id: OptionId, in_stock: bool) -> None:
        """オプションの在庫フラグを更新する."""
        self._update_stock(_pk(OPTION, option_id.value), in_stock)

    def _query_all(self, action: str, **query_kwargs) -> list[dict]:
        """ページネーションしながら全件取得する."""
        items: list[dict] = []
        try:
            while True:
                response = self._table.query(**query_kwargs)
                items.extend(response.get("Items", []))
                last_key = response.get("LastEvaluatedKey")
                if not last_key:
                    break
                query_kwargs["ExclusiveStartKey"] = last_key
        except (BotoCoreError, ClientError) as e:
            raise self._error(action, e) from e
        return items

    def _get(self, pk: str, action: str) -> dict | None:
        try:
            response = self._table.get_item(Key={"pk": pk})
        except (BotoCoreError, ClientError) as e:
            raise self._error(action, e) from e
        return response.get("Item")

    def _put(self, item: dict, action: str) -> None:
        try:
            self._table.put_item(Item=item)
        except (BotoCoreError, ClientError) as e:
            raise self._error(action, e) from e

    def _update_stock(self, pk: str, in_stock: bool) -> None:
        try:
            self._table.update_item(
                Key={"pk": pk},
                UpdateExpression="SET in_stock = :in_stock",
                ConditionExpression="attribute_exists(pk)",
                ExpressionAttributeValues={":in_stock": in_stock},
            )
        except (BotoCoreError, ClientError) as e:
            raise self._error(f"update stock of {pk}", e) from e

    @staticmethod
    def _error(action: str, error: Exception) -> RepositoryError:
        logger.error(f"Failed to {action}: {error}")
        return RepositoryError(f"Failed to {action}")

    @staticmethod
    def _to_category(item: dict) -> Category:
        """DynamoDB アイテムから Category を復元する."""
        return Category(
            category_id=CategoryId(item["category_id"]),
            name=item["name"],
            slug=item["slug"],
            rule=CategoryRule(item.get("rule", CategoryRule.PLAIN.value)),
        )

    @staticmethod
    def _from_product(product: Product) -> dict:
        """Product を DynamoDB アイテムに変換する."""
        item: dict = {
            "pk": _pk(PRODUCT, product.product_id.value),
            "entity_type": PRODUCT,
            "product_id": product.product_id.value,
            "name": product.name,
            "description": product.description,
            "price": product.price.value,
            "image_url": product.image_url,
            "in_stock": product.in_stock,
        }
        if product.category_id is not None:
            item["category_id"] = product.category_id.value
        return item

    @staticmethod
    def _to_product(item: dict) -> Product:
        """DynamoDB アイテムから Product を復元する."""
        category_id = item.get("category_id")
        return Product(
            product_id=ProductId(item["product_id"]),
            name=item["name"],
            price=Money.of(item["price"]),
            description=item.get("description", ""),
            image_url=item.get("image_url", ""),
            category_id=CategoryId(category_id) if category_id else None,
            in_stock=bool(item.get("in_stock", True)),
        )

    @staticmethod
    def _from_option(option: CustomizationOption) -> dict:
        """CustomizationOption を DynamoDB アイテムに変換する."""
        item: dict = {
            "pk": _pk(OPTION, option.option_id.value),
            "entity_type": OPTION,
            "option_id": option.option_id.value,
            "name": option.name,
            "kind": option.kind.value,
            "price": option.price.value,
            "in_stock": option.in_stock,
        }
        if option.product_id is not None:
            item["product_id"] = option.product_id.value
            item["owner_key"] = _pk(PRODUCT, option.product_id.value)
        else:
            item["category_id"] = option.category_id.value
            item["owner_key"] = _pk(CATEGORY, option.category_id.value)
        return item

    @staticmethod
    def _to_option(item: dict) -> CustomizationOption:
        """DynamoDB アイテムから CustomizationOption を復元する."""
        product_id = item.get("product_id")
        category_id = item.get("category_id")
        return CustomizationOption(
            option_id=OptionId(item["option_id"]),
            name=item["name"],
            kind=OptionKind(item["kind"]),
            price=Money.of(item.get("price", 0)),
            in_stock=bool(item.get("in_stock", True)),
            product_id=ProductId(product_id) if product_id else None,
            category_id=CategoryId(category_id) if category_id else None,
        )
