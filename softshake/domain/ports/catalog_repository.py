"""カタログリポジトリインターフェース."""
from abc import ABC, abstractmethod

from ..entities import Category, CustomizationOption, Product
from ..identifiers import CategoryId, OptionId, ProductId


class CatalogRepository(ABC):
    """カテゴリ・商品・カスタマイズオプションのリポジトリ.

    読み出しは呼び出し時点の在庫フラグを返すこと。
    失敗時は RepositoryError を送出する。
    """

    @abstractmethod
    def list_categories(self) -> list[Category]:
        """カテゴリ一覧を名前順で取得する."""
        pass

    @abstractmethod
    def find_category(self, category_id: CategoryId) -> Category | None:
        """カテゴリIDで検索する."""
        pass

    @abstractmethod
    def list_products(self, category_id: CategoryId | None = None) -> list[Product]:
        """商品一覧を名前順で取得する（カテゴリ指定で絞り込み）."""
        pass

    @abstractmethod
    def find_product(self, product_id: ProductId) -> Product | None:
        """商品IDで検索する."""
        pass

    @abstractmethod
    def list_options(self, owner: ProductId | CategoryId) -> list[CustomizationOption]:
        """商品またはカテゴリに属するオプションを名前順で取得する."""
        pass

    @abstractmethod
    def find_option(self, option_id: OptionId) -> CustomizationOption | None:
        """オプションIDで検索する."""
        pass

    @abstractmethod
    def save_product(self, product: Product) -> None:
        """商品を登録・更新する."""
        pass

    @abstractmethod
    def delete_product(self, product_id: ProductId) -> None:
        """商品を削除する."""
        pass

    @abstractmethod
    def set_product_stock(self, product_id: ProductId, in_stock: bool) -> None:
        """商品の在庫フラグを更新する."""
        pass

    @abstractmethod
    def save_option(self, option: CustomizationOption) -> None:
        """オプションを登録・更新する."""
        pass

    @abstractmethod
    def delete_option(self, option_id: OptionId) -> None:
        """オプションを削除する."""
        pass

    @abstractmethod
    def set_option_stock(self, option_id: OptionId, in_stock: bool) -> None:
        """オプションの在庫フラグを更新する."""
        pass
