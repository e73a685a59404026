"""カタログリポジトリのインメモリ実装."""
from softshake.domain.entities import Category, CustomizationOption, Product
from softshake.domain.identifiers import CategoryId, OptionId, ProductId
from softshake.domain.ports import CatalogRepository


class InMemoryCatalogRepository(CatalogRepository):
    """カタログリポジトリのインメモリ実装."""

    def __init__(self) -> None:
        """初期化."""
        self._categories: dict[str, Category] = {}
        self._products: dict[str, Product] = {}
        self._options: dict[str, CustomizationOption] = {}

    def add_category(self, category: Category) -> None:
        """カテゴリを登録する（初期データ投入用）."""
        self._categories[category.category_id.value] = category

    def list_categories(self) -> list[Category]:
        """カテゴリ一覧を名前順で取得する."""
        return sorted(self._categories.values(), key=lambda c: c.name)

    def find_category(self, category_id: CategoryId) -> Category | None:
        """カテゴリIDで検索する."""
        return self._categories.get(category_id.value)

    def list_products(self, category_id: CategoryId | None = None) -> list[Product]:
        """商品一覧を名前順で取得する."""
        products = [
            p for p in self._products.values()
            if category_id is None or p.category_id == category_id
        ]
        return sorted(products, key=lambda p: p.name)

    def find_product(self, product_id: ProductId) -> Product | None:
        """商品IDで検索する."""
        return self._products.get(product_id.value)

    def list_options(self, owner: ProductId | CategoryId) -> list[CustomizationOption]:
        """商品またはカテゴリに属するオプションを名前順で取得する."""
        if isinstance(owner, ProductId):
            options = [o for o in self._options.values() if o.product_id == owner]
        else:
            options = [o for o in self._options.values() if o.category_id == owner]
        return sorted(options, key=lambda o: o.name)

    def save_product(self, product: Product) -> None:
        """商品を登録・更新する."""
        self._products[product.product_id.value] = product

    def delete_product(self, product_id: ProductId) -> None:
        """商品と商品単位のオプションを削除する."""
        self._products.pop(product_id.value, None)
        self._options = {
            key: o for key, o in self._options.items() if o.product_id != product_id
        }

    def set_product_stock(self, product_id: ProductId, in_stock: bool) -> None:
        """商品の在庫フラグを更新する."""
        product = self._products.get(product_id.value)
        if product is not None:
            self._products[product_id.value] = product.with_stock(in_stock)

    def save_option(self, option: CustomizationOption) -> None:
        """オプションを登録・更新する."""
        self._options[option.option_id.value] = option

    def delete_option(self, option_id: OptionId) -> None:
        """オプションを削除する."""
        self._options.pop(option_id.value, None)

    def set_option_stock(self, option_id: OptionId, in_stock: bool) -> None:
        """オプションの在庫フラグを更新する."""
        option = self._options.get(option_id.value)
        if option is not None:
            self._options[option_id.value] = option.with_stock(in_stock)

    def find_option(self, option_id: OptionId) -> CustomizationOption | None:
        """オプションIDで検索する."""
        return self._options.get(option_id.value)
