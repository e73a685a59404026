"""商品エンティティ."""
from __future__ import annotations

from dataclasses import dataclass, replace

from ..identifiers import CategoryId, ProductId
from ..value_objects import CupSize, Money


@dataclass(frozen=True)
class Product:
    """カタログ上の商品（カートセッション中は不変）."""

    product_id: ProductId
    name: str
    price: Money
    description: str = ""
    image_url: str = ""
    category_id: CategoryId | None = None
    in_stock: bool = True

    def __post_init__(self) -> None:
        """バリデーション."""
        if not self.name or not self.name.strip():
            raise ValueError("Product name cannot be empty")

    @classmethod
    def create(
        cls,
        name: str,
        price: Money,
        description: str = "",
        image_url: str = "",
        category_id: CategoryId | None = None,
        in_stock: bool = True,
    ) -> Product:
        """新しい商品を作成する."""
        return cls(
            product_id=ProductId.generate(),
            name=name,
            price=price,
            description=description,
            image_url=image_url,
            category_id=category_id,
            in_stock=in_stock,
        )

    def with_stock(self, in_stock: bool) -> Product:
        """在庫フラグを変更した商品を返す."""
        return replace(self, in_stock=in_stock)

    def get_cup_size(self) -> CupSize:
        """商品名のサイズトークンからカップサイズを取得."""
        return CupSize.from_token(self.name)
