"""商品カテゴリエンティティ."""
from __future__ import annotations

from dataclasses import dataclass

from ..enums import CategoryRule
from ..identifiers import CategoryId


@dataclass(frozen=True)
class Category:
    """商品カテゴリ（カスタマイズルールを1つ持つ）."""

    category_id: CategoryId
    name: str
    slug: str
    rule: CategoryRule = CategoryRule.PLAIN

    def __post_init__(self) -> None:
        """バリデーション."""
        if not self.name:
            raise ValueError("Category name cannot be empty")
        if not self.slug:
            raise ValueError("Category slug cannot be empty")
