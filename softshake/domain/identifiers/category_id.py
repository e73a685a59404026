"""カテゴリ識別子の値オブジェクト."""
from __future__ import annotations

import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class CategoryId:
    """商品カテゴリの識別子."""

    value: str

    def __post_init__(self) -> None:
        """バリデーション."""
        if not self.value:
            raise ValueError("CategoryId cannot be empty")

    @classmethod
    def generate(cls) -> CategoryId:
        """新しいCategoryIdを生成する."""
        return cls(str(uuid.uuid4()))

    def __str__(self) -> str:
        """文字列表現."""
        return self.value
