"""カスタマイズオプション識別子の値オブジェクト."""
from __future__ import annotations

import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class OptionId:
    """トッピング・フレーバー・フィリング・バリエーションの識別子."""

    value: str

    def __post_init__(self) -> None:
        """バリデーション."""
        if not self.value:
            raise ValueError("OptionId cannot be empty")

    @classmethod
    def generate(cls) -> OptionId:
        """新しいOptionIdを生成する."""
        return cls(str(uuid.uuid4()))

    def __str__(self) -> str:
        """文字列表現."""
        return self.value
