"""注文識別子の値オブジェクト."""
from __future__ import annotations

import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class OrderId:
    """注文の一意識別子（UUID形式）."""

    value: str

    def __post_init__(self) -> None:
        """バリデーション."""
        if not self.value:
            raise ValueError("OrderId cannot be empty")

    @classmethod
    def generate(cls) -> OrderId:
        """新しいOrderIdを生成する."""
        return cls(str(uuid.uuid4()))

    def short(self) -> str:
        """画面表示用の注文番号（先頭8文字）."""
        return self.value[:8]

    def __str__(self) -> str:
        """文字列表現."""
        return self.value
