"""カップサイズの値オブジェクト."""
from __future__ import annotations

import re
from dataclasses import dataclass

_SIZE_PATTERN = re.compile(r"(300|500|700)ml")

# サイズごとのトッピング上限
_MAX_TOPPINGS = {300: 3, 500: 4, 700: 5}
DEFAULT_SIZE_ML = 300


@dataclass(frozen=True)
class CupSize:
    """açaíカップの容量（ml）."""

    milliliters: int

    def __post_init__(self) -> None:
        """バリデーション."""
        if self.milliliters not in _MAX_TOPPINGS:
            raise ValueError(f"Unsupported cup size: {self.milliliters}ml")

    @classmethod
    def from_token(cls, text: str) -> CupSize:
        """"500ml" のようなサイズトークンを含む文字列から生成する（なければ300ml）."""
        match = _SIZE_PATTERN.search(text or "")
        if match is None:
            return cls(DEFAULT_SIZE_ML)
        return cls(int(match.group(1)))

    def max_toppings(self) -> int:
        """選択できるトッピングの上限数."""
        return _MAX_TOPPINGS[self.milliliters]

    def __str__(self) -> str:
        """文字列表現."""
        return f"{self.milliliters}ml"
