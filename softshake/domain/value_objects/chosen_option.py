"""選択済みオプションのスナップショット."""
from __future__ import annotations

from dataclasses import dataclass

from ..identifiers import OptionId
from .money import Money


@dataclass(frozen=True)
class ChosenOption:
    """明細に保持する選択済みトッピング（価格の再計算用）."""

    option_id: OptionId
    name: str
    price: Money

    def to_dict(self) -> dict:
        """辞書に変換する."""
        return {
            "id": self.option_id.value,
            "name": self.name,
            "price": str(self.price.value),
        }
