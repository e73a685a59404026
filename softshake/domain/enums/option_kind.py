"""カスタマイズオプション種別の列挙型."""
from enum import Enum


class OptionKind(Enum):
    """オプションの種別."""

    TOPPING = "topping"  # 追加トッピング（有料）
    FLAVOR = "flavor"  # フレーバー
    FILLING = "filling"  # フィリング
    VARIATION = "variation"  # サイズ・容量などのバリエーション
