"""カスタマイズダイアログのステップの列挙型."""
from enum import Enum


class CustomizationStep(Enum):
    """カスタマイズセッションの状態."""

    CHOOSING_OPTIONS = "choosing_options"  # フレーバー等の選択
    CHOOSING_TOPPINGS = "choosing_toppings"  # トッピング選択
    CHOOSING_FLAVOR = "choosing_flavor"  # フレーバー1つを選択
    CHOOSING_FLAVORS = "choosing_flavors"  # 複数フレーバーを選択
    CHOOSING_FILLINGS = "choosing_fillings"  # フィリング選択（任意）
    CHOOSING_FILLING = "choosing_filling"  # フィリング1つを選択
    CHOOSING_VARIATION = "choosing_variation"  # バリエーション選択
    ENTERING_DETAILS = "entering_details"  # 氏名・電話・受け取り日
    CHOOSING_DATE = "choosing_date"  # 受け取り日
    CONFIRMED = "confirmed"  # 確定済み
    CANCELLED = "cancelled"  # キャンセル済み

    def is_finished(self) -> bool:
        """終了状態か判定."""
        return self in (CustomizationStep.CONFIRMED, CustomizationStep.CANCELLED)
