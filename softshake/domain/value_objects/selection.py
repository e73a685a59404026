"""カスタマイズ選択状態の値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date

from ..identifiers import OptionId


def _toggle(
    current: tuple[OptionId, ...], option_id: OptionId, limit: int | None
) -> tuple[OptionId, ...]:
    """選択済みなら外し、未選択なら上限内で追加する."""
    if option_id in current:
        return tuple(o for o in current if o != option_id)
    if limit is not None and len(current) >= limit:
        return current
    return current + (option_id,)


@dataclass(frozen=True)
class Selection:
    """ダイアログ表示中のユーザーの選択内容.

    option_ids はトッピング・フレーバーなどの主選択（選択順）、
    filling_ids はフィリングの選択を保持する。
    """

    option_ids: tuple[OptionId, ...] = ()
    filling_ids: tuple[OptionId, ...] = ()
    variation_id: OptionId | None = None
    delivery_date: date | None = None
    customer_name: str | None = None
    customer_phone: str | None = None

    @classmethod
    def empty(cls) -> Selection:
        """空の選択を生成する."""
        return cls()

    def toggle_option(self, option_id: OptionId, limit: int | None = None) -> Selection:
        """主選択をトグルする（上限到達時の追加は無視）."""
        return replace(self, option_ids=_toggle(self.option_ids, option_id, limit))

    def choose_option(self, option_id: OptionId) -> Selection:
        """主選択を1つだけに置き換える."""
        return replace(self, option_ids=(option_id,))

    def toggle_filling(self, option_id: OptionId, limit: int | None = None) -> Selection:
        """フィリングをトグルする（上限到達時の追加は無視）."""
        return replace(self, filling_ids=_toggle(self.filling_ids, option_id, limit))

    def choose_filling(self, option_id: OptionId) -> Selection:
        """フィリングを1つだけに置き換える."""
        return replace(self, filling_ids=(option_id,))

    def with_variation(self, option_id: OptionId) -> Selection:
        """バリエーションを設定する."""
        return replace(self, variation_id=option_id)

    def with_delivery_date(self, delivery_date: date | None) -> Selection:
        """受け取り日を設定する."""
        return replace(self, delivery_date=delivery_date)

    def with_customer(self, name: str | None, phone: str | None) -> Selection:
        """注文者の氏名・電話番号を設定する."""
        return replace(self, customer_name=name, customer_phone=phone)

    def is_selected(self, option_id: OptionId) -> bool:
        """指定オプションが選択済みか判定."""
        return (
            option_id in self.option_ids
            or option_id in self.filling_ids
            or option_id == self.variation_id
        )
