"""カスタマイズセッション（ダイアログの状態機械）."""
from __future__ import annotations

import logging
from datetime import date

from ..entities import CustomizationOption, LineItem
from ..enums import CustomizationStep
from ..identifiers import OptionId
from ..value_objects import Money, Selection, ValidationResult

from .customization_rules import CustomizationContext, CustomizationRule
from .line_item_builder import LineItemBuilder

logger = logging.getLogger(__name__)


class SessionFinishedError(Exception):
    """確定・キャンセル済みのセッションを操作した場合のエラー."""

    pass


class CustomizationSession:
    """商品1つ分のカスタマイズ操作を管理する.

    ステップはルールが定める順に進み、確定（CONFIRMED）かキャンセル（CANCELLED）で終了する。
    キャンセル時は選択内容を破棄し、カートには何も反映しない。
    """

    def __init__(
        self,
        context: CustomizationContext,
        rule: CustomizationRule,
        today: date | None = None,
    ) -> None:
        """初期化."""
        self._context = context
        self._rule = rule
        self._today = today or date.today()
        self._selection = Selection.empty()
        self._step_index = 0
        self._finished_as: CustomizationStep | None = None

    @property
    def context(self) -> CustomizationContext:
        """カスタマイズ対象."""
        return self._context

    @property
    def rule(self) -> CustomizationRule:
        """適用ルール."""
        return self._rule

    @property
    def selection(self) -> Selection:
        """現在の選択内容."""
        return self._selection

    @property
    def step(self) -> CustomizationStep:
        """現在のステップ."""
        if self._finished_as is not None:
            return self._finished_as
        return self._rule.get_steps()[self._step_index]

    def is_finished(self) -> bool:
        """終了済みか判定."""
        return self._finished_as is not None

    def is_first_step(self) -> bool:
        """最初のステップか判定."""
        return self._step_index == 0

    def is_last_step(self) -> bool:
        """最後のステップか判定."""
        return self._step_index == len(self._rule.get_steps()) - 1

    def get_visible_options(self) -> list[CustomizationOption]:
        """現在のステップで表示するオプション."""
        if self.is_finished():
            return []
        return self._rule.selectable_options(self._context, self.step)

    def is_option_enabled(self, option_id: OptionId) -> bool:
        """オプションが選択可能か判定（在庫切れ・上限到達は不可）."""
        if self.is_finished():
            return False
        return self._rule.is_option_enabled(
            self._context, self._selection, self.step, option_id
        )

    def toggle(self, option_id: OptionId) -> bool:
        """現在のステップでオプションをトグルする.

        選択内容が変わった場合にTrueを返す。上限到達・在庫切れは何もしない。
        """
        self._ensure_active()
        updated = self._rule.toggle(self._context, self._selection, self.step, option_id)
        if updated == self._selection:
            return False
        self._selection = updated
        return True

    def set_delivery_date(self, delivery_date: date | None) -> None:
        """受け取り日を設定する."""
        self._ensure_active()
        self._selection = self._selection.with_delivery_date(delivery_date)

    def set_customer(self, name: str | None, phone: str | None) -> None:
        """注文者の氏名・電話番号を設定する."""
        self._ensure_active()
        self._selection = self._selection.with_customer(name, phone)

    def validate_step(self) -> ValidationResult:
        """現在のステップを検証する."""
        self._ensure_active()
        return self._rule.validate_step(
            self._context, self._selection, self.step, self._today
        )

    def validate(self) -> ValidationResult:
        """選択内容全体を検証する."""
        return self._rule.validate(self._context, self._selection, self._today)

    def next(self) -> ValidationResult:
        """現在のステップが有効なら次のステップに進む."""
        result = self.validate_step()
        if result.is_valid and not self.is_last_step():
            self._step_index += 1
        return result

    def back(self) -> bool:
        """前のステップに戻る（選択内容は保持する）."""
        self._ensure_active()
        if self.is_first_step():
            return False
        self._step_index -= 1
        return True

    def get_unit_price(self) -> Money:
        """現在の選択での単価（プレビュー用）."""
        return self._rule.resolve_price(self._context, self._selection)

    def get_label(self) -> str:
        """現在の選択での表示名（プレビュー用）."""
        return self._rule.label(self._context, self._selection)

    def confirm(self, quantity: int = 1) -> LineItem:
        """選択内容を確定してカート明細を返す."""
        self._ensure_active()
        result = self.validate()
        if not result.is_valid:
            raise ValueError(f"Selection is not valid: {', '.join(result.errors)}")

        item = LineItemBuilder.build(self._context, self._rule, self._selection, quantity)
        self._finished_as = CustomizationStep.CONFIRMED
        logger.info(f"Customization confirmed: {item.name}")
        return item

    def cancel(self) -> None:
        """セッションを破棄する."""
        if self.is_finished():
            return
        self._selection = Selection.empty()
        self._finished_as = CustomizationStep.CANCELLED

    def _ensure_active(self) -> None:
        if self._finished_as is not None:
            raise SessionFinishedError(
                f"Customization session is already {self._finished_as.value}"
            )
