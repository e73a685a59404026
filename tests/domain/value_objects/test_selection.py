"""Selectionのテスト."""
from datetime import date

from softshake.domain.identifiers import OptionId
from softshake.domain.value_objects import Selection


class TestSelection:
    """Selectionの単体テスト."""

    def test_emptyで空の選択を生成(self) -> None:
        """emptyで何も選択されていない状態になることを確認."""
        selection = Selection.empty()
        assert selection.option_ids == ()
        assert selection.filling_ids == ()
        assert selection.variation_id is None
        assert selection.delivery_date is None

    def test_toggle_optionで選択順に追加される(self) -> None:
        """toggle_optionで選択した順に追加されることを確認."""
        selection = Selection.empty().toggle_option(OptionId("b")).toggle_option(OptionId("a"))
        assert selection.option_ids == (OptionId("b"), OptionId("a"))

    def test_選択済みをトグルすると外れる(self) -> None:
        """選択済みのオプションをトグルすると外れることを確認."""
        selection = Selection.empty().toggle_option(OptionId("a")).toggle_option(OptionId("a"))
        assert selection.option_ids == ()

    def test_上限到達時の追加は無視される(self) -> None:
        """上限に達している場合は追加されないことを確認."""
        selection = Selection.empty().toggle_option(OptionId("a"), 1)
        selection = selection.toggle_option(OptionId("b"), 1)
        assert selection.option_ids == (OptionId("a"),)

    def test_上限到達時でも選択済みは外せる(self) -> None:
        """上限に達していても選択済みのオプションは外せることを確認."""
        selection = Selection.empty().toggle_option(OptionId("a"), 1)
        selection = selection.toggle_option(OptionId("a"), 1)
        assert selection.option_ids == ()

    def test_choose_optionは置き換える(self) -> None:
        """choose_optionで主選択が1つに置き換わることを確認."""
        selection = Selection.empty().choose_option(OptionId("a")).choose_option(OptionId("b"))
        assert selection.option_ids == (OptionId("b"),)

    def test_フィリングは主選択と別に保持される(self) -> None:
        """toggle_fillingがoption_idsに影響しないことを確認."""
        selection = Selection.empty().toggle_option(OptionId("a")).toggle_filling(OptionId("f"))
        assert selection.option_ids == (OptionId("a"),)
        assert selection.filling_ids == (OptionId("f"),)

    def test_受け取り日と注文者を設定できる(self) -> None:
        """with_delivery_dateとwith_customerで値が設定されることを確認."""
        selection = (
            Selection.empty()
            .with_delivery_date(date(2026, 10, 21))
            .with_customer("Maria", "11999990000")
        )
        assert selection.delivery_date == date(2026, 10, 21)
        assert selection.customer_name == "Maria"
        assert selection.customer_phone == "11999990000"

    def test_元の選択は変更されない(self) -> None:
        """操作は新しいSelectionを返し、元の選択は変わらないことを確認."""
        original = Selection.empty()
        original.toggle_option(OptionId("a"))
        assert original.option_ids == ()

    def test_is_selectedで選択状態を判定(self) -> None:
        """is_selectedが主選択・フィリング・バリエーションを判定することを確認."""
        selection = (
            Selection.empty()
            .toggle_option(OptionId("a"))
            .toggle_filling(OptionId("f"))
            .with_variation(OptionId("v"))
        )
        assert selection.is_selected(OptionId("a"))
        assert selection.is_selected(OptionId("f"))
        assert selection.is_selected(OptionId("v"))
        assert not selection.is_selected(OptionId("x"))
