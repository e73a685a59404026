"""CustomizationSessionのテスト."""
from datetime import date, timedelta

import pytest

from softshake.domain.entities import CustomizationOption, Product
from softshake.domain.enums import CategoryRule, CustomizationStep, OptionKind
from softshake.domain.identifiers import OptionId, ProductId
from softshake.domain.services import (
    CustomizationContext,
    CustomizationRuleSet,
    CustomizationSession,
    SessionFinishedError,
)
from softshake.domain.value_objects import Money

TODAY = date(2026, 10, 18)


def _option(option_id: str, name: str, kind: OptionKind, price: str = "0") -> CustomizationOption:
    return CustomizationOption(
        option_id=OptionId(option_id),
        name=name,
        kind=kind,
        price=Money.of(price),
        product_id=ProductId("p1"),
    )


def _cake_session() -> CustomizationSession:
    context = CustomizationContext(
        product=Product(product_id=ProductId("p1"), name="Bolo", price=Money.of("80.00")),
        rule=CategoryRule.CAKE_FLAVOR_FILLING,
        options=(
            _option("choc", "Chocolate", OptionKind.FLAVOR),
            _option("brig", "Brigadeiro", OptionKind.FILLING),
        ),
    )
    rule = CustomizationRuleSet().for_tag(CategoryRule.CAKE_FLAVOR_FILLING)
    return CustomizationSession(context, rule, TODAY)


def _acai_session() -> CustomizationSession:
    context = CustomizationContext(
        product=Product(product_id=ProductId("acai"), name="Açaí 300ml", price=Money.of("10.00")),
        rule=CategoryRule.TOPPING_LIMITED,
        options=tuple(
            _option(f"t{i}", f"Topping {i}", OptionKind.TOPPING, "1.00") for i in range(4)
        ),
    )
    rule = CustomizationRuleSet().for_tag(CategoryRule.TOPPING_LIMITED)
    return CustomizationSession(context, rule, TODAY)


class TestCustomizationSession:
    """CustomizationSessionの単体テスト."""

    def test_最初のステップから始まる(self) -> None:
        """開始時はルールの最初のステップにいることを確認."""
        session = _cake_session()
        assert session.step == CustomizationStep.CHOOSING_FLAVOR
        assert session.is_first_step()
        assert not session.is_finished()

    def test_無効なステップでは次に進めない(self) -> None:
        """フレーバー未選択ではnextしても進まないことを確認."""
        session = _cake_session()
        result = session.next()
        assert not result.is_valid
        assert session.step == CustomizationStep.CHOOSING_FLAVOR

    def test_ケーキの全ステップを進めて確定できる(self) -> None:
        """フレーバー→フィリング→詳細入力と進めて明細を確定できることを確認."""
        session = _cake_session()
        assert session.toggle(OptionId("choc"))
        assert session.next().is_valid
        assert session.step == CustomizationStep.CHOOSING_FILLINGS
        session.toggle(OptionId("brig"))
        assert session.next().is_valid
        assert session.step == CustomizationStep.ENTERING_DETAILS
        assert session.is_last_step()

        session.set_customer("Maria", "11999990000")
        session.set_delivery_date(TODAY + timedelta(days=4))
        item = session.confirm()

        assert session.step == CustomizationStep.CONFIRMED
        assert item.name == "Bolo - Chocolate - Recheio: Brigadeiro"
        assert item.delivery_date == date(2026, 10, 22)
        assert item.customer_name == "Maria"
        assert item.quantity == 1

    def test_最後のステップでnextしても留まる(self) -> None:
        """最後のステップでは有効でもステップが変わらないことを確認."""
        session = _acai_session()
        assert session.is_last_step()
        assert session.next().is_valid
        assert session.step == CustomizationStep.CHOOSING_TOPPINGS

    def test_戻っても選択内容は保持される(self) -> None:
        """backで前のステップに戻っても選択が残ることを確認."""
        session = _cake_session()
        session.toggle(OptionId("choc"))
        session.next()
        assert session.back()
        assert session.step == CustomizationStep.CHOOSING_FLAVOR
        assert session.selection.option_ids == (OptionId("choc"),)
        assert not session.back()

    def test_上限到達時のトグルはFalse(self) -> None:
        """上限に達した状態で追加しようとするとFalseが返ることを確認."""
        session = _acai_session()
        for i in range(3):
            assert session.toggle(OptionId(f"t{i}"))
        assert not session.toggle(OptionId("t3"))
        assert not session.is_option_enabled(OptionId("t3"))
        assert len(session.selection.option_ids) == 3

    def test_表示中のオプション(self) -> None:
        """現在のステップで表示するオプションが返ることを確認."""
        session = _cake_session()
        assert [o.name for o in session.get_visible_options()] == ["Chocolate"]
        session.toggle(OptionId("choc"))
        session.next()
        assert [o.name for o in session.get_visible_options()] == ["Brigadeiro"]

    def test_単価と表示名のプレビュー(self) -> None:
        """選択途中の単価と表示名を取得できることを確認."""
        session = _acai_session()
        session.toggle(OptionId("t0"))
        session.toggle(OptionId("t1"))
        assert session.get_unit_price() == Money.of("12.00")
        assert session.get_label() == "Açaí 300ml"

    def test_無効な選択で確定するとエラー(self) -> None:
        """ルールを満たさない状態でconfirmするとValueErrorが発生することを確認."""
        session = _cake_session()
        with pytest.raises(ValueError, match="Selection is not valid"):
            session.confirm()
        assert not session.is_finished()

    def test_キャンセルすると選択は破棄される(self) -> None:
        """cancelでCANCELLEDになり、選択内容が空になることを確認."""
        session = _acai_session()
        session.toggle(OptionId("t0"))
        session.cancel()
        assert session.step == CustomizationStep.CANCELLED
        assert session.selection.option_ids == ()
        assert session.get_visible_options() == []

    def test_終了後の操作はエラー(self) -> None:
        """確定・キャンセル後の操作でSessionFinishedErrorが発生することを確認."""
        session = _acai_session()
        session.cancel()
        with pytest.raises(SessionFinishedError, match="cancelled"):
            session.toggle(OptionId("t0"))
        with pytest.raises(SessionFinishedError):
            session.confirm()
        assert not session.is_option_enabled(OptionId("t0"))

    def test_キャンセルは2回呼んでも良い(self) -> None:
        """終了済みのセッションのcancelは何もしないことを確認."""
        session = _acai_session()
        session.confirm()
        session.cancel()
        assert session.step == CustomizationStep.CONFIRMED
