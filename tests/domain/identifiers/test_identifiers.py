"""識別子のテスト."""
import pytest

from softshake.domain.identifiers import CategoryId, OptionId, OrderId, ProductId


class TestProductId:
    """ProductIdの単体テスト."""

    def test_文字列で生成できる(self) -> None:
        """文字列を指定してProductIdを生成できることを確認."""
        assert ProductId("p1").value == "p1"

    def test_空文字はエラー(self) -> None:
        """空文字を指定するとValueErrorが発生することを確認."""
        with pytest.raises(ValueError, match="cannot be empty"):
            ProductId("")

    def test_generateで一意なIDを生成(self) -> None:
        """generateで毎回異なるIDが生成されることを確認."""
        assert ProductId.generate() != ProductId.generate()

    def test_同じ値なら等価(self) -> None:
        """同じ値のProductIdが等価であることを確認."""
        assert ProductId("p1") == ProductId("p1")
        assert hash(ProductId("p1")) == hash(ProductId("p1"))


class TestOptionId:
    """OptionIdの単体テスト."""

    def test_空文字はエラー(self) -> None:
        """空文字を指定するとValueErrorが発生することを確認."""
        with pytest.raises(ValueError, match="cannot be empty"):
            OptionId("")

    def test_文字列表現(self) -> None:
        """str()で値が返ることを確認."""
        assert str(OptionId("granola")) == "granola"


class TestCategoryId:
    """CategoryIdの単体テスト."""

    def test_空文字はエラー(self) -> None:
        """空文字を指定するとValueErrorが発生することを確認."""
        with pytest.raises(ValueError, match="cannot be empty"):
            CategoryId("")


class TestOrderId:
    """OrderIdの単体テスト."""

    def test_shortは先頭8文字(self) -> None:
        """shortで先頭8文字の注文番号が返ることを確認."""
        order_id = OrderId("1234abcd-5678-90ef-aaaa-bbbbccccdddd")
        assert order_id.short() == "1234abcd"

    def test_generateはUUID形式(self) -> None:
        """generateでUUID形式（36文字）のIDが生成されることを確認."""
        assert len(OrderId.generate().value) == 36
