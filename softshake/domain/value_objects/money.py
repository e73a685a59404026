"""金額を表現する値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

_CENT = Decimal("0.01")


@dataclass(frozen=True)
class Money:
    """金額（レアル、小数2桁の固定小数点）を表現する値オブジェクト."""

    value: Decimal

    def __post_init__(self) -> None:
        """バリデーション."""
        if isinstance(self.value, float):
            raise TypeError("Money value must not be a float; use str or Decimal")
        try:
            normalized = Decimal(self.value).quantize(_CENT, rounding=ROUND_HALF_UP)
        except (InvalidOperation, TypeError, ValueError) as e:
            raise ValueError(f"Invalid money value: {self.value!r}") from e
        if not normalized.is_finite():
            raise ValueError("Money value must be finite")
        if normalized < 0:
            raise ValueError("Money value cannot be negative")
        object.__setattr__(self, "value", normalized)

    @classmethod
    def of(cls, value: Decimal | int | str) -> Money:
        """指定金額でMoneyを生成する."""
        return cls(value)

    @classmethod
    def zero(cls) -> Money:
        """ゼロを生成する."""
        return cls(Decimal("0"))

    def add(self, other: Money) -> Money:
        """金額を加算して新しいMoneyを返す."""
        return Money(self.value + other.value)

    def subtract(self, other: Money) -> Money:
        """金額を減算して新しいMoneyを返す."""
        result = self.value - other.value
        if result < 0:
            raise ValueError("Subtraction would result in negative value")
        return Money(result)

    def multiply(self, factor: int) -> Money:
        """金額を整数倍して新しいMoneyを返す."""
        if factor < 0:
            raise ValueError("Factor cannot be negative")
        return Money(self.value * factor)

    def divide(self, divisor: int) -> Money:
        """金額を整数で割って新しいMoneyを返す（0除算は0）."""
        if divisor < 0:
            raise ValueError("Divisor cannot be negative")
        if divisor == 0:
            return Money.zero()
        return Money(self.value / divisor)

    def is_zero(self) -> bool:
        """ゼロか判定."""
        return self.value == 0

    def is_greater_than(self, other: Money) -> bool:
        """この金額が他の金額より大きいか判定."""
        return self.value > other.value

    @staticmethod
    def sum_of(amounts: list[Money]) -> Money:
        """金額リストの合計を返す."""
        total = Money.zero()
        for amount in amounts:
            total = total.add(amount)
        return total

    def format(self) -> str:
        """表示用フォーマット（例: "R$ 1.234,50"）."""
        text = f"{self.value:,.2f}"
        return "R$ " + text.replace(",", "_").replace(".", ",").replace("_", ".")

    def __str__(self) -> str:
        """文字列表現."""
        return self.format()
