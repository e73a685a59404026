"""注文ステータスの列挙型."""
from __future__ import annotations

from enum import Enum


class OrderStatus(Enum):
    """注文の進行状態（前進のみ）."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    PREPARING = "preparing"
    DELIVERING = "delivering"
    COMPLETED = "completed"

    def next(self) -> OrderStatus:
        """次のステータスを返す（COMPLETEDは自身を返す）."""
        successors = {
            OrderStatus.PENDING: OrderStatus.ACCEPTED,
            OrderStatus.ACCEPTED: OrderStatus.PREPARING,
            OrderStatus.PREPARING: OrderStatus.DELIVERING,
            OrderStatus.DELIVERING: OrderStatus.COMPLETED,
            OrderStatus.COMPLETED: OrderStatus.COMPLETED,
        }
        return successors[self]

    def is_terminal(self) -> bool:
        """終端ステータスか判定."""
        return self == OrderStatus.COMPLETED

    def get_display_name(self) -> str:
        """表示名を返す."""
        names = {
            OrderStatus.PENDING: "Pendente",
            OrderStatus.ACCEPTED: "Aceito",
            OrderStatus.PREPARING: "Preparando",
            OrderStatus.DELIVERING: "Entregando",
            OrderStatus.COMPLETED: "Concluído",
        }
        return names[self]
