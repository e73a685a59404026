"""受け取り方法の列挙型."""
from enum import Enum


class DeliveryType(Enum):
    """店頭受け取りか配達か."""

    PICKUP = "pickup"
    DELIVERY = "delivery"

    def requires_address(self) -> bool:
        """住所が必要か判定."""
        return self == DeliveryType.DELIVERY

    def get_display_name(self) -> str:
        """表示名を返す."""
        names = {
            DeliveryType.PICKUP: "Retirada",
            DeliveryType.DELIVERY: "Entrega",
        }
        return names[self]
