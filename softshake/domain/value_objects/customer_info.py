"""注文者情報の値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass

from ..enums import DeliveryType


@dataclass(frozen=True)
class CustomerInfo:
    """チェックアウトフォームの入力内容."""

    name: str
    phone: str
    delivery_type: DeliveryType = DeliveryType.PICKUP
    address: str | None = None

    def __post_init__(self) -> None:
        """バリデーション."""
        if not self.name or not self.name.strip():
            raise ValueError("Customer name cannot be empty")
        if not self.phone or not self.phone.strip():
            raise ValueError("Customer phone cannot be empty")
        if self.delivery_type.requires_address():
            if not self.address or not self.address.strip():
                raise ValueError("Delivery address is required for delivery orders")
        elif self.address is not None and not self.address.strip():
            object.__setattr__(self, "address", None)

    def is_delivery(self) -> bool:
        """配達注文か判定."""
        return self.delivery_type == DeliveryType.DELIVERY
