"""カート追加ユースケース."""
import logging
from dataclasses import dataclass

from softshake.domain.entities import Cart, LineItem
from softshake.domain.services import CustomizationSession
from softshake.domain.value_objects import Money

logger = logging.getLogger(__name__)


class InvalidSelectionError(Exception):
    """カスタマイズ内容がルールを満たさないエラー."""

    def __init__(self, errors: tuple[str, ...]) -> None:
        self.errors = errors
        super().__init__(f"Invalid selection: {', '.join(errors)}")


@dataclass(frozen=True)
class AddToCartResult:
    """カート追加結果."""

    line_item: LineItem
    item_count: int
    subtotal: Money


class AddToCartUseCase:
    """カスタマイズを確定してカートに追加するユースケース."""

    def __init__(self, cart: Cart) -> None:
        """初期化."""
        self._cart = cart

    def execute(self, session: CustomizationSession) -> AddToCartResult:
        """カスタマイズを確定してカートに追加する.

        Raises:
            InvalidSelectionError: 選択内容がルールを満たさない場合
        """
        result = session.validate()
        if not result.is_valid:
            raise InvalidSelectionError(result.errors)

        line_item = self._cart.add_item(session.confirm())
        logger.info(f"Added to cart: {line_item.name} x{line_item.quantity}")

        return AddToCartResult(
            line_item=line_item,
            item_count=self._cart.get_item_count(),
            subtotal=self._cart.get_subtotal(),
        )
