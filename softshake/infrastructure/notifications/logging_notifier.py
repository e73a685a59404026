"""ログ出力による店舗通知の実装."""
import logging

from softshake.domain.ports import ShopNotifier

logger = logging.getLogger(__name__)


class LoggingShopNotifier(ShopNotifier):
    """通知内容をログに出力し、直近のメッセージを保持する."""

    def __init__(self) -> None:
        """初期化."""
        self._messages: list[str] = []

    @property
    def messages(self) -> list[str]:
        """送信済みメッセージ."""
        return list(self._messages)

    def notify_new_order(self) -> None:
        """新しい注文の受信を通知する."""
        self._send("Novo pedido recebido!")

    def notify_order_sent(self, order_number: str) -> None:
        """注文の完了を通知する."""
        self._send(f"Pedido #{order_number} enviado!")

    def notify_stock_update(self, name: str, in_stock: bool) -> None:
        """在庫状態の変更を通知する."""
        state = "disponível" if in_stock else "indisponível"
        self._send(f"{name} agora está {state}")

    def _send(self, message: str) -> None:
        self._messages.append(message)
        logger.info(message)
