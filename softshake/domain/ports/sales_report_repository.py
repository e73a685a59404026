"""売上レポートリポジトリインターフェース."""
from abc import ABC, abstractmethod

from ..entities import SalesReport


class SalesReportRepository(ABC):
    """売上レポートリポジトリのインターフェース."""

    @abstractmethod
    def find_by_period(self, year: int, month: int) -> SalesReport | None:
        """年月で検索する."""
        pass

    @abstractmethod
    def save(self, report: SalesReport) -> None:
        """レポートを登録・更新する（同一年月は上書き）."""
        pass
