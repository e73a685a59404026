"""売上レポートリポジトリのインメモリ実装."""
from softshake.domain.entities import SalesReport
from softshake.domain.ports import SalesReportRepository


class InMemorySalesReportRepository(SalesReportRepository):
    """売上レポートリポジトリのインメモリ実装."""

    def __init__(self) -> None:
        """初期化."""
        self._reports: dict[str, SalesReport] = {}

    def find_by_period(self, year: int, month: int) -> SalesReport | None:
        """年月で検索する."""
        return self._reports.get(f"{year:04d}-{month:02d}")

    def save(self, report: SalesReport) -> None:
        """レポートを登録・更新する."""
        self._reports[report.get_period_key()] = report
