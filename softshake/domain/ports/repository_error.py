"""リポジトリ層の例外."""


class RepositoryError(Exception):
    """外部バックエンドへの読み書きに失敗したエラー."""

    pass
