"""検証結果の値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationResult:
    """検証結果."""

    is_valid: bool
    errors: tuple[str, ...]

    @classmethod
    def success(cls) -> ValidationResult:
        """成功結果を生成する."""
        return cls(is_valid=True, errors=())

    @classmethod
    def failure(cls, errors: list[str]) -> ValidationResult:
        """失敗結果を生成する."""
        return cls(is_valid=False, errors=tuple(errors))

    @classmethod
    def from_errors(cls, errors: list[str]) -> ValidationResult:
        """エラーリストから結果を生成する（空なら成功）."""
        if errors:
            return cls.failure(errors)
        return cls.success()
