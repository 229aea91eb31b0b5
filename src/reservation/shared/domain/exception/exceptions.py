from __future__ import annotations

from dataclasses import dataclass


class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


@dataclass(frozen=True)
class FieldError:
    """フィールド単位のバリデーションエラー"""

    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


class ValidationException(DomainException):
    """入力値がバリデーションに失敗した場合

    失敗したフィールドごとに FieldError を1件ずつ保持する。
    """

    def __init__(self, errors: tuple[FieldError, ...] | list[FieldError]) -> None:
        self.errors = tuple(errors)
        super().__init__("; ".join(str(error) for error in self.errors))

    def fields(self) -> list[str]:
        """エラーのあるフィールド名の一覧"""
        return [error.field for error in self.errors]

    def message_for(self, field: str) -> str | None:
        """指定フィールドのエラーメッセージ（なければ None）"""
        for error in self.errors:
            if error.field == field:
                return error.message
        return None


class ResourceNotFoundException(DomainException):
    """リソースが見つからない場合"""

    pass


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合"""

    pass


class InvalidTransitionException(BusinessRuleViolationException):
    """ステータス遷移がライフサイクルに違反した場合"""

    def __init__(self, current: object, target: object) -> None:
        self.current = current
        self.target = target
        super().__init__(f"Cannot transition booking from {current} to {target}")


class PersistenceException(DomainException):
    """永続化ストレージの読み書きに失敗した場合"""

    pass


class DuplicateResourceException(DomainException):
    """リソースの重複エラー（採番した ID が既存の予約と衝突した場合）"""

    pass
