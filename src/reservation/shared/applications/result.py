from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from reservation.shared.domain.exception import DomainException

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """ユースケースの実行結果

    想定内の失敗（バリデーション、未検出、不正な遷移、永続化失敗）は
    例外を送出せず、この値の error として呼び出し元に返す。
    """

    value: T | None = None
    error: DomainException | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> Result[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: DomainException) -> Result[T]:
        return cls(error=error)

    def unwrap(self) -> T:
        """成功時は値を返し、失敗時は保持している例外を送出する"""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]
