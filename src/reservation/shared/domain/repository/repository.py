from abc import ABC, abstractmethod
from typing import Generic, Iterable, TypeVar

T = TypeVar("T")


class SnapshotRepository(ABC, Generic[T]):
    """Repository 基底クラス

    - 集約の全件スナップショットを1つの名前付きスロットに永続化する
    - 読み書きの失敗は PersistenceException として通知する
    """

    @abstractmethod
    def load_all(self) -> list[T] | None:
        """スロットから全件を読み込む（スロットが存在しなければ None）"""
        raise NotImplementedError

    @abstractmethod
    def save_all(self, aggregates: Iterable[T]) -> None:
        """全件でスロットを上書きする"""
        raise NotImplementedError
