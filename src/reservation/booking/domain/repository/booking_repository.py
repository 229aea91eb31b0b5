from abc import abstractmethod
from typing import Iterable

from reservation.booking.domain.entity import Booking
from reservation.shared.domain import SnapshotRepository

DEFAULT_SLOT = "hotel_bookings"


class BookingRepository(SnapshotRepository[Booking]):
    """宿泊予約リポジトリのインターフェース

    Domain 層で定義し、具象実装は Infrastructure 層で行う。
    全予約を id -> 予約レコード のマッピングとして1つのスロットに保存する。
    """

    @abstractmethod
    def load_all(self) -> list[Booking] | None:
        """保存済みの全予約を読み込む（未保存なら None）"""
        raise NotImplementedError

    @abstractmethod
    def save_all(self, bookings: Iterable[Booking]) -> None:
        """全予約でスロットを上書きする"""
        raise NotImplementedError
