import os
import tempfile
from pathlib import Path
from typing import Iterable

from reservation.booking.domain.entity import Booking
from reservation.booking.domain.repository import DEFAULT_SLOT, BookingRepository
from reservation.booking.infrastructure import booking_mapper
from reservation.shared.domain.exception import PersistenceException


class JsonFileBookingRepository(BookingRepository):
    """ローカルの JSON ファイルを使用した BookingRepository の具象実装

    スロット名ごとに <directory>/<slot>.json の1ファイルへ全予約を保存する。
    """

    def __init__(self, directory: str | Path | None = None, slot: str | None = None) -> None:
        self.directory = Path(directory or os.getenv("BOOKING_STORAGE_DIR", "data"))
        self.slot = slot or os.getenv("BOOKING_STORAGE_SLOT", DEFAULT_SLOT)

    @property
    def path(self) -> Path:
        return self.directory / f"{self.slot}.json"

    def load_all(self) -> list[Booking] | None:
        """スロットのファイルから全予約を読み込む"""
        try:
            payload = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            raise PersistenceException(f"Cannot read bookings from {self.path}: {e}") from e
        return booking_mapper.loads(payload)

    def save_all(self, bookings: Iterable[Booking]) -> None:
        """一時ファイルに書き出し、ディスクへ同期してから置き換える"""
        payload = booking_mapper.dumps(bookings)
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.directory, prefix=f".{self.slot}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(payload)
                    f.flush()
                    os.fsync(f.fileno())
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise PersistenceException(f"Cannot write bookings to {self.path}: {e}") from e
