from datetime import date, datetime, timezone
from typing import Callable, TypedDict, TypeVar

from reservation.booking.domain.entity import Booking
from reservation.booking.domain.enum import BookingStatus, RoomType
from reservation.booking.domain.value_object import (
    BookingId,
    ContactNumber,
    EmailAddress,
    GuestName,
    StayPeriod,
)
from reservation.shared.domain.exception import FieldError, ValidationException

T = TypeVar("T")


class BookingDetails(TypedDict):
    """検証済みの予約入力データ構造"""

    guest_name: str
    room_type: RoomType
    check_in_date: date
    check_out_date: date
    contact_number: str
    email: str
    id_proof: str | None


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _to_value(field: str, build: Callable[[], T]) -> T:
    """Value Object の ValueError をフォームキー単位の ValidationException に変換する"""
    try:
        return build()
    except ValueError as e:
        raise ValidationException([FieldError(field=field, message=str(e))]) from e


class BookingFactory:
    """宿泊予約エンティティのファクトリ

    - 一意な ID の採番
    - プリミティブ型から Value Object への変換
    - 初期状態（CONFIRMED）の設定
    """

    def __init__(
        self,
        clock: Callable[[], datetime] = utc_now,
        id_generator: Callable[[], BookingId] = BookingId.generate,
    ) -> None:
        self._clock = clock
        self._id_generator = id_generator

    def now(self) -> datetime:
        """ファクトリの時計で現在時刻を返す"""
        return self._clock()

    def create(self, details: BookingDetails) -> Booking:
        """新規予約エンティティを生成する

        Args:
            details: 検証済みの予約内容

        Returns:
            Booking: 生成された予約エンティティ（CONFIRMED状態）

        Raises:
            ValidationException: Value Object の不変条件に違反した場合
        """
        return Booking(
            id=self._id_generator(),
            guest_name=_to_value("guestName", lambda: GuestName(details["guest_name"])),
            room_type=_to_value("roomType", lambda: RoomType(details["room_type"])),
            stay_period=_to_value(
                "checkOutDate",
                lambda: StayPeriod(
                    check_in=details["check_in_date"],
                    check_out=details["check_out_date"],
                ),
            ),
            contact_number=_to_value(
                "contactNumber", lambda: ContactNumber(details["contact_number"])
            ),
            email=_to_value("email", lambda: EmailAddress(details["email"])),
            id_proof=details["id_proof"],
            status=BookingStatus.CONFIRMED,
            created_at=self._clock(),
        )
