from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum

from reservation.booking.domain.entity import Booking
from reservation.booking.domain.enum import BookingStatus


@dataclass(frozen=True)
class BookingFilter:
    """予約一覧の絞り込み条件

    指定した条件はすべて満たす必要がある（AND）。
    stay_from / stay_to は宿泊日と重なる照会期間（両端を含む）。
    """

    status: BookingStatus | None = None
    guest_name: str | None = None
    stay_from: date | None = None
    stay_to: date | None = None

    def __post_init__(self) -> None:
        if (
            self.stay_from is not None
            and self.stay_to is not None
            and self.stay_to < self.stay_from
        ):
            raise ValueError("stay_to must not be before stay_from")

    def matches(self, booking: Booking) -> bool:
        if self.status is not None and booking.status != self.status:
            return False
        if self.guest_name and not booking.guest_name.contains(self.guest_name):
            return False
        if self.stay_from is not None or self.stay_to is not None:
            return booking.stay_period.overlaps(self.stay_from, self.stay_to)
        return True


class BookingOrder(str, Enum):
    """予約一覧の並び順"""

    CREATED_AT = "createdAt"
    CHECK_IN_DATE = "checkInDate"
    GUEST_NAME = "guestName"

    def sort(self, bookings: list[Booking]) -> list[Booking]:
        """安定ソートで並べ替える"""
        if self is BookingOrder.CREATED_AT:
            return sorted(bookings, key=lambda b: b.created_at)
        if self is BookingOrder.CHECK_IN_DATE:
            return sorted(bookings, key=lambda b: b.stay_period.check_in)
        return sorted(bookings, key=lambda b: str(b.guest_name).casefold())
