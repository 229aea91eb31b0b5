from __future__ import annotations

from enum import Enum


class BookingStatus(str, Enum):
    """予約ステータス

    CHECKED_OUT と CANCELLED は終端状態。
    """

    PENDING = "Pending"
    CONFIRMED = "Confirmed"
    CHECKED_IN = "CheckedIn"
    CHECKED_OUT = "CheckedOut"
    CANCELLED = "Cancelled"

    def __str__(self) -> str:
        return self.value

    def allowed_transitions(self) -> frozenset[BookingStatus]:
        """このステータスから遷移可能なステータス"""
        return _TRANSITIONS[self]

    def can_transition_to(self, target: BookingStatus) -> bool:
        return target in _TRANSITIONS[self]

    def is_terminal(self) -> bool:
        return not _TRANSITIONS[self]


_TRANSITIONS: dict[BookingStatus, frozenset[BookingStatus]] = {
    BookingStatus.PENDING: frozenset(
        {BookingStatus.CONFIRMED, BookingStatus.CANCELLED}
    ),
    BookingStatus.CONFIRMED: frozenset(
        {BookingStatus.CHECKED_IN, BookingStatus.CANCELLED}
    ),
    BookingStatus.CHECKED_IN: frozenset({BookingStatus.CHECKED_OUT}),
    BookingStatus.CHECKED_OUT: frozenset(),
    BookingStatus.CANCELLED: frozenset(),
}
