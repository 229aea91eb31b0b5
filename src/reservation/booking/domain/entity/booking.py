from __future__ import annotations

from datetime import datetime

from reservation.booking.domain.enum import BookingStatus, RoomType
from reservation.booking.domain.value_object import (
    BookingId,
    ContactNumber,
    EmailAddress,
    GuestName,
    StayPeriod,
)
from reservation.shared.domain import Entity
from reservation.shared.domain.exception import InvalidTransitionException


class Booking(Entity[BookingId]):
    """宿泊予約エンティティ

    BookingId で同一性を判定する。
    作成後に変化するのは status と updated_at のみ。
    """

    def __init__(
        self,
        id: BookingId,
        guest_name: GuestName,
        room_type: RoomType,
        stay_period: StayPeriod,
        contact_number: ContactNumber,
        email: EmailAddress,
        created_at: datetime,
        id_proof: str | None = None,
        status: BookingStatus = BookingStatus.CONFIRMED,
        updated_at: datetime | None = None,
    ) -> None:
        super().__init__(id)
        self._guest_name = guest_name
        self._room_type = room_type
        self._stay_period = stay_period
        self._contact_number = contact_number
        self._email = email
        self._id_proof = id_proof
        self._status = status
        self._created_at = created_at
        self._updated_at = updated_at

    @property
    def guest_name(self) -> GuestName:
        return self._guest_name

    @property
    def room_type(self) -> RoomType:
        return self._room_type

    @property
    def stay_period(self) -> StayPeriod:
        return self._stay_period

    @property
    def nights(self) -> int:
        return self._stay_period.nights()

    @property
    def contact_number(self) -> ContactNumber:
        return self._contact_number

    @property
    def email(self) -> EmailAddress:
        return self._email

    @property
    def id_proof(self) -> str | None:
        return self._id_proof

    @property
    def status(self) -> BookingStatus:
        return self._status

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime | None:
        return self._updated_at

    def transition_to(self, target: BookingStatus, at: datetime) -> None:
        """ライフサイクルに従ってステータスを遷移させる

        Raises:
            InvalidTransitionException: 遷移が許可されていない場合（状態は変わらない）
        """
        if not self._status.can_transition_to(target):
            raise InvalidTransitionException(self._status, target)
        self._status = target
        self._updated_at = at

    def confirm(self, at: datetime) -> None:
        """予約を確定する"""
        self.transition_to(BookingStatus.CONFIRMED, at)

    def check_in(self, at: datetime) -> None:
        """チェックインする"""
        self.transition_to(BookingStatus.CHECKED_IN, at)

    def check_out(self, at: datetime) -> None:
        """チェックアウトする"""
        self.transition_to(BookingStatus.CHECKED_OUT, at)

    def cancel(self, at: datetime) -> None:
        """予約をキャンセルする"""
        self.transition_to(BookingStatus.CANCELLED, at)

    def matches_contact(self, email_or_contact_number: str) -> bool:
        """メールアドレス（大文字小文字無視）または電話番号の完全一致"""
        query = email_or_contact_number.strip()
        if "@" in query:
            return self._email.matches(query)
        return str(self._contact_number) == query

    def to_dict(self) -> dict:
        """永続化用の辞書表現を返す"""
        return {
            "id": str(self.id),
            "guestName": str(self._guest_name),
            "roomType": self._room_type.value,
            "checkInDate": self._stay_period.check_in.isoformat(),
            "checkOutDate": self._stay_period.check_out.isoformat(),
            "contactNumber": str(self._contact_number),
            "email": str(self._email),
            "idProof": self._id_proof,
            "status": self._status.value,
            "createdAt": self._created_at.isoformat(),
            "updatedAt": self._updated_at.isoformat() if self._updated_at else None,
        }
