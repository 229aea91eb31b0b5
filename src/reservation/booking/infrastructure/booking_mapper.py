import json
from datetime import date, datetime
from typing import Iterable

from reservation.booking.domain.entity import Booking
from reservation.booking.domain.enum import BookingStatus, RoomType
from reservation.booking.domain.value_object import (
    BookingId,
    ContactNumber,
    EmailAddress,
    GuestName,
    StayPeriod,
)
from reservation.shared.domain.exception import PersistenceException


def dumps(bookings: Iterable[Booking]) -> str:
    """全予約を id -> 予約レコード の JSON にシリアライズする"""
    return json.dumps(
        {str(booking.id): booking.to_dict() for booking in bookings},
        ensure_ascii=False,
        indent=2,
    )


def loads(payload: str) -> list[Booking]:
    """JSON から予約を復元する

    Raises:
        PersistenceException: JSON やレコードが壊れている場合
    """
    try:
        records = json.loads(payload)
    except (json.JSONDecodeError, RecursionError) as e:
        raise PersistenceException(f"Stored bookings are not valid JSON: {e}") from e
    if not isinstance(records, dict):
        raise PersistenceException("Stored bookings must be a mapping of id to booking")

    bookings = []
    for key, item in records.items():
        try:
            booking = to_entity(item)
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise PersistenceException(f"Stored booking {key} is malformed: {e}") from e
        if booking.id.value != key:
            raise PersistenceException(
                f"Stored booking key {key} does not match its id {booking.id}"
            )
        bookings.append(booking)
    return bookings


def to_entity(item: dict) -> Booking:
    """永続化レコードをドメインエンティティに変換する"""
    updated_at = item.get("updatedAt")
    id_proof = item.get("idProof")
    if id_proof is not None and not isinstance(id_proof, str):
        raise ValueError(f"idProof must be a string: {id_proof!r}")
    return Booking(
        id=BookingId(value=item["id"]),
        guest_name=GuestName(value=item["guestName"]),
        room_type=RoomType(item["roomType"]),
        stay_period=StayPeriod(
            check_in=date.fromisoformat(item["checkInDate"]),
            check_out=date.fromisoformat(item["checkOutDate"]),
        ),
        contact_number=ContactNumber(value=item["contactNumber"]),
        email=EmailAddress(value=item["email"]),
        id_proof=id_proof,
        status=BookingStatus(item["status"]),
        created_at=_parse_datetime(item["createdAt"]),
        updated_at=_parse_datetime(updated_at) if updated_at else None,
    )


def _parse_datetime(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))
