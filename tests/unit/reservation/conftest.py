from datetime import date, datetime, timezone
from unittest.mock import MagicMock

import pytest

from reservation.booking.domain.entity.booking import Booking
from reservation.booking.domain.enum import BookingStatus, RoomType
from reservation.booking.domain.factory import BookingFactory
from reservation.booking.domain.repository import BookingRepository
from reservation.booking.domain.value_object import (
    BookingId,
    ContactNumber,
    EmailAddress,
    GuestName,
    StayPeriod,
)

NOW = datetime(2025, 5, 1, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def factory():
    """時刻を固定した BookingFactory"""
    return BookingFactory(clock=lambda: NOW)


@pytest.fixture
def form_data():
    """予約フォームから送信される入力値"""
    return {
        "guestName": "Jane Doe",
        "roomType": "Suite",
        "checkInDate": "2025-06-01",
        "checkOutDate": "2025-06-05",
        "contactNumber": "9876543210",
        "email": "jane@example.com",
    }


@pytest.fixture
def mock_repository():
    """空のスロットを返すリポジトリのモック"""
    repository = MagicMock(spec=BookingRepository)
    repository.load_all.return_value = None
    return repository


@pytest.fixture
def create_booking():
    """Booking を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        status: BookingStatus = BookingStatus.CONFIRMED,
        booking_id: str = "test-id",
        guest_name: str = "Jane Doe",
        room_type: RoomType = RoomType.SUITE,
        check_in: date = date(2025, 6, 1),
        check_out: date = date(2025, 6, 5),
        contact_number: str = "9876543210",
        email: str = "jane@example.com",
        id_proof: str | None = None,
    ) -> Booking:
        return Booking(
            id=BookingId(value=booking_id),
            guest_name=GuestName(value=guest_name),
            room_type=room_type,
            stay_period=StayPeriod(check_in=check_in, check_out=check_out),
            contact_number=ContactNumber(value=contact_number),
            email=EmailAddress(value=email),
            id_proof=id_proof,
            status=status,
            created_at=NOW,
        )

    return _factory
