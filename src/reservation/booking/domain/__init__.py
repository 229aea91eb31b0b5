from .entity import Booking
from .enum import BookingStatus, RoomType
from .factory import BookingDetails, BookingFactory
from .repository import BookingRepository
from .value_object import BookingId, ContactNumber, EmailAddress, GuestName, StayPeriod

__all__ = [
    "Booking",
    "BookingId",
    "BookingStatus",
    "RoomType",
    "GuestName",
    "ContactNumber",
    "EmailAddress",
    "StayPeriod",
    "BookingRepository",
    "BookingFactory",
    "BookingDetails",
]
