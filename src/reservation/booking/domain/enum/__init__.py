from .booking_status import BookingStatus
from .room_type import RoomType

__all__ = ["BookingStatus", "RoomType"]
