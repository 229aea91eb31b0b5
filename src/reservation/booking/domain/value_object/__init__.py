from .booking_id import BookingId
from .contact_number import ContactNumber
from .email_address import EmailAddress
from .guest_name import GuestName
from .stay_period import StayPeriod

__all__ = ["BookingId", "ContactNumber", "EmailAddress", "GuestName", "StayPeriod"]
