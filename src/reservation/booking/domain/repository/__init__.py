from .booking_repository import DEFAULT_SLOT, BookingRepository

__all__ = ["DEFAULT_SLOT", "BookingRepository"]
