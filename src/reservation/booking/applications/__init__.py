from .booking_filter import BookingFilter, BookingOrder
from .booking_store import BookingStore
from .request_models import BookingRequest
from .validate_booking import validate

__all__ = ["BookingFilter", "BookingOrder", "BookingRequest", "BookingStore", "validate"]
