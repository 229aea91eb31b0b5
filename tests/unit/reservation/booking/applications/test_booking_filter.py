from datetime import date

import pytest

from reservation.booking.applications.booking_filter import BookingFilter, BookingOrder
from reservation.booking.domain.enum import BookingStatus


class TestBookingFilter:
    def test_empty_filter_matches_everything(self, create_booking):
        assert BookingFilter().matches(create_booking())

    def test_status(self, create_booking):
        criteria = BookingFilter(status=BookingStatus.CANCELLED)
        assert criteria.matches(create_booking(status=BookingStatus.CANCELLED))
        assert not criteria.matches(create_booking(status=BookingStatus.CONFIRMED))

    def test_guest_name_substring(self, create_booking):
        criteria = BookingFilter(guest_name="DOE")
        assert criteria.matches(create_booking(guest_name="Jane Doe"))
        assert not criteria.matches(create_booking(guest_name="John Roe"))

    def test_stay_window(self, create_booking):
        booking = create_booking(check_in=date(2025, 6, 1), check_out=date(2025, 6, 5))
        assert BookingFilter(stay_from=date(2025, 6, 4)).matches(booking)
        assert not BookingFilter(stay_from=date(2025, 6, 5)).matches(booking)
        assert not BookingFilter(stay_to=date(2025, 5, 31)).matches(booking)

    def test_criteria_are_combined(self, create_booking):
        criteria = BookingFilter(
            status=BookingStatus.CONFIRMED, guest_name="jane", stay_to=date(2025, 5, 1)
        )
        assert not criteria.matches(create_booking())

    def test_inverted_window_raises_error(self):
        with pytest.raises(ValueError):
            BookingFilter(stay_from=date(2025, 6, 5), stay_to=date(2025, 6, 1))


class TestBookingOrder:
    def test_sort_by_check_in_date_and_guest_name(self, create_booking):
        late = create_booking(
            booking_id="late",
            guest_name="alice",
            check_in=date(2025, 7, 1),
            check_out=date(2025, 7, 2),
        )
        early = create_booking(booking_id="early", guest_name="Bob")

        assert BookingOrder.CHECK_IN_DATE.sort([late, early]) == [early, late]
        assert BookingOrder.GUEST_NAME.sort([early, late]) == [late, early]
