from datetime import date

import pytest

from reservation.booking.domain.value_object.stay_period import StayPeriod


class TestStayPeriod:
    def test_valid_stay_period(self):
        stay_period = StayPeriod(check_in=date(2025, 6, 1), check_out=date(2025, 6, 5))
        assert stay_period.check_in == date(2025, 6, 1)
        assert stay_period.check_out == date(2025, 6, 5)

    def test_nights_calculation(self):
        stay_period = StayPeriod(check_in=date(2025, 6, 1), check_out=date(2025, 6, 5))
        assert stay_period.nights() == 4

    def test_checkout_before_checkin_raises_error(self):
        with pytest.raises(
            ValueError, match="Check-out date must be after check-in date"
        ):
            StayPeriod(check_in=date(2025, 6, 5), check_out=date(2025, 6, 1))

    def test_same_date_raises_error(self):
        with pytest.raises(
            ValueError, match="Check-out date must be after check-in date"
        ):
            StayPeriod(check_in=date(2025, 6, 1), check_out=date(2025, 6, 1))

    def test_from_strings(self):
        stay_period = StayPeriod.from_strings("2025-06-01", "2025-06-03")
        assert stay_period.nights() == 2

    def test_invalid_date_format_raises_error(self):
        with pytest.raises(ValueError, match="Invalid date format"):
            StayPeriod.from_strings("not-a-date", "2025-06-03")


class TestStayPeriodOverlaps:
    @pytest.fixture
    def stay_period(self):
        # 宿泊日は 6/1, 6/2, 6/3, 6/4
        return StayPeriod(check_in=date(2025, 6, 1), check_out=date(2025, 6, 5))

    @pytest.mark.parametrize(
        "start, end, expected",
        [
            (date(2025, 5, 25), date(2025, 6, 1), True),
            (date(2025, 6, 4), date(2025, 6, 10), True),
            (date(2025, 6, 2), date(2025, 6, 3), True),
            (date(2025, 5, 1), date(2025, 5, 31), False),
            (date(2025, 6, 5), date(2025, 6, 10), False),
            (None, date(2025, 6, 1), True),
            (date(2025, 6, 5), None, False),
            (None, None, True),
        ],
    )
    def test_overlaps(self, stay_period, start, end, expected):
        assert stay_period.overlaps(start, end) is expected
