import pytest

from reservation.booking.domain.value_object.contact_number import ContactNumber
from reservation.booking.domain.value_object.email_address import EmailAddress


class TestContactNumber:
    def test_ten_digits_is_valid(self):
        assert str(ContactNumber(value="9876543210")) == "9876543210"

    @pytest.mark.parametrize(
        "value", ["12345", "98765432101", "98765-4321", "987654321a", "", "９８７６５４３２１０"]
    )
    def test_invalid_contact_number_raises_error(self, value):
        with pytest.raises(ValueError, match="Contact number must be 10 digits"):
            ContactNumber(value=value)


class TestEmailAddress:
    def test_valid_email(self):
        assert str(EmailAddress(value="jane@example.com")) == "jane@example.com"

    @pytest.mark.parametrize("value", ["", "jane", "jane@", "jane@example", "a b@c.d"])
    def test_invalid_email_raises_error(self, value):
        with pytest.raises(ValueError, match="Invalid email address"):
            EmailAddress(value=value)

    def test_matches_is_case_insensitive(self):
        email = EmailAddress(value="Jane@Example.com")
        assert email.matches("jane@example.COM")
        assert not email.matches("john@example.com")
