"""Form validators and booking rules."""

from datetime import date, time
from types import SimpleNamespace

import pytest

from mavera_hall.validation import (
    parse_amount,
    parse_time_str,
    validate_booking_form,
    validate_contact_form,
    validate_email_address,
    validate_event_booking_date,
    validate_event_guest_count,
    validate_password_confirmation,
    validate_password_strength,
    validate_phone_number,
)

PROFILE = SimpleNamespace(min_guests=50, max_guests=500, min_notice_days=30, max_advance_days=365)
TODAY = date(2025, 1, 1)


@pytest.mark.parametrize("value,ok", [
    ("user@example.com", True),
    ("  user@example.com ", True),
    ("user@example", False),
    ("user example@x.com", False),
])
def test_email(value, ok):
    assert validate_email_address(value).is_valid is ok


def test_empty_email_is_required():
    result = validate_email_address("   ")
    assert not result.is_valid
    assert result.error_message == "errors.validation.required"


@pytest.mark.parametrize("value,ok", [("+966 50 123 4567", True), ("(011) 234-5678", True), ("call me", False)])
def test_phone(value, ok):
    assert validate_phone_number(value).is_valid is ok


def test_password_rules():
    assert validate_password_strength("Str0ng!pass").is_valid
    weak = validate_password_strength("weakpass")
    assert weak.error_message == "errors.validation.password_too_weak"
    assert validate_password_confirmation("a", "a").is_valid
    assert validate_password_confirmation("a", "b").error_message == "errors.validation.password_mismatch"


def test_guest_count_limits():
    assert validate_event_guest_count(50, PROFILE).is_valid
    assert validate_event_guest_count(500, PROFILE).is_valid
    assert validate_event_guest_count(49, PROFILE).error_message == "errors.booking.guest_count"
    assert validate_event_guest_count(None, PROFILE).error_message == "errors.validation.invalid_number"


class TestBookingDate:

    def test_past(self):
        result = validate_event_booking_date(date(2024, 12, 31), TODAY, PROFILE)
        assert result.error_message == "errors.booking.past_date"

    def test_notice(self):
        soon = date(2025, 1, 10)
        assert validate_event_booking_date(soon, TODAY, PROFILE).error_message == "errors.booking.advance_required"
        assert validate_event_booking_date(soon, TODAY, PROFILE, enforce_notice=False).is_valid

    def test_too_far(self):
        result = validate_event_booking_date(date(2026, 6, 1), TODAY, PROFILE)
        assert result.error_message == "errors.booking.advance_too_far"


class TestBookingForm:

    def form(self, **overrides):
        data = {
            "name": "Omar Saleh",
            "email": "Omar@Example.com",
            "event_type": "corporate",
            "event_date": "2025-03-01",
            "start_time": "09:00",
            "end_time": "17:00",
            "guest_count": "80",
        }
        data.update(overrides)
        return data

    def test_valid(self):
        result = validate_booking_form(self.form(), TODAY, PROFILE)
        assert result.is_valid
        assert result.cleaned["email"] == "omar@example.com"
        assert result.cleaned["start_time"] == time(9, 0)
        assert result.cleaned["guest_count"] == 80
        assert result.cleaned["total_amount"] == 0.0

    def test_collects_one_error_per_field(self):
        result = validate_booking_form(
            self.form(name="", event_type="party", start_time="9am", guest_count="lots"), TODAY, PROFILE
        )
        assert not result.is_valid
        assert result.field_errors == {
            "name": "errors.validation.required",
            "event_type": "errors.validation.required",
            "start_time": "errors.validation.invalid_time",
            "guest_count": "errors.validation.invalid_number",
        }

    def test_negative_amount_rejected(self):
        result = validate_booking_form(self.form(total_amount="-5"), TODAY, PROFILE)
        assert result.field_errors["total_amount"] == "errors.validation.invalid_number"

    def test_json_scalars_are_read_as_text(self):
        result = validate_booking_form(
            self.form(phone=966500000000, guest_count=80, total_amount=1500, special_requests=None, title=12),
            TODAY, PROFILE,
        )
        assert result.is_valid
        assert result.cleaned["phone"] == "966500000000"
        assert result.cleaned["special_requests"] == ""
        assert result.cleaned["title"] == "12"


def test_contact_form():
    ok = validate_contact_form({
        "name": "Nora", "email": "nora@example.com", "subject": "Prices", "message": "Please send a quote.",
    })
    assert ok.is_valid

    bad = validate_contact_form({"name": "N", "email": "nora", "subject": "", "message": "short", "phone": "x"})
    assert set(bad.field_errors) == {"name", "email", "subject", "message", "phone"}
    assert bad.field_errors["name"] == "errors.validation.too_short"

    numeric = validate_contact_form({"name": 12345, "email": False, "subject": 40, "message": 1234567890})
    assert set(numeric.field_errors) == {"email", "subject"}


def test_small_parsers():
    assert parse_time_str("14:30:00") == time(14, 30)
    assert parse_time_str("25:00") is None
    assert parse_amount("") == 0.0
    assert parse_amount("abc") is None
