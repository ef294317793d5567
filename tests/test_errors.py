"""Error pages and JSON error payloads."""

import pytest
from structlog.testing import capture_logs

from mavera_hall.bookings import create_booking, local_today
from mavera_hall.errors import (
    BookingConflictError,
    BookingValidationError,
    NotFoundError,
    ValidationError,
    with_error_handling,
)


def test_html_404_is_translated(client):
    response = client.get("/no-such-page")
    assert response.status_code == 404
    assert "الصفحة غير موجودة" in response.get_data(as_text=True)


def test_api_404_is_json(client):
    response = client.get("/api/nothing-here")
    assert response.status_code == 404
    assert "error" in response.get_json()


def test_application_errors(app, client):

    def api_boom():
        raise ValidationError("errors.booking.invalid", field_errors={"name": "errors.validation.required"})

    def page_boom():
        raise NotFoundError("errors.page.not_found")

    app.add_url_rule("/api/boom", "api_boom", api_boom)
    app.add_url_rule("/boom", "page_boom", page_boom)

    response = client.get("/api/boom")
    assert response.status_code == 400
    assert response.get_json() == {
        "error": "errors.booking.invalid",
        "errors": {"name": "errors.validation.required"},
    }

    client.get("/language/en")
    page = client.get("/boom")
    assert page.status_code == 404
    assert "The page you are looking for does not exist." in page.get_data(as_text=True)


def test_conflict_status_code():
    assert BookingConflictError("errors.booking.conflict", conflicting_title="Gala").status_code == 409


def test_with_error_handling_reraises():

    @with_error_handling
    def explode():
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        explode()


def test_with_error_handling_logs_unexpected_errors():

    @with_error_handling
    def explode():
        raise RuntimeError("boom")

    with capture_logs() as logs:
        with pytest.raises(RuntimeError):
            explode()

    entry = next(e for e in logs if e["event"] == "wrapped_function_failed")
    assert entry["log_level"] == "error"
    assert entry["error_type"] == "RuntimeError"


def test_rejected_bookings_are_logged_as_warnings(app, booking_form):
    with capture_logs() as logs:
        with pytest.raises(BookingValidationError):
            create_booking(booking_form(name=""), local_today())

    entry = next(e for e in logs if e["event"] == "wrapped_function_rejected")
    assert entry["log_level"] == "warning"
    assert entry["function"] == "create_booking"
    assert entry["error"] == "errors.booking.invalid"
