"""JSON API: day lookups, booking requests, availability and health."""

from datetime import timedelta

import pytest

from mavera_hall.bookings import local_today
from mavera_hall.models import Booking, db


class TestDayLookup:

    def test_date_required(self, client):
        response = client.get("/api/bookings")
        assert response.status_code == 400
        assert response.get_json() == {"error": "Date parameter is required"}

    @pytest.mark.parametrize("value", ["2024-13-01", "tomorrow", "2024/01/05"])
    def test_invalid_date(self, client, value):
        response = client.get(f"/api/bookings?date={value}")
        assert response.status_code == 400
        assert response.get_json()["error"] == "Invalid date format. Use YYYY-MM-DD."

    def test_seeded_day(self, seeded, client):
        day = local_today() + timedelta(days=40)
        data = client.get(f"/api/bookings?date={day.isoformat()}").get_json()

        assert data["date"] == day.isoformat()
        assert data["todays_count"] == 1
        assert data["hours_booked"] == 9.0
        assert data["bookings"][0]["title"] == "Sarah & Michael Wedding"

    def test_empty_day(self, client):
        data = client.get(f"/api/bookings?date={local_today().isoformat()}").get_json()
        assert data["bookings"] == []
        assert data["hours_booked"] == 0

    def test_single_booking(self, seeded, client):
        booking = Booking.query.first()
        assert client.get(f"/api/bookings/{booking.id}").get_json()["reference"] == booking.reference

        missing = client.get("/api/bookings/9999")
        assert missing.status_code == 404
        assert "error" in missing.get_json()


class TestBookRequest:

    def test_created(self, client, booking_form):
        response = client.post("/api/book", json=booking_form())

        assert response.status_code == 201
        body = response.get_json()
        assert body["status"] == "pending"
        assert body["reference"].startswith("MH-")
        assert db.session.get(Booking, body["id"]).source == "api"

    def test_start_at_end_at_payload(self, client):
        day = local_today() + timedelta(days=70)
        response = client.post("/api/book", json={
            "name": "Rami Adel",
            "email": "rami@example.com",
            "event_type": "conference",
            "start_at": f"{day.isoformat()}T09:00",
            "end_at": f"{day.isoformat()}T15:30",
            "guest_count": 90,
        })

        assert response.status_code == 201
        booking = Booking.query.one()
        assert booking.duration_hours == 6.5

    def test_validation_errors(self, client, booking_form):
        client.get("/language/en")
        response = client.post("/api/book", json=booking_form(guest_count="3", email="nope"))

        assert response.status_code == 400
        body = response.get_json()
        assert body["message"] == "Please correct the highlighted fields."
        assert body["errors"]["email"] == "Please enter a valid email address"
        assert "guest_count" in body["errors"]

    def test_non_string_fields(self, client, booking_form):
        response = client.post("/api/book", json=booking_form(phone=966500000000, guest_count=150, total_amount=4200))
        assert response.status_code == 201
        assert Booking.query.one().customer.phone == "966500000000"

    @pytest.mark.parametrize("field,value", [("name", 7), ("email", True), ("event_type", 7), ("phone", False)])
    def test_non_string_fields_rejected(self, client, booking_form, field, value):
        response = client.post("/api/book", json=booking_form(**{field: value}))
        assert response.status_code == 400
        assert field in response.get_json()["errors"]

    def test_missing_body(self, client):
        response = client.post("/api/book", data="not json", content_type="text/plain")
        assert response.status_code == 400
        assert "name" in response.get_json()["errors"]

    def test_conflict(self, client, booking_form):
        client.post("/api/book", json=booking_form())
        response = client.post("/api/book", json=booking_form(email="second@example.com"))

        assert response.status_code == 409
        assert response.get_json()["conflict"] == "Wedding - Layla Hassan"


class TestDelete:

    def test_requires_login(self, seeded, client):
        booking = Booking.query.first()
        response = client.delete(f"/api/bookings/{booking.id}")
        assert response.status_code == 401
        assert db.session.get(Booking, booking.id) is not None

    def test_deletes_when_logged_in(self, seeded, staff_client):
        booking = Booking.query.first()
        booking_id = booking.id
        response = staff_client.delete(f"/api/bookings/{booking_id}")

        assert response.status_code == 200
        assert db.session.get(Booking, booking_id) is None


def test_month_availability(seeded, client):
    blocked = local_today() + timedelta(days=10)
    data = client.get(f"/api/availability?month={blocked.strftime('%Y-%m')}").get_json()

    assert data["month"] == blocked.strftime("%Y-%m")
    assert len(data["cells"]) % 7 == 0
    cell = next(c for c in data["cells"] if c and c["date"] == blocked.isoformat())
    assert cell["status"] == "maintenance"


def test_health(client):
    data = client.get("/health").get_json()
    assert data["ok"] is True


def test_cors_for_configured_origin(client):
    response = client.get("/api/availability", headers={"Origin": "http://localhost:3000"})
    assert response.headers.get("Access-Control-Allow-Origin") == "http://localhost:3000"
