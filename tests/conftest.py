"""Shared fixtures: an in-memory app, clients and the demo dataset."""

from datetime import timedelta

import pytest

from mavera_hall import create_app
from mavera_hall.bookings import local_today
from mavera_hall.cli import seed_demo_data
from mavera_hall.config import Settings
from mavera_hall.models import db

STAFF_EMAIL = "admin@mavera.com"


@pytest.fixture
def app():
    settings = Settings(database_url="sqlite://", secret_key="test-secret")
    app = create_app(settings, TESTING=True)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def staff_client(client):
    """A client with a signed-in staff session."""
    with client.session_transaction() as sess:
        sess["staff_email"] = STAFF_EMAIL
    return client


@pytest.fixture
def seeded(app):
    seed_demo_data()
    return app


@pytest.fixture
def booking_form(app):
    """Build a valid booking request ``days_ahead`` days from today."""

    def build(days_ahead=60, start="18:00", end="22:00", **overrides):
        form = {
            "name": "Layla Hassan",
            "email": "layla@example.com",
            "phone": "+966 50 000 0000",
            "event_type": "wedding",
            "event_date": (local_today() + timedelta(days=days_ahead)).isoformat(),
            "start_time": start,
            "end_time": end,
            "guest_count": "120",
            "total_amount": "5000",
        }
        form.update(overrides)
        return form

    return build
