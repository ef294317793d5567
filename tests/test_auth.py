"""Staff sign-in, sign-out and the login guard."""

import pytest

from mavera_hall.auth import LOGIN_ERRORS, check_credentials, is_safe_redirect
from mavera_hall.models import ActivityLog


@pytest.mark.parametrize("email,password,expected", [
    ("", "admin123", "email_required"),
    ("admin@mavera.com", "   ", "password_required"),
    ("a@b", "admin123", "invalid_email"),
    ("admin@mavera.com", "123", "password_too_short"),
    ("admin@mavera.com", "wrong-password", "invalid_credentials"),
    ("ADMIN@mavera.com", "admin123", None),
])
def test_check_credentials(app, email, password, expected):
    assert check_credentials(email, password) == expected


def test_login_errors_are_bilingual():
    for message in LOGIN_ERRORS.values():
        arabic, english = message.split(" - ", 1)
        assert arabic and english


class TestLoginView:

    def test_successful_login_redirects_to_dashboard(self, client):
        response = client.post("/login", data={"email": "admin@mavera.com", "password": "admin123"})

        assert response.status_code == 302
        assert response.headers["Location"].endswith("/staff")
        with client.session_transaction() as sess:
            assert sess["staff_email"] == "admin@mavera.com"
        assert ActivityLog.query.filter_by(action="login_success").count() == 1

    def test_failed_login_shows_error(self, client):
        response = client.post("/login", data={"email": "admin@mavera.com", "password": "nope123"})

        assert response.status_code == 200
        assert "Invalid email or password" in response.get_data(as_text=True)
        assert ActivityLog.query.filter_by(action="login_failed", severity="warning").count() == 1

    def test_next_parameter(self, client):
        response = client.post(
            "/login", data={"email": "admin@mavera.com", "password": "admin123", "next": "/staff/tasks"}
        )
        assert response.headers["Location"].endswith("/staff/tasks")

    @pytest.mark.parametrize("target", ["https://evil.example/", "//evil.example/", "/\\evil.example"])
    def test_external_next_ignored(self, client, target):
        response = client.post(
            "/login", data={"email": "admin@mavera.com", "password": "admin123", "next": target}
        )
        assert response.headers["Location"].endswith("/staff")

    def test_logout(self, staff_client):
        response = staff_client.post("/logout")

        assert response.status_code == 302
        with staff_client.session_transaction() as sess:
            assert "staff_email" not in sess


def test_staff_pages_require_login(client):
    response = client.get("/staff/bookings")
    assert response.status_code == 302
    assert "/login?next=" in response.headers["Location"]


@pytest.mark.parametrize("target,expected", [
    ("/staff/bookings?status=pending", True),
    ("/", True),
    ("", False),
    ("staff", False),
    ("//evil.example", False),
    ("/\\evil.example", False),
    ("https://evil.example/", False),
])
def test_is_safe_redirect(target, expected):
    assert is_safe_redirect(target) is expected
