"""Staff console pages and actions."""

from datetime import timedelta

import pytest

from mavera_hall.bookings import get_hall_profile, local_today
from mavera_hall.calendar_grid import month_start, shift_month
from mavera_hall.models import (
    Announcement,
    AvailabilityBlock,
    Booking,
    Customer,
    Notification,
    StaffUser,
    Task,
    Ticket,
)


@pytest.mark.parametrize("path", [
    "/staff", "/staff/bookings", "/staff/bookings?status=pending&q=tech", "/staff/bookings/new",
    "/staff/bookings/calendar", "/staff/calendar", "/staff/availability", "/staff/tasks",
    "/staff/tasks?status=completed", "/staff/customers", "/staff/customers?q=sarah",
    "/staff/announcements", "/staff/faqs", "/staff/gallery", "/staff/pages", "/staff/pages/about",
    "/staff/pages/terms", "/staff/support", "/staff/notifications", "/staff/users", "/staff/logs",
    "/staff/reports", "/staff/analytics?months=12", "/staff/hall", "/staff/settings", "/staff/profile",
])
def test_staff_pages_render(seeded, staff_client, path):
    assert staff_client.get(path).status_code == 200


def test_detail_pages_render(seeded, staff_client):
    booking = Booking.query.first()
    customer = Customer.query.first()
    ticket = Ticket.query.first()
    assert staff_client.get(f"/staff/bookings/{booking.id}").status_code == 200
    assert staff_client.get(f"/staff/customers/{customer.id}").status_code == 200
    assert staff_client.get(f"/staff/support/{ticket.id}").status_code == 200
    assert staff_client.get("/staff/bookings/9999").status_code == 404


class TestTasks:

    def test_status_change_updates_only_that_task(self, seeded, staff_client):
        task = Task.query.filter_by(status="pending").order_by(Task.id).first()
        others = {t.id: t.status for t in Task.query.filter(Task.id != task.id)}

        response = staff_client.post(f"/staff/tasks/{task.id}/status", data={"status": "completed"})

        assert response.status_code == 302
        assert task.status == "completed"
        assert {t.id: t.status for t in Task.query.filter(Task.id != task.id)} == others

        html = staff_client.get("/staff/tasks").get_data(as_text=True)
        assert f'class="badge badge-green" data-task-status="{task.id}"' in html

    def test_status_filter_is_kept_after_update(self, seeded, staff_client):
        task = Task.query.filter_by(status="pending").first()
        response = staff_client.post(
            f"/staff/tasks/{task.id}/status?status=pending", data={"status": "in-progress"}
        )
        assert response.headers["Location"].endswith("/staff/tasks?status=pending")

    def test_unknown_status_rejected(self, seeded, staff_client):
        task = Task.query.filter_by(status="pending").first()
        staff_client.post(f"/staff/tasks/{task.id}/status", data={"status": "done"})
        assert task.status == "pending"

    def test_create_and_delete(self, staff_client):
        staff_client.post("/staff/tasks", data={
            "title": "Order flowers", "description": "Roses for the stage",
            "due_date": local_today().isoformat(), "priority": "urgent",
        })
        task = Task.query.one()
        assert task.priority == "medium"
        assert task.category == "operations"

        staff_client.post(f"/staff/tasks/{task.id}/delete")
        assert Task.query.count() == 0


class TestBookings:

    def test_staff_booking_skips_notice_period(self, staff_client, booking_form):
        response = staff_client.post("/staff/bookings/new", data=booking_form(days_ahead=3, status="confirmed"))

        booking = Booking.query.one()
        assert response.headers["Location"].endswith(f"/staff/bookings/{booking.id}")
        assert booking.source == "staff"
        assert booking.status == "confirmed"

    def test_cancel_with_late_fee(self, staff_client, booking_form):
        staff_client.post("/staff/bookings/new", data=booking_form(days_ahead=3, total_amount="1000"))
        booking = Booking.query.one()

        staff_client.post(f"/staff/bookings/{booking.id}/cancel")

        assert booking.status == "cancelled"
        assert booking.cancellation_fee == 100.0

    def test_invalid_transition_is_flashed(self, staff_client, booking_form):
        staff_client.post("/staff/bookings/new", data=booking_form())
        booking = Booking.query.one()

        response = staff_client.post(
            f"/staff/bookings/{booking.id}/status", data={"status": "completed"}, follow_redirects=True
        )
        assert response.status_code == 200
        assert booking.status == "pending"

    def test_delete(self, staff_client, booking_form):
        staff_client.post("/staff/bookings/new", data=booking_form())
        booking = Booking.query.one()
        staff_client.post(f"/staff/bookings/{booking.id}/delete")
        assert Booking.query.count() == 0

    @pytest.mark.parametrize("path", ["/staff/bookings/calendar", "/staff/calendar"])
    def test_overnight_booking_shows_in_following_month(self, staff_client, booking_form, path):
        month = shift_month(month_start(local_today()), 2)
        last_day = month - timedelta(days=1)
        staff_client.post("/staff/bookings/new", data=booking_form(
            event_date=last_day.isoformat(), start="21:00", end="04:00",
        ))
        booking = Booking.query.one()

        html = staff_client.get(f"{path}?month={month:%Y-%m}").get_data(as_text=True)
        assert f"/staff/bookings/{booking.id}\"" in html


class TestAvailability:

    def test_block_range_skips_booked_days(self, seeded, staff_client):
        today = local_today()
        # the demo dataset has a booking 40 days out
        start, end = today + timedelta(days=39), today + timedelta(days=41)

        staff_client.post("/staff/availability/block", data={
            "start_date": start.isoformat(), "end_date": end.isoformat(),
            "status": "maintenance", "reason": "Floor works",
        })

        blocked = {b.date for b in AvailabilityBlock.query.filter(AvailabilityBlock.date.between(start, end))}
        assert blocked == {start, end}

    def test_block_and_unblock_single_day(self, staff_client):
        day = local_today() + timedelta(days=90)
        staff_client.post("/staff/availability/block", data={"date": day.isoformat()})
        block = AvailabilityBlock.query.filter_by(date=day).one()
        assert block.status == "unavailable"

        staff_client.post("/staff/availability/unblock", data={"date": day.isoformat()})
        assert AvailabilityBlock.query.filter_by(date=day).count() == 0

    def test_reversed_range_rejected(self, staff_client):
        today = local_today()
        staff_client.post("/staff/availability/block", data={
            "start_date": (today + timedelta(days=5)).isoformat(), "end_date": today.isoformat(),
        })
        assert AvailabilityBlock.query.count() == 0


class TestContent:

    def test_announcement_publish_toggle(self, staff_client):
        staff_client.post("/staff/announcements", data={
            "title": "Ramadan hours", "content": "Open after iftar", "type": "service",
        })
        item = Announcement.query.one()
        assert item.status == "draft"

        staff_client.post(f"/staff/announcements/{item.id}/toggle")
        assert item.status == "published"

    def test_page_upsert(self, staff_client):
        staff_client.post("/staff/pages/terms", data={"title": "Terms", "content": "Be kind.", "is_published": "on"})
        html = staff_client.get("/terms").get_data(as_text=True)
        assert "Be kind." in html


class TestSupport:

    def test_reply_moves_open_ticket_to_in_progress(self, seeded, staff_client):
        ticket = Ticket.query.filter_by(status="open").first()
        staff_client.post(f"/staff/support/{ticket.id}/reply", data={"body": "We will call you today."})

        assert ticket.status == "in_progress"
        assert ticket.replies[-1].author == "admin@mavera.com"

    def test_mark_all_notifications_read(self, seeded, staff_client):
        staff_client.post("/staff/notifications/read-all")
        assert Notification.query.filter_by(read=False).count() == 0


def test_duplicate_staff_email_rejected(seeded, staff_client):
    before = StaffUser.query.count()
    staff_client.post("/staff/users", data={
        "name": "Someone", "email": "fatima.ali@maverahall.com", "role": "support",
    })
    assert StaffUser.query.count() == before


class TestSettings:

    def test_invalid_rules_rejected(self, staff_client):
        form = {
            "min_guests": "600", "max_guests": "500", "min_notice_days": "30", "max_advance_days": "365",
            "cancellation_deadline_days": "14", "deposit_percentage": "0.3",
            "late_cancellation_fee_percentage": "0.1",
        }
        assert staff_client.post("/staff/settings", data=form).status_code == 400
        assert get_hall_profile().min_guests == 50

    def test_rules_saved(self, staff_client):
        form = {
            "min_guests": "20", "max_guests": "300", "min_notice_days": "7", "max_advance_days": "180",
            "cancellation_deadline_days": "10", "deposit_percentage": "0.5",
            "late_cancellation_fee_percentage": "0.2",
        }
        assert staff_client.post("/staff/settings", data=form).status_code == 302
        profile = get_hall_profile()
        assert (profile.min_guests, profile.max_guests, profile.deposit_percentage) == (20, 300, 0.5)


def test_csv_export(seeded, staff_client):
    response = staff_client.get("/staff/reports/export.csv")

    assert response.status_code == 200
    assert response.mimetype == "text/csv"
    assert "attachment" in response.headers["Content-Disposition"]
    lines = response.get_data(as_text=True).strip().splitlines()
    assert lines[0].startswith("reference,title,name,email")
    assert len(lines) == 1 + Booking.query.count()
