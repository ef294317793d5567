"""Dashboard numbers, booking reports and CSV export."""

from mavera_hall.bookings import local_now, local_today
from mavera_hall.calendar_grid import month_start
from mavera_hall.models import Booking
from mavera_hall.reports import (
    CSV_COLUMNS,
    _growth,
    booking_report,
    dashboard_stats,
    export_bookings_csv,
    monthly_trend,
)


class TestBookingReport:

    def test_totals_for_demo_data(self, seeded):
        report = booking_report()

        assert report["total"] == 4
        assert report["by_status"] == {"pending": 1, "confirmed": 2, "cancelled": 0, "completed": 1}
        assert report["revenue"] == 15000
        assert report["average_booking"] == 5000
        assert report["guests"] == 410
        assert report["by_event_type"][0] == {"type": "wedding", "count": 2, "revenue": 12000}

    def test_cancellation_fees_counted_separately(self, seeded):
        booking = Booking.query.filter_by(status="pending").first()
        booking.status = "cancelled"
        booking.cancellation_fee = 500

        report = booking_report()
        assert report["cancellation_fees"] == 500
        assert report["revenue"] == 15000

    def test_empty(self, app):
        report = booking_report()
        assert report["total"] == 0
        assert report["average_booking"] == 0


def test_growth():
    assert _growth(150, 100) == 50.0
    assert _growth(50, 100) == -50.0
    assert _growth(10, 0) is None


def test_monthly_trend_shape(seeded):
    rows = monthly_trend(6, local_today())

    assert len(rows) == 6
    assert rows[-1]["month"] == month_start(local_today())
    assert rows[0]["bookings_growth"] is None
    assert sum(row["revenue"] for row in rows) == 4000


def test_dashboard_stats(seeded):
    stats = dashboard_stats(local_now())

    assert stats["pending_bookings"] == 1
    assert stats["active_bookings"] == 3
    assert stats["pending_tasks"] == 3
    assert stats["overdue_tasks"] == 1
    assert stats["open_tickets"] == 2
    assert stats["unread_notifications"] == 1
    assert len(stats["upcoming"]) == 3


def test_csv_export(seeded):
    text = export_bookings_csv(Booking.query.order_by(Booking.start_at).all())
    lines = text.strip().splitlines()

    assert lines[0] == ",".join(CSV_COLUMNS)
    assert len(lines) == 5
    assert "Fatima's Wedding" in lines[1]
