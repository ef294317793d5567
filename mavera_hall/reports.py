"""Aggregates for the staff dashboard, reports and analytics pages."""

from __future__ import annotations

import csv
import io
from collections import Counter, defaultdict
from datetime import date, datetime, timedelta
from typing import Dict, Iterable, List, Optional

from .bookings import day_bounds, overlapping_bookings
from .calendar_grid import month_start, shift_month
from .errors import with_error_handling
from .models import ActivityLog, Booking, Notification, Task, Ticket

REVENUE_STATUSES = ("confirmed", "completed")

CSV_COLUMNS = [
    "reference", "title", "name", "email", "phone", "event_type", "start_at", "end_at",
    "guest_count", "status", "total_amount", "cancellation_fee", "source",
]


def _bookings_between(start: Optional[date], end: Optional[date]) -> List[Booking]:
    q = Booking.query
    if start:
        q = q.filter(Booking.start_at >= day_bounds(start)[0])
    if end:
        q = q.filter(Booking.start_at < day_bounds(end)[1])
    return q.order_by(Booking.start_at.asc()).all()


def booking_report(start: Optional[date] = None, end: Optional[date] = None) -> Dict:
    bookings = _bookings_between(start, end)
    by_status = Counter(b.status for b in bookings)
    earning = [b for b in bookings if b.status in REVENUE_STATUSES]
    revenue = sum(b.total_amount or 0 for b in earning)
    fees = sum(b.cancellation_fee or 0 for b in bookings if b.status == "cancelled")

    by_type = defaultdict(lambda: {"count": 0, "revenue": 0.0})
    for b in bookings:
        by_type[b.event_type]["count"] += 1
        if b.status in REVENUE_STATUSES:
            by_type[b.event_type]["revenue"] += b.total_amount or 0

    return {
        "total": len(bookings),
        "by_status": {s: by_status.get(s, 0) for s in ("pending", "confirmed", "cancelled", "completed")},
        "revenue": round(revenue, 2),
        "cancellation_fees": round(fees, 2),
        "average_booking": round(revenue / len(earning), 2) if earning else 0,
        "guests": sum(b.guest_count or 0 for b in earning),
        "by_event_type": sorted(
            ({"type": k, **v} for k, v in by_type.items()),
            key=lambda row: (-row["count"], row["type"]),
        ),
    }


def _growth(current: float, previous: float) -> Optional[float]:
    if not previous:
        return None
    return round((current - previous) / previous * 100, 1)


def monthly_trend(months: int, today: date) -> List[Dict]:
    """Bookings and revenue for each of the last *months* months, oldest first."""
    first = shift_month(month_start(today), -(months - 1))
    bookings = _bookings_between(first, None)

    buckets = defaultdict(lambda: {"bookings": 0, "revenue": 0.0})
    for b in bookings:
        key = (b.start_at.year, b.start_at.month)
        if b.status != "cancelled":
            buckets[key]["bookings"] += 1
        if b.status in REVENUE_STATUSES:
            buckets[key]["revenue"] += b.total_amount or 0

    rows = []
    previous = None
    for i in range(months):
        month = shift_month(first, i)
        data = buckets[(month.year, month.month)]
        row = {
            "month": month,
            "bookings": data["bookings"],
            "revenue": round(data["revenue"], 2),
            "bookings_growth": _growth(data["bookings"], previous["bookings"]) if previous else None,
            "revenue_growth": _growth(data["revenue"], previous["revenue"]) if previous else None,
        }
        rows.append(row)
        previous = row
    return rows


def dashboard_stats(now: datetime) -> Dict:
    today = now.date()
    day_start, day_end = day_bounds(today)
    upcoming = (
        Booking.query.filter(Booking.start_at >= now, Booking.status.in_(("pending", "confirmed")))
        .order_by(Booking.start_at.asc())
        .limit(5)
        .all()
    )
    return {
        "todays_events": len(overlapping_bookings(day_start, day_end)),
        "active_bookings": Booking.query.filter(
            Booking.status.in_(("pending", "confirmed")), Booking.end_at >= now
        ).count(),
        "pending_bookings": Booking.query.filter_by(status="pending").count(),
        "pending_tasks": Task.query.filter(Task.status != "completed").count(),
        "overdue_tasks": Task.query.filter(Task.status != "completed", Task.due_date < today).count(),
        "open_tickets": Ticket.query.filter(Ticket.status.in_(("open", "in_progress"))).count(),
        "unread_notifications": Notification.query.filter_by(read=False).count(),
        "week_bookings": Booking.query.filter(
            Booking.start_at >= day_start,
            Booking.start_at < day_start + timedelta(days=7),
            Booking.status != "cancelled",
        ).count(),
        "upcoming": upcoming,
        "recent_activity": ActivityLog.query.order_by(ActivityLog.timestamp.desc()).limit(8).all(),
    }


@with_error_handling
def export_bookings_csv(bookings: Iterable[Booking]) -> str:
    buf = io.StringIO()
    writer = csv.DictWriter(buf, fieldnames=CSV_COLUMNS, extrasaction="ignore")
    writer.writeheader()
    for b in bookings:
        writer.writerow(b.to_dict())
    return buf.getvalue()


def bookings_for_export(start: Optional[date] = None, end: Optional[date] = None) -> List[Booking]:
    return _bookings_between(start, end)
