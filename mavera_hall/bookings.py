"""
Hall bookings: time handling, conflict checks and the booking lifecycle.

All datetimes are stored naive in the hall's local timezone.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Dict, Optional

import pytz
import structlog
from dateutil.parser import parse as dtparse
from flask import current_app

from .activity import log_activity, notify
from .calendar_grid import month_bounds
from .errors import (
    BookingConflictError,
    BookingValidationError,
    InvalidTransitionError,
    with_error_handling,
)
from .models import AvailabilityBlock, Booking, Customer, HallProfile, db
from .validation import validate_booking_form

logger = structlog.get_logger("bookings")

STATUS_TRANSITIONS = {
    "pending": {"confirmed", "cancelled"},
    "confirmed": {"completed", "cancelled"},
}


# ------- Time helpers -------

def app_timezone():
    return pytz.timezone(current_app.config.get("APP_TIMEZONE", "Asia/Riyadh"))


def local_now() -> datetime:
    """Current wall-clock time at the hall, naive, minute precision."""
    return datetime.now(app_timezone()).replace(tzinfo=None, second=0, microsecond=0)


def local_today() -> date:
    return local_now().date()


def parse_local(dt_str: str) -> datetime:
    """
    يستقبل نص تاريخ/وقت مثل '2025-09-24 14:30' أو '2025-09-24T14:30' ويعيد datetime (naive)
    بالتوقيت المحلي للقاعة، مقرّباً للدقيقة.
    """
    dt = dtparse(dt_str.replace("T", " "))
    return datetime(dt.year, dt.month, dt.day, dt.hour, dt.minute, 0)


def day_bounds(day: date):
    start = datetime(day.year, day.month, day.day)
    return start, start + timedelta(days=1)


# ------- Hall profile -------

def get_hall_profile() -> HallProfile:
    """The single hall profile row, created from configured defaults on first use."""
    profile = HallProfile.query.first()
    if profile is None:
        rules = current_app.config.get("BOOKING_RULES", {})
        profile = HallProfile(**rules)
        db.session.add(profile)
        db.session.commit()
    return profile


# ------- Conflicts -------

def find_conflict(start_at: datetime, end_at: datetime, exclude_id: Optional[int] = None):
    """
    التعارض: (start < existing.end) AND (end > existing.start)
    الحجوزات الملغاة لا تتعارض.
    """
    q = Booking.query.filter(
        Booking.start_at < end_at,
        Booking.end_at > start_at,
        Booking.status != "cancelled",
    )
    if exclude_id:
        q = q.filter(Booking.id != exclude_id)
    return q.order_by(Booking.start_at.asc()).first()


def has_conflict(start_at: datetime, end_at: datetime, exclude_id: Optional[int] = None) -> bool:
    return find_conflict(start_at, end_at, exclude_id) is not None


def blocked_day(day: date) -> Optional[AvailabilityBlock]:
    return AvailabilityBlock.query.filter_by(date=day).first()


def is_day_blocked(day: date) -> bool:
    return blocked_day(day) is not None


def blocks_within(start_at: datetime, end_at: datetime):
    """الأيام المحجوبة التي تمسّها الفترة (النهاية غير مشمولة)."""
    last = (end_at - timedelta(microseconds=1)).date()
    return (
        AvailabilityBlock.query.filter(AvailabilityBlock.date.between(start_at.date(), last))
        .order_by(AvailabilityBlock.date.asc())
        .all()
    )


def overlapping_bookings(start: datetime, end: datetime, include_cancelled: bool = False):
    q = Booking.query.filter(Booking.start_at < end, Booking.end_at > start)
    if not include_cancelled:
        q = q.filter(Booking.status != "cancelled")
    return q.order_by(Booking.start_at.asc()).all()


# ------- Lifecycle -------

def _upsert_customer(name: str, email: str, phone: str) -> Customer:
    customer = Customer.query.filter_by(email=email).first()
    if customer is None:
        customer = Customer(name=name, email=email, phone=phone or None)
        db.session.add(customer)
    else:
        customer.name = name or customer.name
        if phone:
            customer.phone = phone
    return customer


@with_error_handling
def create_booking(data, today: date, source: str = "website", enforce_notice: bool = True,
                   status: str = "pending") -> Booking:
    """
    Validate *data* and store a new booking.

    Raises BookingValidationError with per-field translation keys, or
    BookingConflictError when the slot overlaps another booking or a
    blocked day.
    """
    profile = get_hall_profile()
    result = validate_booking_form(data, today, profile, enforce_notice=enforce_notice)
    if not result.is_valid:
        raise BookingValidationError("errors.booking.invalid", field_errors=result.field_errors)

    c = result.cleaned
    start_at = datetime.combine(c["event_date"], c["start_time"])
    end_at = datetime.combine(c["event_date"], c["end_time"])

    # وقت نهاية قبل البداية يعني أن المناسبة تمتد بعد منتصف الليل
    if end_at < start_at:
        end_at += timedelta(days=1)
    if end_at == start_at:
        raise BookingValidationError(
            "errors.booking.invalid", field_errors={"end_time": "errors.booking.end_before_start"}
        )

    max_hours = current_app.config.get("MAX_BOOKING_HOURS", 12)
    if (end_at - start_at) > timedelta(hours=max_hours):
        raise BookingValidationError(
            "errors.booking.invalid", field_errors={"end_time": "errors.booking.too_long"}
        )

    if blocks_within(start_at, end_at):
        raise BookingConflictError("errors.booking.date_unavailable")

    existing = find_conflict(start_at, end_at)
    if existing is not None:
        raise BookingConflictError("errors.booking.conflict", conflicting_title=existing.title)

    customer = _upsert_customer(c["name"], c["email"], c["phone"])
    booking = Booking(
        customer=customer,
        title=c["title"] or f"{c['event_type'].title()} - {c['name']}",
        event_type=c["event_type"],
        start_at=start_at,
        end_at=end_at,
        guest_count=c["guest_count"],
        total_amount=c["total_amount"],
        special_requests=c["special_requests"],
        status=status if status in ("pending", "confirmed") else "pending",
        source=source,
    )
    db.session.add(booking)
    db.session.flush()

    notify(
        "booking",
        "New booking request" if source == "website" else "Booking created",
        f"{customer.name} - {booking.event_type} on {start_at:%Y-%m-%d %H:%M} ({booking.reference})",
        priority="high" if source == "website" else "normal",
    )
    log_activity(
        "booking_created",
        f"Booking {booking.reference} for {customer.name} on {start_at:%Y-%m-%d}",
    )
    db.session.commit()

    logger.info("booking_created", reference=booking.reference, source=source,
                start_at=start_at.isoformat(), guests=booking.guest_count)
    return booking


@with_error_handling
def cancel_booking(booking: Booking, today: date) -> float:
    """Cancel *booking*; returns the late-cancellation fee charged (0 if none)."""
    if not booking.is_active:
        raise InvalidTransitionError("errors.booking.invalid_transition")

    profile = get_hall_profile()
    days_left = (booking.start_at.date() - today).days
    fee = 0.0
    if days_left < profile.cancellation_deadline_days:
        fee = round((booking.total_amount or 0) * profile.late_cancellation_fee_percentage, 2)

    booking.status = "cancelled"
    booking.cancellation_fee = fee
    log_activity(
        "booking_cancelled",
        f"Booking {booking.reference} cancelled ({days_left} days before event, fee {fee})",
        severity="warning" if fee else "info",
    )
    db.session.commit()
    logger.info("booking_cancelled", reference=booking.reference, fee=fee, days_left=days_left)
    return fee


@with_error_handling
def change_status(booking: Booking, new_status: str, today: date) -> Booking:
    if new_status == "cancelled":
        cancel_booking(booking, today)
        return booking

    if new_status not in STATUS_TRANSITIONS.get(booking.status, set()):
        raise InvalidTransitionError(
            "errors.booking.invalid_transition",
            details={"from": booking.status, "to": new_status},
        )

    if new_status == "confirmed":
        conflict = find_conflict(booking.start_at, booking.end_at, exclude_id=booking.id)
        if conflict is not None and conflict.status == "confirmed":
            raise BookingConflictError("errors.booking.conflict", conflicting_title=conflict.title)

    old = booking.status
    booking.status = new_status
    log_activity("booking_updated", f"Booking {booking.reference}: {old} -> {new_status}")
    db.session.commit()
    logger.info("booking_status_changed", reference=booking.reference, old=old, new=new_status)
    return booking


@with_error_handling
def delete_booking(booking: Booking) -> None:
    reference = booking.reference
    db.session.delete(booking)
    log_activity("booking_deleted", f"Booking {reference} deleted", severity="warning")
    db.session.commit()


# ------- Summaries -------

def day_summary(day: date) -> Dict:
    """Bookings touching *day* and the hours they occupy inside it."""
    day_start, day_end = day_bounds(day)
    bookings = overlapping_bookings(day_start, day_end)

    total_minutes = 0
    for b in bookings:
        # قص للحدود داخل اليوم لقياس أدق
        s = max(b.start_at, day_start)
        e = min(b.end_at, day_end)
        total_minutes += max(0, int((e - s).total_seconds() // 60))

    return {
        "date": day,
        "bookings": bookings,
        "todays_count": len(bookings),
        "hours_booked": round(total_minutes / 60, 2),
    }


def month_availability(month: date) -> Dict[date, Dict]:
    """Status per day of *month*: available, booked, unavailable or maintenance."""
    first, next_first = month_bounds(month)
    start, end = day_bounds(first)[0], day_bounds(next_first)[0]

    blocks = {
        b.date: b
        for b in AvailabilityBlock.query.filter(
            AvailabilityBlock.date >= first, AvailabilityBlock.date < next_first
        )
    }
    bookings = overlapping_bookings(start, end)

    days = {}
    current = first
    while current < next_first:
        day_start, day_end = day_bounds(current)
        on_day = [b for b in bookings if b.start_at < day_end and b.end_at > day_start]
        if current in blocks:
            status, reason = blocks[current].status, blocks[current].reason
        elif on_day:
            status, reason = "booked", ", ".join(b.title for b in on_day)
        else:
            status, reason = "available", ""
        days[current] = {"status": status, "reason": reason, "bookings": on_day}
        current += timedelta(days=1)
    return days
