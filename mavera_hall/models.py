"""Database models (Flask-SQLAlchemy)."""

from __future__ import annotations

import secrets
from datetime import datetime

from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()

BOOKING_STATUSES = ("pending", "confirmed", "cancelled", "completed")
TASK_STATUSES = ("pending", "in-progress", "completed")
TASK_PRIORITIES = ("high", "medium", "low")
TASK_CATEGORIES = ("booking", "operations", "support", "content")
TICKET_STATUSES = ("open", "in_progress", "resolved", "closed")
NORMAL_PRIORITIES = ("high", "normal", "low")
ANNOUNCEMENT_TYPES = ("general", "maintenance", "service", "promotion")
CALENDAR_EVENT_TYPES = ("maintenance", "meeting", "other")
BLOCK_STATUSES = ("unavailable", "maintenance")
GALLERY_CATEGORIES = ("events", "hall", "decor", "catering")

USER_ROLES = {
    "visitor": {"level": 0, "label": "Visitor"},
    "client": {"level": 1, "label": "Client"},
    "support": {"level": 2, "label": "Support Staff"},
    "admin": {"level": 3, "label": "Administrator"},
    "superadmin": {"level": 4, "label": "Super Administrator"},
}
STAFF_ROLES = ("support", "admin", "superadmin")


def _fmt(dt, fmt="%Y-%m-%d %H:%M"):
    return dt.strftime(fmt) if dt else None


def new_reference() -> str:
    return "MH-" + secrets.token_hex(4).upper()


# ------- Customers & bookings -------

class Customer(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False)
    email = db.Column(db.String(160), unique=True, nullable=False)
    phone = db.Column(db.String(40))
    status = db.Column(db.String(20), nullable=False, default="active")
    preferences = db.Column(db.String(255), default="")  # comma separated
    notes = db.Column(db.Text, default="")
    created_at = db.Column(db.DateTime, default=datetime.now)

    bookings = db.relationship(
        "Booking", back_populates="customer", lazy=True, order_by="Booking.start_at.desc()"
    )

    @property
    def preference_list(self):
        return [p.strip() for p in (self.preferences or "").split(",") if p.strip()]

    @property
    def total_bookings(self) -> int:
        return len(self.bookings)

    @property
    def total_spent(self) -> float:
        return sum(b.total_amount or 0 for b in self.bookings if b.status != "cancelled")

    @property
    def last_booking(self):
        return self.bookings[0].start_at.date() if self.bookings else None

    def to_dict(self):
        return dict(
            id=self.id,
            name=self.name,
            email=self.email,
            phone=self.phone or "",
            status=self.status,
            preferences=self.preference_list,
            notes=self.notes or "",
            total_bookings=self.total_bookings,
            total_spent=self.total_spent,
            last_booking=self.last_booking.isoformat() if self.last_booking else None,
        )


class Booking(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    reference = db.Column(db.String(16), unique=True, nullable=False, default=new_reference)
    customer_id = db.Column(db.Integer, db.ForeignKey("customer.id"), nullable=False)
    title = db.Column(db.String(160), nullable=False)
    event_type = db.Column(db.String(30), nullable=False, default="other")
    start_at = db.Column(db.DateTime, nullable=False)  # naive, hall local time
    end_at = db.Column(db.DateTime, nullable=False)
    guest_count = db.Column(db.Integer, nullable=False, default=0)
    status = db.Column(db.String(20), nullable=False, default="pending")
    total_amount = db.Column(db.Float, nullable=False, default=0.0)
    cancellation_fee = db.Column(db.Float, nullable=False, default=0.0)
    special_requests = db.Column(db.Text, default="")
    source = db.Column(db.String(20), nullable=False, default="website")
    created_at = db.Column(db.DateTime, default=datetime.now)

    customer = db.relationship("Customer", back_populates="bookings")

    @property
    def duration_hours(self) -> float:
        return round((self.end_at - self.start_at).total_seconds() / 3600, 2)

    def deposit_due(self, percentage: float) -> float:
        return round((self.total_amount or 0) * percentage, 2)

    @property
    def is_active(self) -> bool:
        return self.status in ("pending", "confirmed")

    def to_dict(self):
        return dict(
            id=self.id,
            reference=self.reference,
            title=self.title,
            name=self.customer.name if self.customer else "",
            email=self.customer.email if self.customer else "",
            phone=(self.customer.phone or "") if self.customer else "",
            event_type=self.event_type,
            start_at=_fmt(self.start_at),
            end_at=_fmt(self.end_at),
            guest_count=self.guest_count,
            status=self.status,
            total_amount=self.total_amount,
            cancellation_fee=self.cancellation_fee,
            special_requests=self.special_requests or "",
            source=self.source,
        )


# ------- Staff work -------

class Task(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=False)
    priority = db.Column(db.String(10), nullable=False, default="medium")
    status = db.Column(db.String(20), nullable=False, default="pending")
    due_date = db.Column(db.Date, nullable=False)
    assigned_to = db.Column(db.String(120), default="")
    category = db.Column(db.String(30), nullable=False, default="operations")
    created_at = db.Column(db.DateTime, default=datetime.now)

    def is_overdue(self, today) -> bool:
        return self.status != "completed" and self.due_date < today

    def to_dict(self):
        return dict(
            id=self.id,
            title=self.title,
            description=self.description,
            priority=self.priority,
            status=self.status,
            due_date=self.due_date.isoformat(),
            assigned_to=self.assigned_to or "",
            category=self.category,
        )


class Ticket(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    customer_name = db.Column(db.String(120), nullable=False)
    email = db.Column(db.String(160), nullable=False)
    phone = db.Column(db.String(40), default="")
    subject = db.Column(db.String(200), nullable=False)
    message = db.Column(db.Text, nullable=False)
    status = db.Column(db.String(20), nullable=False, default="open")
    priority = db.Column(db.String(10), nullable=False, default="normal")
    category = db.Column(db.String(30), nullable=False, default="general")
    assigned_to = db.Column(db.String(120), default="")
    created_at = db.Column(db.DateTime, default=datetime.now)
    updated_at = db.Column(db.DateTime, default=datetime.now, onupdate=datetime.now)

    replies = db.relationship(
        "TicketReply", backref="ticket", lazy=True,
        order_by="TicketReply.created_at", cascade="all, delete-orphan",
    )

    @property
    def number(self) -> str:
        return f"ST-{self.created_at.year if self.created_at else datetime.now().year}-{self.id:03d}"


class TicketReply(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    ticket_id = db.Column(db.Integer, db.ForeignKey("ticket.id"), nullable=False)
    author = db.Column(db.String(120), nullable=False)
    body = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.now)


class StaffUser(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False)
    email = db.Column(db.String(160), unique=True, nullable=False)
    role = db.Column(db.String(20), nullable=False, default="support")
    status = db.Column(db.String(20), nullable=False, default="active")
    department = db.Column(db.String(80), default="")
    last_login = db.Column(db.DateTime)

    @property
    def role_label(self) -> str:
        return USER_ROLES.get(self.role, {}).get("label", self.role)


class Notification(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    type = db.Column(db.String(20), nullable=False, default="system")
    title = db.Column(db.String(200), nullable=False)
    message = db.Column(db.Text, nullable=False)
    priority = db.Column(db.String(10), nullable=False, default="normal")
    read = db.Column(db.Boolean, nullable=False, default=False)
    created_at = db.Column(db.DateTime, default=datetime.now)


class ActivityLog(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    user = db.Column(db.String(160), default="system")
    action = db.Column(db.String(60), nullable=False)
    description = db.Column(db.Text, default="")
    severity = db.Column(db.String(10), nullable=False, default="info")
    ip_address = db.Column(db.String(60), default="")
    user_agent = db.Column(db.String(255), default="")
    timestamp = db.Column(db.DateTime, default=datetime.now)


# ------- Calendar -------

class CalendarEvent(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(160), nullable=False)
    type = db.Column(db.String(20), nullable=False, default="other")
    date = db.Column(db.Date, nullable=False)
    start_time = db.Column(db.Time)
    end_time = db.Column(db.Time)
    status = db.Column(db.String(20), nullable=False, default="scheduled")
    description = db.Column(db.Text, default="")


class AvailabilityBlock(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    date = db.Column(db.Date, unique=True, nullable=False)
    status = db.Column(db.String(20), nullable=False, default="unavailable")
    reason = db.Column(db.String(255), default="")


# ------- Content -------

class Announcement(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False)
    content = db.Column(db.Text, nullable=False)
    type = db.Column(db.String(20), nullable=False, default="general")
    priority = db.Column(db.String(10), nullable=False, default="normal")
    status = db.Column(db.String(20), nullable=False, default="draft")
    publish_date = db.Column(db.Date)


class Faq(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    question = db.Column(db.String(255), nullable=False)
    answer = db.Column(db.Text, nullable=False)
    category = db.Column(db.String(40), default="general")
    is_published = db.Column(db.Boolean, nullable=False, default=True)
    views = db.Column(db.Integer, nullable=False, default=0)


class GalleryImage(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(160), nullable=False)
    category = db.Column(db.String(30), nullable=False, default="events")
    url = db.Column(db.String(500), nullable=False)
    description = db.Column(db.Text, default="")
    featured = db.Column(db.Boolean, nullable=False, default=False)
    uploaded_at = db.Column(db.DateTime, default=datetime.now)


class ContentPage(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    slug = db.Column(db.String(60), unique=True, nullable=False)
    title = db.Column(db.String(200), nullable=False)
    content = db.Column(db.Text, default="")
    meta_description = db.Column(db.String(300), default="")
    is_published = db.Column(db.Boolean, nullable=False, default=True)
    views = db.Column(db.Integer, nullable=False, default=0)
    updated_at = db.Column(db.DateTime, default=datetime.now, onupdate=datetime.now)


class HallProfile(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False, default="Mavera Hall")
    capacity = db.Column(db.Integer, nullable=False, default=500)
    description = db.Column(db.Text, default="")
    address = db.Column(db.String(255), default="")
    phone = db.Column(db.String(40), default="")
    email = db.Column(db.String(160), default="")
    amenities = db.Column(db.Text, default="")  # one per line
    currency = db.Column(db.String(8), nullable=False, default="SAR")

    min_guests = db.Column(db.Integer, nullable=False, default=50)
    max_guests = db.Column(db.Integer, nullable=False, default=500)
    min_notice_days = db.Column(db.Integer, nullable=False, default=30)
    max_advance_days = db.Column(db.Integer, nullable=False, default=365)
    cancellation_deadline_days = db.Column(db.Integer, nullable=False, default=14)
    deposit_percentage = db.Column(db.Float, nullable=False, default=0.30)
    late_cancellation_fee_percentage = db.Column(db.Float, nullable=False, default=0.10)

    @property
    def amenity_list(self):
        return [a.strip() for a in (self.amenities or "").splitlines() if a.strip()]
