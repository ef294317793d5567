"""Flask CLI commands: database setup and the demo dataset."""

from __future__ import annotations

from datetime import datetime, time, timedelta

import click
from flask import Flask

from .bookings import get_hall_profile, local_today
from .errors import with_error_handling
from .logging import get_logger
from .models import (
    ActivityLog,
    Announcement,
    AvailabilityBlock,
    Booking,
    CalendarEvent,
    ContentPage,
    Customer,
    Faq,
    GalleryImage,
    Notification,
    StaffUser,
    Task,
    Ticket,
    TicketReply,
    db,
)

logger = get_logger("cli")

SEED_MODELS = [
    TicketReply, Ticket, Booking, Customer, Task, Announcement, Faq, GalleryImage,
    ContentPage, StaffUser, Notification, ActivityLog, CalendarEvent, AvailabilityBlock,
]


def _at(day, hh, mm=0):
    return datetime.combine(day, time(hh, mm))


@with_error_handling
def seed_demo_data(reset: bool = False) -> int:
    """Load the demo dataset; returns the number of rows added (0 if already seeded)."""
    if reset:
        for model in SEED_MODELS:
            model.query.delete()
        db.session.commit()
    elif Booking.query.first() is not None:
        return 0

    today = local_today()

    def d(days):
        return today + timedelta(days=days)

    profile = get_hall_profile()
    profile.name = "Mavera Hall"
    profile.capacity = 500
    profile.description = "A luxurious and modern event hall for weddings, corporate events and special celebrations."
    profile.address = "King Fahd Road, Riyadh, Saudi Arabia"
    profile.phone = "+966 11 234 5678"
    profile.email = "info@maverahall.com"
    profile.amenities = "\n".join([
        "Professional sound system", "LED lighting", "Catering kitchen",
        "Parking for 200 cars", "WiFi throughout", "Air conditioning", "Stage and podium",
    ])

    sarah = Customer(name="Sarah Johnson", email="sarah.johnson@email.com", phone="+966 50 123 4567",
                     preferences="Wedding, Catering, Decoration", notes="Prefers weekend bookings")
    techcorp = Customer(name="TechCorp Events", email="events@techcorp.com", phone="+966 11 234 5678",
                        preferences="Corporate, AV Equipment", notes="Regular corporate client")
    ahmed = Customer(name="Ahmed Al-Rashid", email="ahmed.rashid@email.com", phone="+966 55 987 6543",
                     preferences="Birthday, Music")
    fatima = Customer(name="Fatima Al-Zahra", email="fatima.zahra@email.com", phone="+966 54 321 0987",
                      status="inactive", preferences="Wedding, Photography")

    rows = [
        sarah, techcorp, ahmed, fatima,
        Booking(customer=sarah, title="Sarah & Michael Wedding", event_type="wedding",
                start_at=_at(d(40), 14), end_at=_at(d(40), 23), guest_count=150,
                status="confirmed", total_amount=8000),
        Booking(customer=techcorp, title="TechCorp Annual Meeting", event_type="corporate",
                start_at=_at(d(45), 9), end_at=_at(d(45), 17), guest_count=80,
                status="pending", total_amount=5000),
        Booking(customer=ahmed, title="Ahmed's Birthday", event_type="birthday",
                start_at=_at(d(50), 18), end_at=_at(d(50), 23), guest_count=60,
                status="confirmed", total_amount=3000),
        Booking(customer=fatima, title="Fatima's Wedding", event_type="wedding",
                start_at=_at(d(-60), 16), end_at=_at(d(-60), 23), guest_count=200,
                status="completed", total_amount=4000, source="staff"),
        Task(title="Review upcoming wedding booking", description="Check all details and confirm with client",
             priority="high", due_date=d(3), assigned_to="Ahmed Hassan", category="booking"),
        Task(title="Update hall availability calendar", description="Mark unavailable dates for maintenance",
             priority="medium", status="in-progress", due_date=d(1), assigned_to="Ahmed Hassan",
             category="operations"),
        Task(title="Respond to catering inquiry", description="Customer inquiry about catering options",
             priority="high", due_date=d(-1), assigned_to="Fatima Ali", category="support"),
        Task(title="Upload new gallery photos", description="Add photos from recent corporate event",
             priority="low", status="completed", due_date=d(-3), assigned_to="Fatima Ali",
             category="content"),
        Announcement(title="Maintenance window", content="The hall will be closed for scheduled maintenance.",
                     type="maintenance", priority="high", status="published", publish_date=d(-2)),
        Announcement(title="New catering menu available",
                     content="We have updated our catering menu with new seasonal dishes.",
                     type="service", status="published", publish_date=d(-5)),
        Announcement(title="Special wedding package",
                     content="20% discount on wedding packages booked this season.",
                     type="promotion", priority="high", publish_date=d(1)),
        Faq(question="What is the maximum capacity of the hall?",
            answer="Our main hall can accommodate up to 500 guests.", category="capacity"),
        Faq(question="Do you provide catering services?",
            answer="Yes, we offer full catering including special dietary requirements.", category="catering"),
        Faq(question="How far in advance should I book?",
            answer="Bookings open between 30 and 365 days before the event.", category="booking"),
        GalleryImage(title="Wedding reception setup", category="events", featured=True,
                     url="https://images.unsplash.com/photo-1519167758481-83f550bb49b3",
                     description="Wedding reception with elegant decorations"),
        GalleryImage(title="Corporate event hall", category="hall",
                     url="https://images.unsplash.com/photo-1540575467063-178a50c2df87",
                     description="Hall arranged for a conference"),
        ContentPage(slug="about", title="About Us",
                    content="Mavera Hall has hosted weddings, conferences and celebrations for over ten years.",
                    meta_description="About Mavera Hall"),
        ContentPage(slug="privacy", title="Privacy Policy", is_published=False,
                    content="We only use your contact details to handle your booking."),
        StaffUser(name="Ahmed Hassan", email="ahmed.hassan@maverahall.com", role="admin",
                  department="Management"),
        StaffUser(name="Fatima Ali", email="fatima.ali@maverahall.com", role="support",
                  department="Customer Service"),
        Ticket(customer_name="Sarah Johnson", email="sarah.johnson@email.com", phone="+966 50 123 4567",
               subject="Wedding booking inquiry", priority="high", category="booking",
               message="I would like to know more about your wedding packages.", assigned_to="Support Team"),
        Ticket(customer_name="TechCorp Events", email="events@techcorp.com",
               subject="Corporate event pricing", status="in_progress", category="pricing",
               message="We need pricing for a corporate event for 80 people.", assigned_to="Ahmed Hassan"),
        CalendarEvent(title="Staff meeting", type="meeting", date=d(2),
                      start_time=time(10), end_time=time(11), status="confirmed"),
        CalendarEvent(title="Hall maintenance", type="maintenance", date=d(10),
                      start_time=time(8), end_time=time(16)),
        AvailabilityBlock(date=d(10), status="maintenance", reason="Scheduled maintenance and cleaning"),
        Notification(type="booking", title="New booking request", priority="high",
                     message="TechCorp Events requested a corporate booking"),
        Notification(type="support", title="Support ticket assigned",
                     message="Corporate event pricing ticket assigned to Ahmed Hassan", read=True),
    ]
    db.session.add_all(rows)
    db.session.add(ActivityLog(user="system", action="seed", description="Demo dataset loaded"))
    db.session.commit()
    logger.info("demo_data_seeded", rows=len(rows))
    return len(rows)


def register_commands(app: Flask) -> None:

    @app.cli.command("init-db")
    def init_db_command():
        """Create all tables."""
        db.create_all()
        get_hall_profile()
        click.echo("Database ready.")

    @app.cli.command("seed")
    @click.option("--reset", is_flag=True, help="Delete existing rows first.")
    def seed_command(reset):
        """Load the demo dataset."""
        added = seed_demo_data(reset=reset)
        if added:
            click.echo(f"Seeded {added} rows.")
        else:
            click.echo("Database already has bookings; use --reset to reload.")
