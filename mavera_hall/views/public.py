"""Public marketing site and booking requests."""

from __future__ import annotations

import structlog
from flask import (
    Blueprint,
    abort,
    current_app,
    flash,
    g,
    redirect,
    render_template,
    request,
    url_for,
)

from ..activity import log_activity, notify
from ..auth import is_safe_redirect
from ..bookings import create_booking, get_hall_profile, local_today, month_availability
from ..calendar_grid import month_weeks, parse_month, shift_month, weekday_names
from ..errors import BookingConflictError, BookingValidationError
from ..i18n import LANGUAGE_COOKIE, SUPPORTED_LANGUAGES
from ..models import Announcement, Booking, ContentPage, Faq, GalleryImage, Ticket, db
from ..validation import EVENT_TYPES, validate_contact_form
from . import tr

logger = structlog.get_logger("public")

bp = Blueprint("public", __name__)

SERVICE_KEYS = ["weddings", "corporate", "private", "cultural", "graduation", "exhibitions"]
TESTIMONIAL_KEYS = ["wedding", "conference", "graduation"]
LANGUAGE_COOKIE_MAX_AGE = 60 * 60 * 24 * 365


def _published_page(slug: str):
    page = ContentPage.query.filter_by(slug=slug, is_published=True).first()
    if page is not None:
        page.views = (page.views or 0) + 1
        db.session.commit()
    return page


@bp.get("/")
def home():
    today = local_today()
    announcements = (
        Announcement.query.filter(Announcement.status == "published")
        .filter((Announcement.publish_date == None) | (Announcement.publish_date <= today))  # noqa: E711
        .order_by(Announcement.publish_date.desc())
        .limit(3)
        .all()
    )
    featured = GalleryImage.query.filter_by(featured=True).limit(6).all()
    return render_template(
        "public/home.html",
        announcements=announcements,
        featured=featured,
        service_keys=SERVICE_KEYS,
        testimonial_keys=TESTIMONIAL_KEYS,
    )


@bp.get("/about")
def about():
    return render_template("public/about.html", page=_published_page("about"))


@bp.get("/services")
def services():
    return render_template("public/services.html", service_keys=SERVICE_KEYS)


@bp.get("/gallery")
def gallery():
    category = request.args.get("category", "")
    q = GalleryImage.query
    if category:
        q = q.filter_by(category=category)
    images = q.order_by(GalleryImage.featured.desc(), GalleryImage.uploaded_at.desc()).all()
    return render_template("public/gallery.html", images=images, category=category)


@bp.get("/hall-details")
def hall_details():
    return render_template("public/hall_details.html", hall=get_hall_profile())


@bp.get("/faqs")
def faqs():
    items = Faq.query.filter_by(is_published=True).order_by(Faq.id.asc()).all()
    for faq in items:
        faq.views = (faq.views or 0) + 1
    db.session.commit()
    return render_template("public/faqs.html", faqs=items)


@bp.get("/privacy")
def privacy():
    return render_template("public/legal.html", page=_published_page("privacy"), section="privacy")


@bp.get("/terms")
def terms():
    return render_template("public/legal.html", page=_published_page("terms"), section="terms")


# ------- Contact -------

@bp.route("/contact", methods=["GET", "POST"])
def contact():
    errors, form = {}, {}
    if request.method == "POST":
        form = request.form
        result = validate_contact_form(form)
        if result.is_valid:
            c = result.cleaned
            ticket = Ticket(
                customer_name=c["name"],
                email=c["email"],
                phone=c["phone"],
                subject=c["subject"],
                message=c["message"],
                category="general",
            )
            db.session.add(ticket)
            notify("support", "New contact message", f"{c['name']}: {c['subject']}")
            log_activity("ticket_created", f"Contact form message from {c['email']}", user=c["email"])
            db.session.commit()
            logger.info("contact_message_received", email=c["email"])
            flash(tr("contact.success"), "ok")
            return redirect(url_for("public.contact"))
        errors = result.field_errors
    return render_template("public/contact.html", hall=get_hall_profile(), errors=errors, form=form)


# ------- Booking -------

def _availability_context(month_raw):
    today = local_today()
    month = parse_month(month_raw, today)
    return {
        "month": month,
        "prev_month": shift_month(month, -1),
        "next_month": shift_month(month, 1),
        "weeks": month_weeks(month),
        "weekdays": weekday_names(request_lang()),
        "availability": month_availability(month),
        "today": today,
    }


def request_lang():
    return g.get("lang") or current_app.config["DEFAULT_LANGUAGE"]


@bp.route("/booking", methods=["GET", "POST"])
def booking():
    errors, form = {}, {}
    status = 200
    if request.method == "POST":
        form = request.form
        try:
            created = create_booking(form, local_today(), source="website")
        except BookingValidationError as e:
            errors = e.field_errors
            status = 400
        except BookingConflictError as e:
            flash(tr(e.message, title=e.conflicting_title or ""), "err")
            status = 409
        else:
            return redirect(url_for("public.booking_confirmation", reference=created.reference))

    ctx = _availability_context(request.args.get("month") or form.get("event_date", "")[:7])
    return render_template(
        "public/booking.html",
        errors=errors,
        form=form,
        event_types=EVENT_TYPES,
        hall=get_hall_profile(),
        **ctx,
    ), status


@bp.get("/booking-confirmation/<reference>")
def booking_confirmation(reference):
    booking = Booking.query.filter_by(reference=reference).first_or_404()
    profile = get_hall_profile()
    return render_template(
        "public/booking_confirmation.html",
        booking=booking,
        deposit=booking.deposit_due(profile.deposit_percentage),
        hall=profile,
    )


@bp.route("/my-booking", methods=["GET", "POST"])
def booking_lookup():
    """Read-only status page for a visitor's own booking (reference + email)."""
    found, error, form = None, None, {}
    status = 200
    if request.method == "POST":
        form = request.form
        reference = (form.get("reference") or "").strip().upper()
        email = (form.get("email") or "").strip().lower()
        booking = Booking.query.filter_by(reference=reference).first() if reference else None
        if booking is not None and booking.customer.email.lower() == email:
            found = booking
        else:
            # same answer for a wrong reference or a wrong email
            error = "booking.lookup.not_found"
            status = 404
            logger.info("booking_lookup_failed", reference=reference)
    return render_template(
        "public/booking_lookup.html",
        booking=found,
        error=error,
        form=form,
        hall=get_hall_profile(),
    ), status


# ------- Language -------

@bp.get("/language/<code>")
def set_language(code):
    if code not in SUPPORTED_LANGUAGES:
        abort(404)
    target = request.args.get("next") or request.referrer or ""
    if target.startswith(request.host_url):
        target = "/" + target[len(request.host_url):]
    if not is_safe_redirect(target):
        target = url_for("public.home")
    response = redirect(target)
    response.set_cookie(LANGUAGE_COOKIE, code, max_age=LANGUAGE_COOKIE_MAX_AGE, samesite="Lax")
    logger.info("language_changed", language=code)
    return response
