"""Staff console. Every route here needs a signed-in staff session."""

from __future__ import annotations

from datetime import timedelta

import structlog
from flask import (
    Blueprint,
    Response,
    current_app,
    flash,
    g,
    redirect,
    render_template,
    request,
    session,
    url_for,
)

from ..activity import log_activity
from ..auth import is_logged_in
from ..bookings import (
    cancel_booking,
    change_status,
    create_booking,
    day_bounds,
    delete_booking,
    get_hall_profile,
    local_now,
    local_today,
    month_availability,
    overlapping_bookings,
)
from ..calendar_grid import group_by_day, month_bounds, month_weeks, parse_month, shift_month, weekday_names
from ..errors import BookingConflictError, BookingValidationError, MaveraHallError
from ..models import (
    ActivityLog,
    ANNOUNCEMENT_TYPES,
    Announcement,
    AvailabilityBlock,
    BLOCK_STATUSES,
    BOOKING_STATUSES,
    Booking,
    CALENDAR_EVENT_TYPES,
    CalendarEvent,
    ContentPage,
    Customer,
    Faq,
    GALLERY_CATEGORIES,
    GalleryImage,
    NORMAL_PRIORITIES,
    Notification,
    STAFF_ROLES,
    StaffUser,
    TASK_CATEGORIES,
    TASK_PRIORITIES,
    TASK_STATUSES,
    TICKET_STATUSES,
    Task,
    Ticket,
    TicketReply,
    USER_ROLES,
    db,
)
from ..reports import bookings_for_export, booking_report, dashboard_stats, export_bookings_csv, monthly_trend
from ..validation import (
    EVENT_TYPES,
    parse_amount,
    parse_date_str,
    parse_int,
    parse_time_str,
    validate_email_address,
    validate_required_text,
)
from . import tr

logger = structlog.get_logger("staff")

bp = Blueprint("staff", __name__, url_prefix="/staff")

MAX_BLOCK_RANGE_DAYS = 92


@bp.before_request
def _require_login():
    if not is_logged_in():
        return redirect(url_for("auth.login", next=request.full_path.rstrip("?")))
    return None


def _commit(action: str, description: str, severity: str = "info") -> None:
    log_activity(action, description, severity=severity)
    db.session.commit()


def _month_context(month):
    return {
        "month": month,
        "prev_month": shift_month(month, -1),
        "next_month": shift_month(month, 1),
        "weeks": month_weeks(month),
        "weekdays": weekday_names(g.get("lang") or current_app.config["DEFAULT_LANGUAGE"]),
        "today": local_today(),
    }


# ------- Dashboard -------

@bp.get("")
def dashboard():
    stats = dashboard_stats(local_now())
    return render_template("staff/dashboard.html", stats=stats)


# ------- Bookings -------

@bp.get("/bookings")
def bookings():
    status = request.args.get("status", "")
    search = (request.args.get("q") or "").strip()

    q = Booking.query.join(Customer)
    if status in BOOKING_STATUSES:
        q = q.filter(Booking.status == status)
    if search:
        like = f"%{search}%"
        q = q.filter(
            Customer.name.ilike(like)
            | Customer.email.ilike(like)
            | Booking.reference.ilike(like)
            | Booking.title.ilike(like)
        )
    rows = q.order_by(Booking.start_at.desc()).all()
    return render_template(
        "staff/bookings.html", bookings=rows, status=status, search=search, statuses=BOOKING_STATUSES
    )


@bp.route("/bookings/new", methods=["GET", "POST"])
def new_booking():
    errors, form = {}, {}
    if request.method == "POST":
        form = request.form
        try:
            booking = create_booking(
                form,
                local_today(),
                source="staff",
                enforce_notice=False,
                status=form.get("status", "pending"),
            )
        except BookingValidationError as e:
            errors = e.field_errors
        except BookingConflictError as e:
            flash(tr(e.message, title=e.conflicting_title or ""), "err")
        else:
            flash(tr("flash.booking_created", reference=booking.reference), "ok")
            return redirect(url_for("staff.booking_detail", booking_id=booking.id))
    return render_template("staff/booking_form.html", errors=errors, form=form, event_types=EVENT_TYPES)


@bp.get("/bookings/<int:booking_id>")
def booking_detail(booking_id):
    booking = db.get_or_404(Booking, booking_id)
    profile = get_hall_profile()
    return render_template(
        "staff/booking_detail.html",
        booking=booking,
        deposit=booking.deposit_due(profile.deposit_percentage),
        next_statuses=[s for s in BOOKING_STATUSES if s != booking.status],
    )


@bp.post("/bookings/<int:booking_id>/status")
def booking_status(booking_id):
    booking = db.get_or_404(Booking, booking_id)
    new_status = request.form.get("status", "")
    try:
        change_status(booking, new_status, local_today())
    except BookingConflictError as e:
        flash(tr(e.message, title=e.conflicting_title or ""), "err")
    except MaveraHallError as e:
        flash(tr(e.message), "err")
    else:
        flash(tr("flash.booking_status", reference=booking.reference, status=tr(f"status.{new_status}")), "ok")
    return redirect(url_for("staff.booking_detail", booking_id=booking.id))


@bp.post("/bookings/<int:booking_id>/cancel")
def booking_cancel(booking_id):
    booking = db.get_or_404(Booking, booking_id)
    try:
        fee = cancel_booking(booking, local_today())
    except MaveraHallError as e:
        flash(tr(e.message), "err")
    else:
        if fee:
            flash(tr("flash.booking_cancelled_fee", reference=booking.reference, fee=f"{fee:,.2f}"), "ok")
        else:
            flash(tr("flash.booking_cancelled", reference=booking.reference), "ok")
    return redirect(url_for("staff.booking_detail", booking_id=booking.id))


@bp.post("/bookings/<int:booking_id>/delete")
def booking_delete(booking_id):
    booking = db.get_or_404(Booking, booking_id)
    reference = booking.reference
    delete_booking(booking)
    flash(tr("flash.booking_deleted", reference=reference), "ok")
    return redirect(url_for("staff.bookings"))


@bp.get("/bookings/calendar")
def booking_calendar():
    month = parse_month(request.args.get("month"), local_today())
    first, next_first = month_bounds(month)
    rows = overlapping_bookings(day_bounds(first)[0], day_bounds(next_first)[0])
    return render_template(
        "staff/booking_calendar.html",
        by_day=group_by_day(rows, lambda b: b.start_at, end=lambda b: b.end_at),
        **_month_context(month),
    )


# ------- Calendar events -------

@bp.get("/calendar")
def calendar():
    month = parse_month(request.args.get("month"), local_today())
    first, next_first = month_bounds(month)
    rows = overlapping_bookings(day_bounds(first)[0], day_bounds(next_first)[0])
    events = (
        CalendarEvent.query.filter(CalendarEvent.date >= first, CalendarEvent.date < next_first)
        .order_by(CalendarEvent.date.asc(), CalendarEvent.start_time.asc())
        .all()
    )
    return render_template(
        "staff/calendar.html",
        bookings_by_day=group_by_day(rows, lambda b: b.start_at, end=lambda b: b.end_at),
        events_by_day=group_by_day(events, lambda e: e.date),
        events=events,
        event_types=CALENDAR_EVENT_TYPES,
        **_month_context(month),
    )


@bp.post("/calendar/events")
def calendar_event_create():
    f = request.form
    title = (f.get("title") or "").strip()
    day = parse_date_str(f.get("date"))
    if not title or day is None:
        flash(tr("flash.missing_fields"), "err")
        return redirect(url_for("staff.calendar"))

    event = CalendarEvent(
        title=title,
        type=f.get("type") if f.get("type") in CALENDAR_EVENT_TYPES else "other",
        date=day,
        start_time=parse_time_str(f.get("start_time")),
        end_time=parse_time_str(f.get("end_time")),
        description=(f.get("description") or "").strip(),
    )
    db.session.add(event)
    _commit("calendar_event_created", f"{event.type} '{title}' on {day.isoformat()}")
    flash(tr("flash.saved"), "ok")
    return redirect(url_for("staff.calendar", month=day.strftime("%Y-%m")))


@bp.post("/calendar/events/<int:event_id>/delete")
def calendar_event_delete(event_id):
    event = db.get_or_404(CalendarEvent, event_id)
    month = event.date.strftime("%Y-%m")
    db.session.delete(event)
    _commit("calendar_event_deleted", f"'{event.title}' on {event.date.isoformat()}")
    flash(tr("flash.deleted"), "ok")
    return redirect(url_for("staff.calendar", month=month))


# ------- Availability -------

@bp.get("/availability")
def availability():
    month = parse_month(request.args.get("month"), local_today())
    return render_template(
        "staff/availability.html",
        availability=month_availability(month),
        block_statuses=BLOCK_STATUSES,
        **_month_context(month),
    )


def _requested_days(form):
    """A single ``date`` or an inclusive ``start_date``..``end_date`` range."""
    single = parse_date_str(form.get("date"))
    if single is not None:
        return [single]
    start = parse_date_str(form.get("start_date"))
    end = parse_date_str(form.get("end_date"))
    if start is None or end is None or end < start or (end - start).days > MAX_BLOCK_RANGE_DAYS:
        return []
    return [start + timedelta(days=i) for i in range((end - start).days + 1)]


@bp.post("/availability/block")
def availability_block():
    days = _requested_days(request.form)
    if not days:
        flash(tr("flash.invalid_range"), "err")
        return redirect(url_for("staff.availability"))

    status = request.form.get("status")
    status = status if status in BLOCK_STATUSES else "unavailable"
    reason = (request.form.get("reason") or "").strip()

    blocked, skipped = 0, 0
    for day in days:
        start, end = day_bounds(day)
        if overlapping_bookings(start, end):
            skipped += 1
            continue
        block = AvailabilityBlock.query.filter_by(date=day).first()
        if block is None:
            block = AvailabilityBlock(date=day)
            db.session.add(block)
        block.status = status
        block.reason = reason
        blocked += 1

    _commit("availability_blocked", f"{blocked} day(s) from {days[0].isoformat()} marked {status}")
    if blocked:
        flash(tr("flash.days_blocked", count=blocked), "ok")
    if skipped:
        flash(tr("flash.days_skipped_booked", count=skipped), "err")
    return redirect(url_for("staff.availability", month=days[0].strftime("%Y-%m")))


@bp.post("/availability/unblock")
def availability_unblock():
    days = _requested_days(request.form)
    if not days:
        flash(tr("flash.invalid_range"), "err")
        return redirect(url_for("staff.availability"))

    removed = AvailabilityBlock.query.filter(AvailabilityBlock.date.in_(days)).delete(
        synchronize_session=False
    )
    _commit("availability_unblocked", f"{removed} day(s) from {days[0].isoformat()} reopened")
    flash(tr("flash.days_unblocked", count=removed), "ok")
    return redirect(url_for("staff.availability", month=days[0].strftime("%Y-%m")))


# ------- Tasks -------

@bp.get("/tasks")
def tasks():
    status = request.args.get("status", "")
    q = Task.query
    if status in TASK_STATUSES:
        q = q.filter_by(status=status)
    rows = q.order_by(Task.due_date.asc(), Task.id.asc()).all()
    return render_template(
        "staff/tasks.html",
        tasks=rows,
        status=status,
        statuses=TASK_STATUSES,
        priorities=TASK_PRIORITIES,
        categories=TASK_CATEGORIES,
        today=local_today(),
    )


@bp.post("/tasks")
def task_create():
    f = request.form
    title = (f.get("title") or "").strip()
    description = (f.get("description") or "").strip()
    due = parse_date_str(f.get("due_date"))
    if not title or not description or due is None:
        flash(tr("flash.missing_fields"), "err")
        return redirect(url_for("staff.tasks"))

    task = Task(
        title=title,
        description=description,
        due_date=due,
        priority=f.get("priority") if f.get("priority") in TASK_PRIORITIES else "medium",
        category=f.get("category") if f.get("category") in TASK_CATEGORIES else "operations",
        assigned_to=(f.get("assigned_to") or "").strip(),
    )
    db.session.add(task)
    _commit("task_created", f"Task '{title}' due {due.isoformat()}")
    flash(tr("flash.saved"), "ok")
    return redirect(url_for("staff.tasks"))


@bp.post("/tasks/<int:task_id>/status")
def task_status(task_id):
    task = db.get_or_404(Task, task_id)
    new_status = request.form.get("status", "")
    if new_status not in TASK_STATUSES:
        flash(tr("flash.invalid_status"), "err")
        return redirect(url_for("staff.tasks"))

    old = task.status
    task.status = new_status
    _commit("task_updated", f"Task '{task.title}': {old} -> {new_status}")
    flash(tr("flash.task_status", title=task.title, status=tr(f"status.{new_status}")), "ok")
    return redirect(url_for("staff.tasks", status=request.args.get("status", "")))


@bp.post("/tasks/<int:task_id>/delete")
def task_delete(task_id):
    task = db.get_or_404(Task, task_id)
    db.session.delete(task)
    _commit("task_deleted", f"Task '{task.title}' deleted", severity="warning")
    flash(tr("flash.deleted"), "ok")
    return redirect(url_for("staff.tasks"))


# ------- Customers -------

@bp.get("/customers")
def customers():
    search = (request.args.get("q") or "").strip()
    q = Customer.query
    if search:
        like = f"%{search}%"
        q = q.filter(Customer.name.ilike(like) | Customer.email.ilike(like) | Customer.phone.ilike(like))
    return render_template("staff/customers.html", customers=q.order_by(Customer.name.asc()).all(), search=search)


@bp.post("/customers")
def customer_create():
    f = request.form
    name = validate_required_text(f.get("name"), min_length=2)
    email = validate_email_address(f.get("email"))
    if not name.is_valid or not email.is_valid:
        flash(tr(name.error_message or email.error_message), "err")
        return redirect(url_for("staff.customers"))

    address = email.sanitized_value.lower()
    if Customer.query.filter_by(email=address).first() is not None:
        flash(tr("flash.duplicate_email"), "err")
        return redirect(url_for("staff.customers"))

    customer = Customer(
        name=name.sanitized_value,
        email=address,
        phone=(f.get("phone") or "").strip() or None,
        preferences=(f.get("preferences") or "").strip(),
        notes=(f.get("notes") or "").strip(),
    )
    db.session.add(customer)
    _commit("customer_created", f"Customer {address} added")
    flash(tr("flash.saved"), "ok")
    return redirect(url_for("staff.customer_detail", customer_id=customer.id))


@bp.get("/customers/<int:customer_id>")
def customer_detail(customer_id):
    customer = db.get_or_404(Customer, customer_id)
    return render_template("staff/customer_detail.html", customer=customer)


# ------- Announcements -------

@bp.get("/announcements")
def announcements():
    rows = Announcement.query.order_by(Announcement.id.desc()).all()
    return render_template(
        "staff/announcements.html", announcements=rows, types=ANNOUNCEMENT_TYPES, priorities=NORMAL_PRIORITIES
    )


@bp.post("/announcements")
def announcement_create():
    f = request.form
    title = (f.get("title") or "").strip()
    content = (f.get("content") or "").strip()
    if not title or not content:
        flash(tr("flash.missing_fields"), "err")
        return redirect(url_for("staff.announcements"))

    item = Announcement(
        title=title,
        content=content,
        type=f.get("type") if f.get("type") in ANNOUNCEMENT_TYPES else "general",
        priority=f.get("priority") if f.get("priority") in NORMAL_PRIORITIES else "normal",
        status="published" if f.get("publish") else "draft",
        publish_date=parse_date_str(f.get("publish_date")) or local_today(),
    )
    db.session.add(item)
    _commit("announcement_created", f"Announcement '{title}' ({item.status})")
    flash(tr("flash.saved"), "ok")
    return redirect(url_for("staff.announcements"))


@bp.post("/announcements/<int:item_id>/toggle")
def announcement_toggle(item_id):
    item = db.get_or_404(Announcement, item_id)
    item.status = "draft" if item.status == "published" else "published"
    _commit("announcement_updated", f"Announcement '{item.title}' is now {item.status}")
    flash(tr("flash.saved"), "ok")
    return redirect(url_for("staff.announcements"))


@bp.post("/announcements/<int:item_id>/delete")
def announcement_delete(item_id):
    item = db.get_or_404(Announcement, item_id)
    db.session.delete(item)
    _commit("announcement_deleted", f"Announcement '{item.title}' deleted", severity="warning")
    flash(tr("flash.deleted"), "ok")
    return redirect(url_for("staff.announcements"))


# ------- FAQs -------

@bp.get("/faqs")
def faqs():
    return render_template("staff/faqs.html", faqs=Faq.query.order_by(Faq.id.asc()).all())


@bp.post("/faqs")
def faq_create():
    f = request.form
    question = (f.get("question") or "").strip()
    answer = (f.get("answer") or "").strip()
    if not question or not answer:
        flash(tr("flash.missing_fields"), "err")
        return redirect(url_for("staff.faqs"))

    faq = Faq(question=question, answer=answer, category=(f.get("category") or "general").strip())
    db.session.add(faq)
    _commit("faq_created", f"FAQ '{question}'")
    flash(tr("flash.saved"), "ok")
    return redirect(url_for("staff.faqs"))


@bp.post("/faqs/<int:faq_id>/toggle")
def faq_toggle(faq_id):
    faq = db.get_or_404(Faq, faq_id)
    faq.is_published = not faq.is_published
    _commit("faq_updated", f"FAQ {faq.id} published={faq.is_published}")
    flash(tr("flash.saved"), "ok")
    return redirect(url_for("staff.faqs"))


@bp.post("/faqs/<int:faq_id>/delete")
def faq_delete(faq_id):
    faq = db.get_or_404(Faq, faq_id)
    db.session.delete(faq)
    _commit("faq_deleted", f"FAQ {faq.id} deleted", severity="warning")
    flash(tr("flash.deleted"), "ok")
    return redirect(url_for("staff.faqs"))


# ------- Gallery -------

@bp.get("/gallery")
def gallery():
    images = GalleryImage.query.order_by(GalleryImage.uploaded_at.desc()).all()
    return render_template("staff/gallery.html", images=images, categories=GALLERY_CATEGORIES)


@bp.post("/gallery")
def gallery_create():
    f = request.form
    title = (f.get("title") or "").strip()
    url = (f.get("url") or "").strip()
    if not title or not url.startswith(("http://", "https://", "/")):
        flash(tr("flash.missing_fields"), "err")
        return redirect(url_for("staff.gallery"))

    image = GalleryImage(
        title=title,
        url=url,
        category=f.get("category") if f.get("category") in GALLERY_CATEGORIES else "events",
        description=(f.get("description") or "").strip(),
        featured=bool(f.get("featured")),
    )
    db.session.add(image)
    _commit("gallery_image_added", f"Image '{title}'")
    flash(tr("flash.saved"), "ok")
    return redirect(url_for("staff.gallery"))


@bp.post("/gallery/<int:image_id>/feature")
def gallery_feature(image_id):
    image = db.get_or_404(GalleryImage, image_id)
    image.featured = not image.featured
    _commit("gallery_image_updated", f"Image '{image.title}' featured={image.featured}")
    flash(tr("flash.saved"), "ok")
    return redirect(url_for("staff.gallery"))


@bp.post("/gallery/<int:image_id>/delete")
def gallery_delete(image_id):
    image = db.get_or_404(GalleryImage, image_id)
    db.session.delete(image)
    _commit("gallery_image_deleted", f"Image '{image.title}' deleted", severity="warning")
    flash(tr("flash.deleted"), "ok")
    return redirect(url_for("staff.gallery"))


# ------- Content pages -------

@bp.get("/pages")
def pages():
    return render_template("staff/pages.html", pages=ContentPage.query.order_by(ContentPage.slug.asc()).all())


@bp.route("/pages/<slug>", methods=["GET", "POST"])
def page_edit(slug):
    page = ContentPage.query.filter_by(slug=slug).first()
    if request.method == "POST":
        f = request.form
        title = (f.get("title") or "").strip()
        if not title:
            flash(tr("flash.missing_fields"), "err")
            return redirect(url_for("staff.page_edit", slug=slug))
        if page is None:
            page = ContentPage(slug=slug)
            db.session.add(page)
        page.title = title
        page.content = f.get("content") or ""
        page.meta_description = (f.get("meta_description") or "").strip()
        page.is_published = bool(f.get("is_published"))
        _commit("page_updated", f"Page '{slug}' saved (published={page.is_published})")
        flash(tr("flash.saved"), "ok")
        return redirect(url_for("staff.pages"))
    return render_template("staff/page_form.html", page=page, slug=slug)


# ------- Support -------

@bp.get("/support")
def support():
    status = request.args.get("status", "")
    q = Ticket.query
    if status in TICKET_STATUSES:
        q = q.filter_by(status=status)
    return render_template(
        "staff/support.html",
        tickets=q.order_by(Ticket.created_at.desc()).all(),
        status=status,
        statuses=TICKET_STATUSES,
    )


@bp.get("/support/<int:ticket_id>")
def ticket_detail(ticket_id):
    ticket = db.get_or_404(Ticket, ticket_id)
    staff = StaffUser.query.filter_by(status="active").order_by(StaffUser.name.asc()).all()
    return render_template("staff/ticket_detail.html", ticket=ticket, statuses=TICKET_STATUSES, staff=staff)


@bp.post("/support/<int:ticket_id>/reply")
def ticket_reply(ticket_id):
    ticket = db.get_or_404(Ticket, ticket_id)
    body = (request.form.get("body") or "").strip()
    if not body:
        flash(tr("flash.missing_fields"), "err")
        return redirect(url_for("staff.ticket_detail", ticket_id=ticket.id))

    ticket.replies.append(TicketReply(author=session.get("staff_email", "staff"), body=body))
    if ticket.status == "open":
        ticket.status = "in_progress"
    _commit("ticket_replied", f"Reply on {ticket.number}")
    flash(tr("flash.reply_sent"), "ok")
    return redirect(url_for("staff.ticket_detail", ticket_id=ticket.id))


@bp.post("/support/<int:ticket_id>/assign")
def ticket_assign(ticket_id):
    ticket = db.get_or_404(Ticket, ticket_id)
    ticket.assigned_to = (request.form.get("assigned_to") or "").strip()
    _commit("ticket_assigned", f"{ticket.number} assigned to {ticket.assigned_to or 'nobody'}")
    flash(tr("flash.saved"), "ok")
    return redirect(url_for("staff.ticket_detail", ticket_id=ticket.id))


@bp.post("/support/<int:ticket_id>/status")
def ticket_status(ticket_id):
    ticket = db.get_or_404(Ticket, ticket_id)
    new_status = request.form.get("status", "")
    if new_status not in TICKET_STATUSES:
        flash(tr("flash.invalid_status"), "err")
    else:
        old = ticket.status
        ticket.status = new_status
        _commit("ticket_updated", f"{ticket.number}: {old} -> {new_status}")
        flash(tr("flash.saved"), "ok")
    return redirect(url_for("staff.ticket_detail", ticket_id=ticket.id))


# ------- Notifications -------

@bp.get("/notifications")
def notifications():
    rows = Notification.query.order_by(Notification.read.asc(), Notification.created_at.desc()).all()
    return render_template("staff/notifications.html", notifications=rows)


@bp.post("/notifications/<int:note_id>/read")
def notification_read(note_id):
    note = db.get_or_404(Notification, note_id)
    note.read = True
    db.session.commit()
    return redirect(url_for("staff.notifications"))


@bp.post("/notifications/read-all")
def notifications_read_all():
    updated = Notification.query.filter_by(read=False).update({"read": True})
    _commit("notifications_read", f"{updated} notification(s) marked read")
    flash(tr("flash.saved"), "ok")
    return redirect(url_for("staff.notifications"))


# ------- Staff directory -------

@bp.get("/users")
def users():
    rows = StaffUser.query.order_by(StaffUser.name.asc()).all()
    return render_template("staff/users.html", users=rows, roles=STAFF_ROLES, role_info=USER_ROLES)


@bp.post("/users")
def user_create():
    f = request.form
    name = validate_required_text(f.get("name"), min_length=2)
    email = validate_email_address(f.get("email"))
    if not name.is_valid or not email.is_valid:
        flash(tr(name.error_message or email.error_message), "err")
        return redirect(url_for("staff.users"))

    address = email.sanitized_value.lower()
    if StaffUser.query.filter_by(email=address).first() is not None:
        flash(tr("flash.duplicate_email"), "err")
        return redirect(url_for("staff.users"))

    user = StaffUser(
        name=name.sanitized_value,
        email=address,
        role=f.get("role") if f.get("role") in STAFF_ROLES else "support",
        department=(f.get("department") or "").strip(),
    )
    db.session.add(user)
    _commit("user_created", f"Staff member {address} ({user.role}) added")
    flash(tr("flash.saved"), "ok")
    return redirect(url_for("staff.users"))


@bp.post("/users/<int:user_id>/toggle")
def user_toggle(user_id):
    user = db.get_or_404(StaffUser, user_id)
    user.status = "inactive" if user.status == "active" else "active"
    _commit("user_updated", f"Staff member {user.email} is now {user.status}", severity="warning")
    flash(tr("flash.saved"), "ok")
    return redirect(url_for("staff.users"))


# ------- Activity log -------

@bp.get("/logs")
def logs():
    severity = request.args.get("severity", "")
    q = ActivityLog.query
    if severity in ("info", "warning", "error"):
        q = q.filter_by(severity=severity)
    rows = q.order_by(ActivityLog.timestamp.desc(), ActivityLog.id.desc()).limit(200).all()
    return render_template("staff/logs.html", logs=rows, severity=severity)


# ------- Reports -------

def _report_range():
    return parse_date_str(request.args.get("start")), parse_date_str(request.args.get("end"))


@bp.get("/reports")
def reports():
    start, end = _report_range()
    return render_template("staff/reports.html", report=booking_report(start, end), start=start, end=end)


@bp.get("/reports/export.csv")
def reports_export():
    start, end = _report_range()
    body = export_bookings_csv(bookings_for_export(start, end))
    log_activity("report_exported", f"Bookings CSV {start or '-'}..{end or '-'}")
    db.session.commit()
    return Response(
        body,
        mimetype="text/csv",
        headers={"Content-Disposition": "attachment; filename=mavera-hall-bookings.csv"},
    )


@bp.get("/analytics")
def analytics():
    months = parse_int(request.args.get("months")) or 6
    months = max(1, min(months, 24))
    trend = monthly_trend(months, local_today())
    report = booking_report(trend[0]["month"], None)
    peak = max((row["revenue"] for row in trend), default=0)
    return render_template("staff/analytics.html", trend=trend, report=report, months=months, peak=peak)


# ------- Hall & settings -------

@bp.route("/hall", methods=["GET", "POST"])
def hall():
    profile = get_hall_profile()
    if request.method == "POST":
        f = request.form
        name = (f.get("name") or "").strip()
        capacity = parse_int(f.get("capacity"))
        if not name or not capacity or capacity < 1:
            flash(tr("flash.missing_fields"), "err")
            return redirect(url_for("staff.hall"))
        profile.name = name
        profile.capacity = capacity
        for field_name in ("description", "address", "phone", "email", "amenities"):
            setattr(profile, field_name, (f.get(field_name) or "").strip())
        _commit("hall_updated", "Hall information updated")
        flash(tr("flash.saved"), "ok")
        return redirect(url_for("staff.hall"))
    return render_template("staff/hall.html", hall=profile)


RULE_FIELDS = {
    "min_guests": parse_int,
    "max_guests": parse_int,
    "min_notice_days": parse_int,
    "max_advance_days": parse_int,
    "cancellation_deadline_days": parse_int,
    "deposit_percentage": parse_amount,
    "late_cancellation_fee_percentage": parse_amount,
}


@bp.route("/settings", methods=["GET", "POST"])
def settings():
    profile = get_hall_profile()
    if request.method == "POST":
        values = {name: parse(request.form.get(name)) for name, parse in RULE_FIELDS.items()}
        invalid = [name for name, value in values.items() if value is None]
        if not invalid:
            if values["min_guests"] > values["max_guests"] or values["min_notice_days"] > values["max_advance_days"]:
                invalid.append("range")
            for pct in ("deposit_percentage", "late_cancellation_fee_percentage"):
                if values[pct] > 1:
                    invalid.append(pct)
        if invalid:
            flash(tr("flash.invalid_settings"), "err")
            return render_template("staff/settings.html", hall=profile, form=request.form, invalid=invalid), 400

        for name, value in values.items():
            setattr(profile, name, value)
        _commit("settings_updated", ", ".join(f"{k}={v}" for k, v in values.items()))
        logger.info("booking_rules_updated", **values)
        flash(tr("flash.saved"), "ok")
        return redirect(url_for("staff.settings"))
    return render_template("staff/settings.html", hall=profile, form={}, invalid=[])


@bp.get("/profile")
def profile():
    email = session.get("staff_email")
    member = StaffUser.query.filter_by(email=email).first()
    recent = (
        ActivityLog.query.filter_by(user=email).order_by(ActivityLog.timestamp.desc()).limit(10).all()
    )
    return render_template("staff/profile.html", email=email, member=member, recent=recent)

