"""Activity log and staff notification helpers."""

from flask import has_request_context, request, session

from .models import ActivityLog, Notification, db


def current_actor() -> str:
    if has_request_context():
        return session.get("staff_email") or "anonymous"
    return "system"


def log_activity(action: str, description: str = "", severity: str = "info",
                 user: str = None) -> ActivityLog:
    """Add an activity row to the session; the caller commits."""
    entry = ActivityLog(
        user=user or current_actor(),
        action=action,
        description=description,
        severity=severity,
    )
    if has_request_context():
        entry.ip_address = request.remote_addr or ""
        entry.user_agent = (request.user_agent.string or "")[:255]
    db.session.add(entry)
    return entry


def notify(type_: str, title: str, message: str, priority: str = "normal") -> Notification:
    note = Notification(type=type_, title=title, message=message, priority=priority)
    db.session.add(note)
    return note
