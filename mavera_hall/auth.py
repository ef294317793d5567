"""Staff sign-in against the configured demo account."""

from __future__ import annotations

from datetime import datetime
from functools import wraps
from typing import Optional
from urllib.parse import urlparse

import structlog
from flask import (
    Blueprint,
    current_app,
    jsonify,
    redirect,
    render_template,
    request,
    session,
    url_for,
)

from .activity import log_activity
from .models import StaffUser, db

logger = structlog.get_logger("auth")

bp = Blueprint("auth", __name__)

# Bilingual on purpose: shown before the visitor has picked a language
LOGIN_ERRORS = {
    "email_required": "البريد الإلكتروني مطلوب - Email is required",
    "password_required": "كلمة المرور مطلوبة - Password is required",
    "invalid_email": "البريد الإلكتروني غير صحيح - Invalid email format",
    "password_too_short": "كلمة المرور قصيرة جداً - Password too short",
    "invalid_credentials": "بيانات الدخول غير صحيحة - Invalid email or password",
}


def check_credentials(email: str, password: str):
    """Return an error key from LOGIN_ERRORS, or None when the login is valid."""
    email = (email or "").strip()
    password = password or ""

    if not email:
        return "email_required"
    if not password.strip():
        return "password_required"
    if len(email) < 5:
        return "invalid_email"
    if len(password) < 6:
        return "password_too_short"

    expected_email = current_app.config["DEMO_EMAIL"]
    expected_password = current_app.config["DEMO_PASSWORD"]
    if email.lower() != expected_email.lower() or password != expected_password:
        return "invalid_credentials"
    return None


def is_logged_in() -> bool:
    return bool(session.get("staff_email"))


def login_required(view):
    @wraps(view)
    def wrapped(*args, **kwargs):
        if not is_logged_in():
            if request.path.startswith("/api/"):
                return jsonify({"error": "Authentication required"}), 401
            return redirect(url_for("auth.login", next=request.full_path.rstrip("?")))
        return view(*args, **kwargs)

    return wrapped


def is_safe_redirect(target: Optional[str]) -> bool:
    """True for same-site relative paths only."""
    # browsers read "//host" and "/\host" as protocol-relative
    if not target or not target.startswith("/") or target.startswith(("//", "/\\")):
        return False
    parsed = urlparse(target)
    return not parsed.scheme and not parsed.netloc


def _safe_next(target: str) -> str:
    return target if is_safe_redirect(target) else url_for("staff.dashboard")


@bp.route("/login", methods=["GET", "POST"])
def login():
    error = None
    email = ""
    next_url = request.values.get("next", "")

    if request.method == "POST":
        email = (request.form.get("email") or "").strip()
        password = request.form.get("password") or ""
        error_key = check_credentials(email, password)

        if error_key is None:
            session.clear()
            session["staff_email"] = email.lower()
            session.permanent = True

            staff = StaffUser.query.filter_by(email=email.lower()).first()
            if staff is not None:
                staff.last_login = datetime.now()
            log_activity("login_success", f"{email} signed in", user=email.lower())
            db.session.commit()
            logger.info("login_success", email=email)
            return redirect(_safe_next(next_url))

        error = LOGIN_ERRORS[error_key]
        if error_key == "invalid_credentials":
            log_activity("login_failed", f"Failed sign-in for {email}", severity="warning", user=email or "anonymous")
            db.session.commit()
        logger.warning("login_failed", email=email, reason=error_key)

    return render_template("login.html", error=error, email=email, next_url=next_url)


@bp.route("/logout", methods=["POST"])
def logout():
    email = session.get("staff_email")
    if email:
        log_activity("logout", f"{email} signed out", user=email)
        db.session.commit()
    session.pop("staff_email", None)
    return redirect(url_for("public.home"))


@bp.app_context_processor
def inject_staff():
    return {"staff_email": session.get("staff_email"), "logged_in": is_logged_in()}
