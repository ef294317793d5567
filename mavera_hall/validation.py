"""
Form validation.

Validators return result objects instead of raising; error messages are
translation keys (``errors.validation.*`` / ``errors.booking.*``) so the
page can render them in the visitor's language.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date, datetime, time
from typing import Dict, List, Optional

VALIDATION_PATTERNS = {
    "email": re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$"),
    "phone": re.compile(r"^\+?[\d\s\-()]+$"),
    "arabic_text": re.compile(r"^[\u0600-\u06FF\s]+$"),
    "english_text": re.compile(r"^[a-zA-Z\s]+$"),
    "alphanumeric": re.compile(r"^[a-zA-Z0-9]+$"),
    "strong_password": re.compile(
        r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[@$!%*?&])[A-Za-z\d@$!%*?&]{8,}$"
    ),
}

EVENT_TYPES = [
    "wedding",
    "engagement",
    "birthday",
    "corporate",
    "graduation",
    "anniversary",
    "conference",
    "other",
]


@dataclass
class ValidationResult:
    is_valid: bool
    error_message: Optional[str] = None
    sanitized_value: Optional[str] = None


@dataclass
class FormValidationResult:
    is_valid: bool = True
    field_errors: Dict[str, str] = field(default_factory=dict)
    general_errors: List[str] = field(default_factory=list)
    cleaned: Dict[str, object] = field(default_factory=dict)

    def add(self, name: str, message: str) -> None:
        self.field_errors.setdefault(name, message)
        self.is_valid = False


# ------- Basic validators -------

def _text(value) -> str:
    """Trimmed text for any submitted value; JSON bodies may carry numbers or booleans."""
    return "" if value is None else str(value).strip()


def _pattern_validator(pattern_name: str, error_key: str):
    pattern = VALIDATION_PATTERNS[pattern_name]

    def validate(value: Optional[str]) -> ValidationResult:
        trimmed = _text(value)
        if not trimmed:
            return ValidationResult(False, "errors.validation.required")
        ok = pattern.match(trimmed) is not None
        return ValidationResult(ok, None if ok else error_key, trimmed)

    return validate


validate_email_address = _pattern_validator("email", "errors.validation.invalid_email")
validate_phone_number = _pattern_validator("phone", "errors.validation.invalid_phone")


def validate_password_strength(password: Optional[str]) -> ValidationResult:
    if not password:
        return ValidationResult(False, "errors.validation.required")
    ok = VALIDATION_PATTERNS["strong_password"].match(password) is not None
    # كلمات المرور لا تُقصّ
    return ValidationResult(ok, None if ok else "errors.validation.password_too_weak", password)


def validate_password_confirmation(original: str, confirmation: Optional[str]) -> ValidationResult:
    if not confirmation:
        return ValidationResult(False, "errors.validation.required")
    ok = original == confirmation
    return ValidationResult(ok, None if ok else "errors.validation.password_mismatch", confirmation)


def validate_required_text(value: Optional[str], min_length: int = 1) -> ValidationResult:
    trimmed = _text(value)
    if not trimmed:
        return ValidationResult(False, "errors.validation.required")
    if len(trimmed) < min_length:
        return ValidationResult(False, "errors.validation.too_short", trimmed)
    return ValidationResult(True, None, trimmed)


def parse_date_str(value: Optional[str]) -> Optional[date]:
    try:
        return datetime.strptime(_text(value), "%Y-%m-%d").date()
    except ValueError:
        return None


def parse_time_str(value: Optional[str]) -> Optional[time]:
    for fmt in ("%H:%M", "%H:%M:%S"):
        try:
            return datetime.strptime(_text(value), fmt).time()
        except ValueError:
            continue
    return None


def parse_int(value) -> Optional[int]:
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return None


def parse_amount(value) -> Optional[float]:
    raw = str(value if value is not None else "").strip()
    if not raw:
        return 0.0
    try:
        amount = float(raw)
    except ValueError:
        return None
    return amount if amount >= 0 else None


# ------- Business rules -------

def validate_event_guest_count(count: Optional[int], profile) -> ValidationResult:
    if count is None:
        return ValidationResult(False, "errors.validation.invalid_number")
    if count < profile.min_guests or count > profile.max_guests:
        return ValidationResult(False, "errors.booking.guest_count")
    return ValidationResult(True, None, str(count))


def validate_event_booking_date(event_date: date, today: date, profile,
                                enforce_notice: bool = True) -> ValidationResult:
    days_ahead = (event_date - today).days
    if days_ahead < 0:
        return ValidationResult(False, "errors.booking.past_date")
    if enforce_notice and days_ahead < profile.min_notice_days:
        return ValidationResult(False, "errors.booking.advance_required")
    if days_ahead > profile.max_advance_days:
        return ValidationResult(False, "errors.booking.advance_too_far")
    return ValidationResult(True, None, event_date.isoformat())


def validate_booking_form(form, today: date, profile, enforce_notice: bool = True) -> FormValidationResult:
    """
    Validate a booking request. ``form`` is any mapping (request.form, JSON
    body). On success ``result.cleaned`` holds typed values.
    """
    result = FormValidationResult()

    name = validate_required_text(form.get("name"), min_length=2)
    if name.is_valid:
        result.cleaned["name"] = name.sanitized_value
    else:
        result.add("name", name.error_message)

    email = validate_email_address(form.get("email"))
    if email.is_valid:
        result.cleaned["email"] = email.sanitized_value.lower()
    else:
        result.add("email", email.error_message)

    phone_raw = _text(form.get("phone"))
    if phone_raw:
        phone = validate_phone_number(phone_raw)
        if phone.is_valid:
            result.cleaned["phone"] = phone.sanitized_value
        else:
            result.add("phone", phone.error_message)
    else:
        result.cleaned["phone"] = ""

    event_type = _text(form.get("event_type"))
    if event_type not in EVENT_TYPES:
        result.add("event_type", "errors.validation.required")
    else:
        result.cleaned["event_type"] = event_type

    event_date = parse_date_str(form.get("event_date"))
    if event_date is None:
        result.add("event_date", "errors.validation.invalid_date")
    else:
        checked = validate_event_booking_date(event_date, today, profile, enforce_notice)
        if checked.is_valid:
            result.cleaned["event_date"] = event_date
        else:
            result.add("event_date", checked.error_message)

    for name_ in ("start_time", "end_time"):
        parsed = parse_time_str(form.get(name_))
        if parsed is None:
            result.add(name_, "errors.validation.invalid_time")
        else:
            result.cleaned[name_] = parsed

    guests = validate_event_guest_count(parse_int(form.get("guest_count")), profile)
    if guests.is_valid:
        result.cleaned["guest_count"] = int(guests.sanitized_value)
    else:
        result.add("guest_count", guests.error_message)

    amount = parse_amount(form.get("total_amount"))
    if amount is None:
        result.add("total_amount", "errors.validation.invalid_number")
    else:
        result.cleaned["total_amount"] = amount

    result.cleaned["special_requests"] = _text(form.get("special_requests"))
    result.cleaned["title"] = _text(form.get("title"))
    return result


def validate_contact_form(form) -> FormValidationResult:
    result = FormValidationResult()

    for name, min_length in (("name", 2), ("subject", 3), ("message", 10)):
        checked = validate_required_text(form.get(name), min_length=min_length)
        if checked.is_valid:
            result.cleaned[name] = checked.sanitized_value
        else:
            result.add(name, checked.error_message)

    email = validate_email_address(form.get("email"))
    if email.is_valid:
        result.cleaned["email"] = email.sanitized_value.lower()
    else:
        result.add("email", email.error_message)

    phone_raw = _text(form.get("phone"))
    if phone_raw and not validate_phone_number(phone_raw).is_valid:
        result.add("phone", "errors.validation.invalid_phone")
    result.cleaned["phone"] = phone_raw
    return result
