"""JSON API for the booking widget and other front ends (CORS enabled)."""

from __future__ import annotations

from datetime import datetime

import structlog
from flask import Blueprint, jsonify, request

from ..auth import login_required
from ..bookings import create_booking, day_summary, delete_booking, local_today, month_availability, parse_local
from ..calendar_grid import build_month_grid, parse_month
from ..errors import BookingConflictError, BookingValidationError
from ..models import Booking, db
from ..validation import parse_date_str
from . import tr

logger = structlog.get_logger("api")

bp = Blueprint("api", __name__)


@bp.get("/api/bookings")
def list_bookings():
    date_q = request.args.get("date")
    if not date_q:
        return jsonify({"error": "Date parameter is required"}), 400

    day = parse_date_str(date_q)
    if day is None:
        return jsonify({"error": "Invalid date format. Use YYYY-MM-DD."}), 400

    summary = day_summary(day)
    return jsonify({
        "date": day.isoformat(),
        "bookings": [b.to_dict() for b in summary["bookings"]],
        "todays_count": summary["todays_count"],
        "hours_booked": summary["hours_booked"],
    })


@bp.get("/api/bookings/<int:booking_id>")
def booking_json(booking_id: int):
    b = db.get_or_404(Booking, booking_id)
    return jsonify(b.to_dict())


def _booking_payload(data: dict) -> dict:
    """Accept either event_date/start_time/end_time or ISO-ish start_at/end_at."""
    payload = dict(data)
    if not payload.get("event_date") and payload.get("start_at"):
        try:
            start_at = parse_local(str(payload["start_at"]))
            payload["event_date"] = start_at.strftime("%Y-%m-%d")
            payload["start_time"] = start_at.strftime("%H:%M")
            if payload.get("end_at"):
                payload["end_time"] = parse_local(str(payload["end_at"])).strftime("%H:%M")
        except (ValueError, OverflowError):
            # نترك الحقول فارغة ليبلّغ التحقق عنها
            payload.pop("start_at", None)
    return payload


@bp.post("/api/book")
def book():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}

    try:
        booking = create_booking(_booking_payload(data), local_today(), source="api")
    except BookingValidationError as e:
        return jsonify({
            "message": tr(e.message),
            "errors": {name: tr(key) for name, key in e.field_errors.items()},
        }), 400
    except BookingConflictError as e:
        return jsonify({
            "message": tr(e.message, title=e.conflicting_title or ""),
            "conflict": e.conflicting_title,
        }), 409

    return jsonify({
        "message": tr("booking.confirmation.received"),
        "id": booking.id,
        "reference": booking.reference,
        "status": booking.status,
    }), 201


@bp.delete("/api/bookings/<int:booking_id>")
@login_required
def remove_booking(booking_id: int):
    b = db.get_or_404(Booking, booking_id)
    reference = b.reference
    delete_booking(b)
    logger.info("booking_deleted", reference=reference, via="api")
    return jsonify({"message": tr("flash.booking_deleted", reference=reference)}), 200


@bp.get("/api/availability")
def availability():
    month = parse_month(request.args.get("month"), local_today())
    days = month_availability(month)
    cells = []
    for cell in build_month_grid(month):
        if cell is None:
            cells.append(None)
            continue
        info = days[cell]
        cells.append({
            "date": cell.isoformat(),
            "status": info["status"],
            "reason": info["reason"],
            "bookings": len(info["bookings"]),
        })
    return jsonify({"month": month.strftime("%Y-%m"), "cells": cells})


@bp.get("/health")
def health():
    return {"ok": True, "now": datetime.now().isoformat(timespec="seconds")}
