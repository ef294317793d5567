"""CSS class helpers for badges and conditional class lists."""

from typing import Dict

GREY = "badge-grey"

BADGE_CLASSES: Dict[str, Dict[str, str]] = {
    "status": {
        "confirmed": "badge-green",
        "pending": "badge-yellow",
        "cancelled": "badge-red",
        "completed": "badge-blue",
        "scheduled": "badge-blue",
    },
    "task_status": {
        "pending": "badge-yellow",
        "in-progress": "badge-blue",
        "completed": "badge-green",
    },
    "priority": {
        "high": "badge-red",
        "medium": "badge-yellow",
        "normal": "badge-blue",
        "low": "badge-green",
    },
    "ticket_status": {
        "open": "badge-red",
        "in_progress": "badge-yellow",
        "resolved": "badge-green",
        "closed": GREY,
    },
    "event_type": {
        "booking": "badge-blue",
        "maintenance": "badge-red",
        "meeting": "badge-green",
    },
    "announcement_type": {
        "maintenance": "badge-yellow",
        "service": "badge-green",
        "promotion": "badge-purple",
        "general": "badge-blue",
    },
    "availability": {
        "available": "cell-available",
        "booked": "cell-booked",
        "unavailable": "cell-unavailable",
        "maintenance": "cell-maintenance",
    },
    "account": {
        "active": "badge-green",
        "inactive": GREY,
        "published": "badge-green",
        "draft": GREY,
    },
    "severity": {
        "info": "badge-blue",
        "warning": "badge-yellow",
        "error": "badge-red",
    },
}


def badge_class(kind: str, value) -> str:
    return BADGE_CLASSES.get(kind, {}).get(str(value), GREY)


def class_names(*parts) -> str:
    """Join truthy class strings, dropping duplicates but keeping order."""
    seen = []
    for part in parts:
        if not part:
            continue
        for name in str(part).split():
            if name not in seen:
                seen.append(name)
    return " ".join(seen)
