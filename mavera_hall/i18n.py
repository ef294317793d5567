"""Bilingual (Arabic/English) lookup helpers.

Translations live in nested dictionaries keyed by language code (see
``translations.py``) and are addressed with dot-separated paths such as
``booking.form.guest_count``. A lookup falls back to English and finally to
the key itself, so a missing string never breaks a page.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict, Optional

import structlog

from .translations import TRANSLATIONS

logger = structlog.get_logger("i18n")

LANGUAGE_COOKIE = "mavera-hall-language"
FALLBACK_LANGUAGE = "en"

SUPPORTED_LANGUAGES: Dict[str, Dict[str, str]] = {
    "ar": {"name": "العربية", "english_name": "Arabic", "direction": "rtl", "flag": "🇸🇦"},
    "en": {"name": "English", "english_name": "English", "direction": "ltr", "flag": "🇺🇸"},
}

# Public navbar; labels are translation keys
NAV_ITEMS = [
    ("public.home", "nav.home"),
    ("public.about", "nav.about"),
    ("public.services", "nav.services"),
    ("public.gallery", "nav.gallery"),
    ("public.hall_details", "nav.hall_details"),
    ("public.faqs", "nav.faqs"),
    ("public.contact", "nav.contact"),
]

_MISSING = object()


def normalize_language(lang: Optional[str]) -> str:
    lang = (lang or "").strip().lower()
    return lang if lang in SUPPORTED_LANGUAGES else FALLBACK_LANGUAGE


def text_direction(lang: str) -> str:
    return SUPPORTED_LANGUAGES[normalize_language(lang)]["direction"]


def _nested_value(tree: Any, path: str) -> Any:
    current = tree
    for part in path.split("."):
        if isinstance(current, dict) and part in current:
            current = current[part]
        elif isinstance(current, list) and part.isdigit() and int(part) < len(current):
            current = current[int(part)]
        else:
            return _MISSING
    return current


def lookup(lang: str, key: str, default: Any = None) -> Any:
    """Return the raw value (string, list or dict) stored at *key*."""
    lang = normalize_language(lang)
    value = _nested_value(TRANSLATIONS.get(lang, {}), key)
    if value is _MISSING and lang != FALLBACK_LANGUAGE:
        value = _nested_value(TRANSLATIONS[FALLBACK_LANGUAGE], key)
    return default if value is _MISSING else value


def translate(lang: str, key: str, **params) -> str:
    """
    Resolve *key* for *lang*: current language, then English, then the key.
    Keyword arguments are ``str.format`` substitutions.
    """
    lang = normalize_language(lang)
    value = _nested_value(TRANSLATIONS.get(lang, {}), key)

    if not isinstance(value, str) and lang != FALLBACK_LANGUAGE:
        value = _nested_value(TRANSLATIONS[FALLBACK_LANGUAGE], key)
        if isinstance(value, str):
            logger.warning("translation_fallback_english", key=key, language=lang)

    if not isinstance(value, str):
        logger.error("translation_missing", key=key, language=lang)
        return key

    if params:
        try:
            return value.format(**params)
        except (KeyError, IndexError, ValueError):
            logger.error("translation_format_failed", key=key, language=lang)
            return value
    return value


def make_translator(lang: str):
    def t(key: str, **params) -> str:
        return translate(lang, key, **params)

    return t


def resolve_language(request, default: str = "ar") -> str:
    """Language from the preference cookie, else *default*."""
    saved = request.cookies.get(LANGUAGE_COOKIE)
    if saved and saved in SUPPORTED_LANGUAGES:
        return saved
    return default if default in SUPPORTED_LANGUAGES else FALLBACK_LANGUAGE


# --- Dates ---

DATE_STYLES = ("short", "long", "month", "weekday")


def format_date(value, lang: str, style: str = "long") -> str:
    """Render *value* with translated month/weekday names.

    Styles: ``short`` (2024-12-15), ``long`` (15 December 2024),
    ``month`` (December 2024), ``weekday`` (Sunday, 15 December 2024).
    """
    if value is None:
        return ""
    if isinstance(value, datetime):
        value = value.date()
    if not isinstance(value, date):
        return str(value)

    if style == "short":
        return value.strftime("%Y-%m-%d")

    months = lookup(lang, "calendar.months", [])
    month_name = months[value.month - 1] if len(months) == 12 else value.strftime("%B")
    if style == "month":
        return f"{month_name} {value.year}"

    text = f"{value.day} {month_name} {value.year}"
    if style == "weekday":
        days = lookup(lang, "calendar.weekdays", [])
        # Translations are Sunday-first; date.weekday() is Monday-first
        idx = (value.weekday() + 1) % 7
        day_name = days[idx] if len(days) == 7 else value.strftime("%A")
        text = f"{day_name}، {text}" if normalize_language(lang) == "ar" else f"{day_name}, {text}"
    return text
