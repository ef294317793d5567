"""Translation lookup, language selection and date formatting."""

import re
from datetime import date
from pathlib import Path
from types import SimpleNamespace

import pytest

from mavera_hall.i18n import (
    LANGUAGE_COOKIE,
    format_date,
    lookup,
    normalize_language,
    resolve_language,
    text_direction,
    translate,
)
from mavera_hall.translations import TRANSLATIONS

TEMPLATES = Path(__file__).resolve().parents[1] / "mavera_hall" / "templates"


def _flatten(tree, prefix=""):
    keys = set()
    for name, value in tree.items():
        path = f"{prefix}{name}"
        if isinstance(value, dict):
            keys |= _flatten(value, path + ".")
        else:
            keys.add(path)
    return keys


class TestTranslate:

    def test_current_language(self):
        assert translate("ar", "nav.home") == "الرئيسية"
        assert translate("en", "nav.home") == "Home"

    def test_unknown_language_uses_english(self):
        assert normalize_language("fr") == "en"
        assert translate("fr", "nav.contact") == "Contact"

    def test_falls_back_to_english_then_key(self, monkeypatch):
        monkeypatch.setitem(TRANSLATIONS["en"], "only_english", "Hello")
        assert translate("ar", "only_english") == "Hello"
        assert translate("ar", "nav.does_not_exist") == "nav.does_not_exist"

    def test_non_string_values_are_not_returned(self):
        # calendar.months is a list, so it is not a displayable string
        assert translate("en", "calendar.months") == "calendar.months"
        assert lookup("en", "calendar.months")[0] == "January"

    def test_parameters(self):
        assert translate("en", "flash.days_blocked", count=3) == "3 day(s) blocked."
        assert "{title}" in translate("en", "errors.booking.conflict")
        assert translate("en", "errors.booking.conflict", title="Gala").endswith("Gala")

    def test_both_languages_define_the_same_keys(self):
        assert _flatten(TRANSLATIONS["ar"]) == _flatten(TRANSLATIONS["en"])

    def test_every_template_key_resolves(self):
        keys = set()
        for path in TEMPLATES.rglob("*.html"):
            keys |= set(re.findall(r"\bt\('([a-z_.\-]+)'\)", path.read_text(encoding="utf-8")))
        assert keys
        missing = sorted(k for k in keys for lang in ("ar", "en") if translate(lang, k) == k)
        assert missing == []


class TestLanguage:

    def test_direction(self):
        assert text_direction("ar") == "rtl"
        assert text_direction("en") == "ltr"

    @pytest.mark.parametrize("cookie,expected", [("en", "en"), ("ar", "ar"), ("de", "ar"), (None, "ar")])
    def test_resolve_from_cookie(self, cookie, expected):
        cookies = {LANGUAGE_COOKIE: cookie} if cookie else {}
        assert resolve_language(SimpleNamespace(cookies=cookies), default="ar") == expected


class TestFormatDate:

    def test_styles(self):
        day = date(2024, 12, 15)
        assert format_date(day, "en", "short") == "2024-12-15"
        assert format_date(day, "en") == "15 December 2024"
        assert format_date(day, "ar", "month") == "ديسمبر 2024"
        assert format_date(day, "en", "weekday") == "Sunday, 15 December 2024"
        assert format_date(day, "ar", "weekday").startswith("الأحد")

    def test_empty(self):
        assert format_date(None, "en") == ""
