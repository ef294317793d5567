"""HTTP blueprints: public site, staff console and JSON API."""

from flask import g

from ..i18n import translate


def tr(key: str, **params) -> str:
    """Translate *key* in the current request's language."""
    return translate(g.get("lang") or "en", key, **params)
