"""
Mavera Hall - bilingual event-hall website and staff console.

Run locally:
    flask --app mavera_hall seed
    flask --app mavera_hall run   -> http://127.0.0.1:5000
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional

from flask import Flask, g, request
from flask_cors import CORS

from .config import Settings, load_settings
from .errors import register_error_handlers
from .i18n import (
    NAV_ITEMS,
    SUPPORTED_LANGUAGES,
    format_date,
    make_translator,
    resolve_language,
    text_direction,
)
from .logging import init_request_logging, log_application_initialized, setup_logging
from .models import db
from .styling import badge_class, class_names

__version__ = "1.0.0"


def create_app(settings: Optional[Settings] = None, **overrides) -> Flask:
    settings = settings or load_settings()
    setup_logging(debug=settings.debug, json_output=settings.log_json)

    app = Flask(__name__)
    app.config.update(
        SECRET_KEY=settings.secret_key,
        SQLALCHEMY_DATABASE_URI=settings.database_url,
        SQLALCHEMY_TRACK_MODIFICATIONS=False,
        PERMANENT_SESSION_LIFETIME=timedelta(hours=12),
        APP_TIMEZONE=settings.timezone,
        DEFAULT_LANGUAGE=settings.default_language,
        DEMO_EMAIL=settings.demo_email,
        DEMO_PASSWORD=settings.demo_password,
        MAX_BOOKING_HOURS=settings.max_booking_hours,
        CUSTOM_KEY=settings.custom_key,
        BOOKING_RULES=settings.booking.model_dump(),
        DEBUG=settings.debug,
    )
    app.config.update(overrides)

    db.init_app(app)
    CORS(app, resources={r"/api/*": {"origins": settings.cors_origin_list}})

    init_request_logging(app)
    register_error_handlers(app)
    _init_i18n(app)

    from . import auth
    from .cli import register_commands
    from .views import api, public, staff

    app.register_blueprint(auth.bp)
    app.register_blueprint(public.bp)
    app.register_blueprint(staff.bp)
    app.register_blueprint(api.bp)
    register_commands(app)

    with app.app_context():
        db.create_all()

    log_application_initialized(app)
    return app


def _init_i18n(app: Flask) -> None:

    @app.before_request
    def _select_language():
        g.lang = resolve_language(request, app.config["DEFAULT_LANGUAGE"])

    @app.context_processor
    def _inject_i18n():
        lang = g.get("lang") or app.config["DEFAULT_LANGUAGE"]
        return {
            "t": make_translator(lang),
            "lang": lang,
            "dir": text_direction(lang),
            "languages": SUPPORTED_LANGUAGES,
            "nav_items": NAV_ITEMS,
            "badge_class": badge_class,
            "class_names": class_names,
            "now": datetime.now(),
        }

    @app.template_filter("localdate")
    def _localdate(value, style="long"):
        return format_date(value, g.get("lang") or app.config["DEFAULT_LANGUAGE"], style)

    @app.template_filter("money")
    def _money(value):
        return f"{value or 0:,.0f}"
